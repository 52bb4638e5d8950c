"""Root pytest configuration."""

from pathlib import Path

from dotenv import load_dotenv

# TZGROUPS_* settings can come from .env files; .env.local wins
_root = Path(__file__).parent
load_dotenv(_root / ".env")
load_dotenv(_root / ".env.local", override=True)
