"""Environment-variable-based configuration for the Streamlit app."""

from __future__ import annotations

import os
from pathlib import Path

GOOGLE_CLIENT_SECRETS: Path = Path(
    os.environ.get("GOOGLE_CLIENT_SECRETS", "credentials.json")
).expanduser()
GOOGLE_TOKEN_PATH: Path = Path(
    os.environ.get("GOOGLE_TOKEN_PATH", "~/.workout_feed/token.json")
).expanduser()
FEED_LOOKBACK_DAYS: int = int(os.environ.get("FEED_LOOKBACK_DAYS", "1"))
FEED_LOOKAHEAD_DAYS: int = int(os.environ.get("FEED_LOOKAHEAD_DAYS", "14"))
FEED_DEMO_MODE: bool = os.environ.get("FEED_DEMO_MODE", "1").lower() in ("1", "true", "yes")
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
