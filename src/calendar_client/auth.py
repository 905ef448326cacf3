"""Google Calendar authentication helpers.

Wraps google-auth / google-auth-oauthlib token management with a clean
error hierarchy.
"""

from __future__ import annotations

import logging
from pathlib import Path

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow  # type: ignore[import-untyped]

from calendar_client.exceptions import CalendarAuthError

logger = logging.getLogger(__name__)

_DEFAULT_TOKEN_PATH = Path("~/.workout_feed/token.json").expanduser()

# Read access for the feed, write access for deleting events.
SCOPES = ["https://www.googleapis.com/auth/calendar.events",
          "https://www.googleapis.com/auth/calendar.readonly"]


def create_credentials(
    client_secrets_file: Path | str,
    token_path: Path | str = _DEFAULT_TOKEN_PATH,
    scopes: list[str] | None = None,
) -> Credentials:
    """Authenticate with Google and return calendar credentials.

    Two-phase login:
    1. If a saved token exists, load it (refreshing it when expired).
    2. If there is no token or it cannot be used, run the installed-app
       OAuth flow in the browser and save the new token.

    Parameters
    ----------
    client_secrets_file : Path | str
        OAuth client secrets JSON downloaded from the Google console.
    token_path : Path | str
        Where the user's token is persisted.
    scopes : list[str], optional
        OAuth scopes; defaults to :data:`SCOPES`.

    Returns
    -------
    Credentials
        Valid credentials.
    """
    token_path = Path(token_path)
    scopes = scopes or SCOPES

    # Phase 1: saved token
    if token_path.exists():
        try:
            creds = _load_token(token_path, scopes)
            logger.info("Resumed Google session from %s", token_path)
            return creds
        except CalendarAuthError:
            logger.info("Token resume failed, starting OAuth flow")

    # Phase 2: interactive OAuth flow
    secrets = Path(client_secrets_file)
    if not secrets.exists():
        raise CalendarAuthError(f"Client secrets file not found: {secrets}")

    try:
        flow = InstalledAppFlow.from_client_secrets_file(str(secrets), scopes)
        creds = flow.run_local_server(port=0)
    except Exception as exc:
        raise CalendarAuthError(f"Login failed: {exc}") from exc

    _save_token(creds, token_path)
    logger.info("Signed in via OAuth and saved token to %s", token_path)
    return creds


def resume_credentials(
    token_path: Path | str = _DEFAULT_TOKEN_PATH, scopes: list[str] | None = None
) -> Credentials:
    """Resume a session from a saved token (no browser flow).

    Raises ``CalendarAuthError`` if the token is missing or unusable.
    """
    token_path = Path(token_path)
    if not token_path.exists():
        raise CalendarAuthError(f"No saved token at {token_path}")
    return _load_token(token_path, scopes or SCOPES)


def is_authenticated(token_path: Path | str = _DEFAULT_TOKEN_PATH) -> bool:
    """Return True if a usable token exists at *token_path*."""
    try:
        resume_credentials(token_path)
        return True
    except CalendarAuthError:
        return False


def clear_tokens(token_path: Path | str = _DEFAULT_TOKEN_PATH) -> None:
    """Delete the saved token (sign out)."""
    token_path = Path(token_path)
    if token_path.exists():
        token_path.unlink()
        logger.info("Cleared token at %s", token_path)


def _load_token(token_path: Path, scopes: list[str]) -> Credentials:
    try:
        creds = Credentials.from_authorized_user_file(str(token_path), scopes)
    except (OSError, ValueError) as exc:
        raise CalendarAuthError(f"Unreadable token at {token_path}: {exc}") from exc

    if creds.valid:
        return creds

    if creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
        except Exception as exc:
            raise CalendarAuthError(f"Token refresh failed: {exc}") from exc
        _save_token(creds, token_path)
        return creds

    raise CalendarAuthError(f"Token at {token_path} is invalid")


def _save_token(creds: Credentials, token_path: Path) -> None:
    token_path.parent.mkdir(parents=True, exist_ok=True)
    token_path.write_text(creds.to_json())
