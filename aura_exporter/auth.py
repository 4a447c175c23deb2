"""Logging in to the frame service and building authenticated sessions."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import requests

from .models import AuthResponse

AUTH_FILE_NAME = "aura-auth.json"
LOGIN_URL = "https://api.pushd.com/v5/login.json"

_log = logging.getLogger(__name__)
_cached_client: requests.Session | None = None


def login() -> None:
    """Log in with AURA_EMAIL and AURA_PASSWORD and store the response on disk."""
    email = os.environ.get("AURA_EMAIL")
    password = os.environ.get("AURA_PASSWORD")
    if email is None and password is None:
        raise RuntimeError(
            "Please set the AURA_EMAIL and AURA_PASSWORD environment variables."
        )
    if password is None:
        raise RuntimeError("Please set the AURA_PASSWORD environment variable.")
    if email is None:
        raise RuntimeError("Please set the AURA_EMAIL environment variable.")

    _log.info("Login command executing, environment variables were properly set :D")
    payload = {
        "identifier_for_vendor": "does-not-matter",
        "client_device_id": "does-not-matter",
        "app_identifier": "com.pushd.Framelord",
        "locale": "en",
        "user": {"email": email, "password": password},
    }
    response = requests.post(
        LOGIN_URL,
        json=payload,
        headers={"Content-Type": "application/json"},
    )
    if not 200 <= response.status_code < 300:
        raise RuntimeError(f"Login failed: {response.text}")

    _log.info("Login successful!")
    _log.info("Writing auth details to %s", AUTH_FILE_NAME)
    _log.warning(
        "Remove this credential by running the logout command when you are done!"
    )
    document = json.loads(response.text)
    Path(AUTH_FILE_NAME).write_text(
        json.dumps(document, indent=2, sort_keys=True), encoding="utf-8"
    )


def logout() -> None:
    """Remove the stored credentials, if any."""
    path = Path(AUTH_FILE_NAME)
    if path.exists():
        path.unlink()
        _log.info("Logout successful, auth file removed.")
    else:
        _log.info("No auth file found, already logged out.")


def load_auth_data() -> AuthResponse:
    """Read the stored login response."""
    path = Path(AUTH_FILE_NAME)
    if not path.exists():
        raise RuntimeError("Not logged in. Please run the login command first.")
    return AuthResponse.model_validate_json(path.read_text(encoding="utf-8"))


def get_authenticated_client() -> requests.Session:
    """Return the shared authenticated session, creating it on first use."""
    global _cached_client
    if _cached_client is not None:
        _log.debug("Using existing authenticated client")
        return _cached_client
    _log.debug("Creating new authenticated client")
    _cached_client = create_authenticated_client()
    return _cached_client


def create_authenticated_client() -> requests.Session:
    """Build a session that sends the stored user id and token on every request."""
    auth_data = load_auth_data()
    current_user = auth_data.result.current_user
    session = requests.Session()
    session.headers.update(
        {
            "X-User-Id": current_user.id,
            "X-Token-Auth": current_user.auth_token,
        }
    )
    _log.debug("Created authenticated client")
    return session