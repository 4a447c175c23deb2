"""Fetching the list of frames, cached in a local file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .auth import get_authenticated_client
from .models import FramesResponse

FRAMES_FILE_NAME = "aura-frames.json"
FRAMES_URL = "https://api.pushd.com/v5/frames/"

_log = logging.getLogger(__name__)


def pull_frames() -> FramesResponse:
    """Fetch frames from the API and save the response to the cache file."""
    _log.debug("Pulling frames from API")
    session = get_authenticated_client()
    response = session.get(FRAMES_URL)
    if not 200 <= response.status_code < 300:
        raise RuntimeError(f"Frame list failed: {response.text}")

    _log.debug("Writing frames to file: %s", FRAMES_FILE_NAME)
    document = json.loads(response.text)
    Path(FRAMES_FILE_NAME).write_text(
        json.dumps(document, indent=2, sort_keys=True), encoding="utf-8"
    )

    _log.debug("Parsing frame response as known type")
    return FramesResponse.model_validate(document)


def read_frames() -> FramesResponse:
    """Read frames from the cache file."""
    _log.debug("Reading frames from file: %s", FRAMES_FILE_NAME)
    return FramesResponse.model_validate_json(
        Path(FRAMES_FILE_NAME).read_text(encoding="utf-8")
    )


def get_frames() -> FramesResponse:
    """Return frames from the cache file if present, else from the API."""
    if Path(FRAMES_FILE_NAME).exists():
        return read_frames()
    return pull_frames()