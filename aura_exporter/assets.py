"""Fetching the assets of a frame, cached in a local file per frame."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .auth import get_authenticated_client
from .models import FrameAssetsResponse, FrameId

_log = logging.getLogger(__name__)


def get_path_for_frame_assets(frame_id: FrameId) -> Path:
    """Return the cache file path for a frame's assets."""
    return Path(f"aura-frame-assets-{frame_id}.json")


def pull_assets_for_frame(frame_id: FrameId) -> FrameAssetsResponse:
    """Fetch a frame's assets from the API and save the response to the cache file."""
    _log.debug("Pulling assets for frame %s from API", frame_id)
    session = get_authenticated_client()
    url = f"https://api.pushd.com/v5/frames/{frame_id}/assets.json?side_load_users=false"
    response = session.get(url)
    if not 200 <= response.status_code < 300:
        raise RuntimeError(f"Frame asset pull failed: {response.text}")

    path = get_path_for_frame_assets(frame_id)
    _log.debug("Writing frame assets to file: %s", path)
    document = json.loads(response.text)
    path.write_text(json.dumps(document, indent=2, sort_keys=True), encoding="utf-8")

    _log.debug("Parsing frame assets response as known type")
    try:
        return FrameAssetsResponse.model_validate(document)
    except ValidationError as error:
        raise ValueError(f"{path}: frame id: {frame_id}: {error}") from error


def read_assets_for_frame(frame_id: FrameId) -> FrameAssetsResponse:
    """Read a frame's assets from the cache file."""
    path = get_path_for_frame_assets(frame_id)
    _log.debug("Reading frame assets from file: %s", path)
    text = path.read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(
            f"Path: {path}:{error.lineno}:{error.colno}: {error.msg}"
        ) from error
    try:
        return FrameAssetsResponse.model_validate(document)
    except ValidationError as error:
        raise ValueError(f"Path: {path}: {error}") from error


def get_assets_for_frame(frame_id: FrameId) -> FrameAssetsResponse:
    """Return a frame's assets from the cache file if present, else from the API."""
    if get_path_for_frame_assets(frame_id).exists():
        return read_assets_for_frame(frame_id)
    return pull_assets_for_frame(frame_id)