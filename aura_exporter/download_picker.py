"""Interactive choice of a frame and its assets to download."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from .asset_downloader import AssetDownloadPlan
from .assets import get_assets_for_frame
from .auth import get_authenticated_client
from .frames import get_frames
from .local_backup import LocalBackupStructure

T = TypeVar("T")

_log = logging.getLogger(__name__)
_ALL_TOKENS = {"*", "all"}
_RANGE = re.compile(r"^(\d+)-(\d+)$")


def _read_answer() -> str:
    try:
        return input("> ").strip()
    except EOFError:
        raise RuntimeError("No selection was made") from None


def _show(keys: list[str], header: str | None) -> None:
    if header:
        print(header)
    for number, key in enumerate(keys, start=1):
        print(f"{number:>4}) {key}")


def _resolve_one(token: str, keys: list[str]) -> int | None:
    if token.isdigit():
        number = int(token)
        return number - 1 if 1 <= number <= len(keys) else None
    return keys.index(token) if token in keys else None


def _resolve_many(text: str, keys: list[str]) -> list[int] | None:
    chosen: dict[int, None] = {}
    for token in filter(None, re.split(r"[,\s]+", text)):
        if token.lower() in _ALL_TOKENS:
            chosen.update(dict.fromkeys(range(len(keys))))
            continue
        span = _RANGE.match(token)
        if span:
            start, end = int(span.group(1)), int(span.group(2))
            if not 1 <= start <= end <= len(keys):
                return None
            chosen.update(dict.fromkeys(range(start - 1, end)))
            continue
        index = _resolve_one(token, keys)
        if index is None:
            return None
        chosen[index] = None
    return list(chosen)


def pick_one(choices: Iterable[tuple[str, T]], header: str | None = None) -> T:
    """Ask for one of the ``(key, value)`` choices by number or key; return its value."""
    options = list(choices)
    if not options:
        raise ValueError("No choices to pick from")
    keys = [key for key, _ in options]
    _show(keys, header)
    while True:
        answer = _read_answer()
        index = _resolve_one(answer, keys)
        if index is not None:
            return options[index][1]
        print(f"Invalid choice: {answer!r}")


def pick_many(choices: Iterable[tuple[str, T]], header: str | None = None) -> list[T]:
    """Ask for several choices (numbers, ranges such as ``2-4``, keys or ``all``)."""
    options = list(choices)
    if not options:
        raise ValueError("No choices to pick from")
    keys = [key for key, _ in options]
    _show(keys, header)
    while True:
        answer = _read_answer()
        indices = _resolve_many(answer, keys)
        if indices is None:
            print(f"Invalid selection: {answer!r}")
        elif not indices:
            print("Nothing selected")
        else:
            return [options[index][1] for index in indices]


def download_picker(save_dir: Path | str) -> None:
    """Let the user pick a frame and some of its assets, then download them."""
    frames = get_frames().frames
    chosen_frame = pick_one(
        ((frame.name, frame) for frame in frames),
        "Pick the frame to download assets from",
    )
    frame_assets = get_assets_for_frame(chosen_frame.id).assets
    chosen_assets = pick_many(
        ((asset.file_name, asset) for asset in frame_assets),
        "Pick the assets to download",
    )

    session = get_authenticated_client()
    structure = LocalBackupStructure(Path(save_dir))
    while chosen_assets:
        asset = chosen_assets.pop()
        output_file_path = structure.path_for_user_asset(asset.user_id, asset.file_name)
        AssetDownloadPlan.for_asset(asset, output_file_path).run(session)
        _log.info("Downloaded asset, %d remain", len(chosen_assets))