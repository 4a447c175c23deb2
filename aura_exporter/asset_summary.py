"""Counting a frame's assets per contributing user."""

from __future__ import annotations

from collections import Counter

from .assets import get_assets_for_frame
from .frames import get_frames
from .models import FrameAssetsResponse, FrameId, FramesResponse

UNKNOWN_USER = "Unknown User"


def format_asset_summary(
    frame_assets: FrameAssetsResponse, frames: FramesResponse
) -> list[str]:
    """Return one line per user: id, right-aligned name and asset count, fewest first."""
    users = {user.id: user for frame in frames.frames for user in frame.contributors}
    counts = Counter(asset.user_id for asset in frame_assets.assets)
    width = max(
        (len(user.name) for user in users.values() if user.id in counts),
        default=0,
    )
    lines = []
    for user_id, count in sorted(counts.items(), key=lambda item: item[1]):
        user = users.get(user_id)
        name = user.name if user is not None else UNKNOWN_USER
        lines.append(f"{user_id} {name:>{width}}\t{count}")
    return lines


def summarize_assets_for_frame(frame_id: FrameId) -> None:
    """Print the per-user asset counts of a frame."""
    for line in format_asset_summary(get_assets_for_frame(frame_id), get_frames()):
        print(line)