"""The steps a backup run is made of, each applied to a backup manager in turn."""

from __future__ import annotations

import enum
import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING

import requests

from .asset_downloader import AssetDownloadPlan
from .assets import get_assets_for_frame
from .frames import get_frames
from .models import FileName, FrameId, UserId

if TYPE_CHECKING:
    from .backup_manager import BackupManager

_log = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)
_YEAR_SECONDS = 31_557_600
_MONTH_SECONDS = 2_630_016
_DAY_SECONDS = 86_400


class JiggleStrategy(enum.Enum):
    """Distribution the random extra delay between downloads is drawn from."""

    UNIFORM = "uniform"
    NORMAL = "normal"

    def __str__(self) -> str:
        return self.value


def format_duration(duration: timedelta) -> str:
    """Render a duration as e.g. ``1h 2m 3s 4ms``; a zero duration is ``0s``."""
    total_us = duration // timedelta(microseconds=1)
    secs, micros_total = divmod(total_us, 1_000_000)
    if secs == 0 and micros_total == 0:
        return "0s"

    years, rest = divmod(secs, _YEAR_SECONDS)
    months, rest = divmod(rest, _MONTH_SECONDS)
    days, day_secs = divmod(rest, _DAY_SECONDS)
    hours, rest = divmod(day_secs, 3600)
    minutes, seconds = divmod(rest, 60)
    millis, micros = divmod(micros_total, 1000)

    parts = []
    for value, name in ((years, "year"), (months, "month"), (days, "day")):
        if value:
            parts.append(f"{value}{name}{'s' if value > 1 else ''}")
    for value, unit in (
        (hours, "h"),
        (minutes, "m"),
        (seconds, "s"),
        (millis, "ms"),
        (micros, "us"),
    ):
        if value:
            parts.append(f"{value}{unit}")
    return " ".join(parts)


def sample_jiggle(strategy: JiggleStrategy, jiggle_ms: float, rng: random.Random) -> int:
    """Draw a whole number of milliseconds in ``[0, jiggle_ms]``."""
    if jiggle_ms <= 0:
        return 0
    if strategy is JiggleStrategy.UNIFORM:
        return int(rng.uniform(0.0, jiggle_ms))
    # Mean in the middle, a quarter of the range as deviation, clamped to the range.
    value = rng.gauss(jiggle_ms / 2.0, jiggle_ms / 4.0)
    return int(min(max(value, 0.0), jiggle_ms))


class BackupAction(ABC):
    """One step of a backup run."""

    @abstractmethod
    def apply(self, manager: BackupManager) -> None:
        """Carry out the step, possibly queueing further steps on the manager."""

    def __str__(self) -> str:
        return type(self).__name__


@dataclass
class BootstrapAction(BackupAction):
    """Queue whatever is needed to bring the backup up to date."""

    def apply(self, manager: BackupManager) -> None:
        if manager.local_backup_structure.local_files is None:
            manager.stack.append(DiscoverLocalFilesAction())
        if manager.frames is None:
            manager.stack.append(GetFramesAction())
            manager.stack.append(EnqueueGetFrameAssetActionsAction())
        manager.stack.append(EnqueueDownloadGeneratorAction())


@dataclass
class DiscoverLocalFilesAction(BackupAction):
    """Scan the backup directory for files already saved."""

    def apply(self, manager: BackupManager) -> None:
        if manager.local_backup_structure.local_files is not None:
            raise RuntimeError("Local files already discovered")
        manager.local_backup_structure.discover_local_files()


@dataclass
class GetFramesAction(BackupAction):
    """Load the list of frames."""

    def apply(self, manager: BackupManager) -> None:
        if manager.frames is not None:
            raise RuntimeError("Frames already fetched")
        manager.frames = get_frames()


@dataclass
class EnqueueGetFrameAssetActionsAction(BackupAction):
    """Put a step fetching the assets of each frame at the front of the queue."""

    def apply(self, manager: BackupManager) -> None:
        if manager.frames is None:
            raise RuntimeError("Frames not fetched yet")
        for frame in manager.frames.frames:
            manager.stack.appendleft(GetFrameAssetsAction(frame_id=frame.id))


@dataclass
class GetFrameAssetsAction(BackupAction):
    """Load the assets of one frame."""

    frame_id: FrameId

    def apply(self, manager: BackupManager) -> None:
        if self.frame_id in manager.frame_assets:
            raise RuntimeError(f"Assets already fetched for frame {self.frame_id}")
        _log.debug("Getting assets for frame %s", self.frame_id)
        manager.frame_assets[self.frame_id] = get_assets_for_frame(self.frame_id)

    def __str__(self) -> str:
        return f"GetFrameAssetsAction - frame {self.frame_id}"


@dataclass
class EnqueueDownloadGeneratorAction(BackupAction):
    """Queue the generator of downloads once local and remote state are known."""

    def apply(self, manager: BackupManager) -> None:
        manager.stack.append(DownloadGeneratorAction.from_manager(manager))


@dataclass
class DownloadGeneratorAction(BackupAction):
    """Queue one missing download and a pause, then queue itself again."""

    files_not_available_locally: set[tuple[UserId, FileName]]
    max_delay_for_eta_calculation: timedelta

    @classmethod
    def from_manager(cls, manager: BackupManager) -> DownloadGeneratorAction:
        """Work out which remote files are missing from the local backup."""
        local_by_user = manager.local_backup_structure.local_files
        if local_by_user is None:
            raise RuntimeError("Local files not discovered yet")
        local_files = {
            (user_id, file_name)
            for user_id, file_names in local_by_user.items()
            for file_name in file_names
        }
        remote_files = {
            (asset.user_id, asset.file_name)
            for response in manager.frame_assets.values()
            for asset in response.assets
        }
        return cls(
            files_not_available_locally=remote_files - local_files,
            max_delay_for_eta_calculation=manager.delay + manager.jiggle / 2,
        )

    def apply(self, manager: BackupManager) -> None:
        if not self.files_not_available_locally:
            return
        user_id, file_name = self.files_not_available_locally.pop()
        manager.stack.append(
            DownloadUserAssetAction(
                user_id=user_id,
                file_name=file_name,
                session=manager.session_factory(),
            )
        )
        jiggle_ms = manager.jiggle // _ONE_MS
        extra_ms = sample_jiggle(manager.jiggle_strategy, jiggle_ms, manager.rng)
        manager.stack.append(
            SleepAction(
                duration=self.max_delay_for_eta_calculation
                + timedelta(milliseconds=extra_ms)
            )
        )
        manager.stack.append(self)

    def __str__(self) -> str:
        remaining = len(self.files_not_available_locally)
        eta = format_duration(self.max_delay_for_eta_calculation * remaining)
        return f"DownloadGeneratorAction - {remaining} downloads remain, ETA: {eta}"


@dataclass
class DownloadUserAssetAction(BackupAction):
    """Download one user's file into the backup; failures are logged, not raised."""

    user_id: UserId
    file_name: FileName
    session: requests.Session = field(repr=False, compare=False)

    def apply(self, manager: BackupManager) -> None:
        structure = manager.local_backup_structure
        output_file_path = structure.path_for_user_asset(self.user_id, self.file_name)
        local_files = structure.local_files
        if local_files is None:
            raise RuntimeError("Local files not discovered yet")

        plan = AssetDownloadPlan.for_user_file(
            self.user_id, self.file_name, output_file_path
        )
        try:
            plan.run(self.session)
        except (requests.RequestException, OSError) as error:
            _log.warning("Failed to download user asset: %s", error)
            _log.warning("Will continue to try and download the other stuff")
            return

        local_files.setdefault(self.user_id, set()).add(self.file_name)

    def __str__(self) -> str:
        return (
            f"DownloadUserAssetAction - user {self.user_id}"
            f' - file name "{self.file_name}"'
        )


@dataclass
class SleepAction(BackupAction):
    """Pause between remote requests."""

    duration: timedelta

    def apply(self, manager: BackupManager) -> None:
        manager.sleep(self.duration.total_seconds())

    def __str__(self) -> str:
        return f"SleepAction - {self.duration // _ONE_MS}ms total"