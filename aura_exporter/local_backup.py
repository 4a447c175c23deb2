"""Layout of the local backup directory and discovery of files already saved."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .models import FileName, UserId

_log = logging.getLogger(__name__)


@dataclass
class LocalBackupStructure:
    """A backup root holding ``users/<user id>/<file name>``."""

    root_dir: Path
    local_files: dict[UserId, set[FileName]] | None = None

    def __post_init__(self) -> None:
        self.root_dir = Path(self.root_dir)

    def path_for_user_asset(self, user_id: UserId, file_name: FileName) -> Path:
        """Return where a user's file is stored in the backup."""
        return self.root_dir / "users" / str(user_id) / str(file_name)

    def discover_local_files(self) -> None:
        """Scan the backup and record which files each user already has."""
        if self.local_files is not None:
            raise RuntimeError("Local files already discovered")
        users_dir = self.root_dir / "users"
        if not users_dir.exists():
            _log.warning("Users directory does not exist: %s", users_dir)
            self.local_files = {}
            return

        local_files: dict[UserId, set[FileName]] = {}
        for user_dir in users_dir.iterdir():
            if not user_dir.is_dir():
                _log.warning("User entry is not a directory: %s", user_dir)
                continue
            file_names = {entry.name for entry in user_dir.iterdir()}
            if file_names:
                _log.info("Found %d files for user: %s", len(file_names), user_dir.name)
            else:
                _log.warning("No files found for user: %s", user_dir.name)
            local_files[user_dir.name] = file_names

        total = sum(len(files) for files in local_files.values())
        _log.info("Total files discovered: %d", total)
        self.local_files = local_files