"""Downloading a single asset's original file to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import requests

from .models import Asset, FileName, Url, UserId

_log = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class AssetDownloadPlan:
    """Where to fetch an asset from and where to save it."""

    asset_url: Url
    output_file_path: Path

    @classmethod
    def for_user_file(
        cls, user_id: UserId, file_name: FileName, output_file_path: Path | str
    ) -> AssetDownloadPlan:
        """Plan the download of a user's file."""
        if user_id is None:
            raise ValueError("User ID is required")
        if file_name is None:
            raise ValueError("File name is required")
        if output_file_path is None:
            raise ValueError("Output file path is required")
        return cls(
            asset_url=Asset.create_download_url(user_id, file_name),
            output_file_path=Path(output_file_path),
        )

    @classmethod
    def for_asset(cls, asset: Asset, output_file_path: Path | str) -> AssetDownloadPlan:
        """Plan the download of an asset's original file."""
        return cls.for_user_file(asset.user.id, asset.file_name, output_file_path)

    def run(self, session: requests.Session) -> Path:
        """Download the file, creating parent directories, and return its path."""
        with session.get(self.asset_url, stream=True) as response:
            response.raise_for_status()
            self.output_file_path.parent.mkdir(parents=True, exist_ok=True)
            with self.output_file_path.open("wb") as output:
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    output.write(chunk)
        _log.debug("Downloaded asset to: %s", self.output_file_path)
        return self.output_file_path