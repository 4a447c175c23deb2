"""Command line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import timedelta
from pathlib import Path

import requests
from pydantic import ValidationError

from .actions import JiggleStrategy
from .asset_downloader import AssetDownloadPlan
from .asset_summary import summarize_assets_for_frame
from .auth import get_authenticated_client, login, logout
from .backup_manager import BackupManager
from .download_picker import download_picker
from .frames import get_frames
from .local_backup import LocalBackupStructure

VERSION = "0.3.0"
_U32_MAX = 2**32 - 1


def _u32(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not 0 <= value <= _U32_MAX:
        raise argparse.ArgumentTypeError(f"value out of range: {text}")
    return value


def _jiggle_strategy(text: str) -> JiggleStrategy:
    try:
        return JiggleStrategy(text.lower())
    except ValueError:
        names = ", ".join(str(strategy) for strategy in JiggleStrategy)
        raise argparse.ArgumentTypeError(
            f"invalid strategy {text!r} (choose from {names})"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``aura`` command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--debug", action="store_true", default=argparse.SUPPRESS)

    parser = argparse.ArgumentParser(
        prog="aura", description="Back up photos from picture frames.", parents=[common]
    )
    parser.add_argument("--version", action="version", version=f"aura {VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("login", parents=[common])
    commands.add_parser("logout", parents=[common])

    frame = commands.add_parser("frame", parents=[common])
    frame_commands = frame.add_subparsers(dest="frame_command", required=True)
    frame_commands.add_parser("list", parents=[common])
    frame_asset = frame_commands.add_parser("asset", parents=[common])
    frame_asset_commands = frame_asset.add_subparsers(
        dest="frame_asset_command", required=True
    )
    frame_asset_list = frame_asset_commands.add_parser("list", parents=[common])
    frame_asset_list.add_argument("--frame-id", required=True)
    picker = frame_asset_commands.add_parser("download-picker", parents=[common])
    picker.add_argument("--save-dir", type=Path, required=True)

    asset = commands.add_parser("asset", parents=[common])
    asset_commands = asset.add_subparsers(dest="asset_command", required=True)
    download = asset_commands.add_parser("download", parents=[common])
    download.add_argument("--user-id", required=True)
    download.add_argument("--file-name", required=True)
    download.add_argument("--save-dir", type=Path, required=True)

    backup = commands.add_parser("backup", parents=[common])
    backup_commands = backup.add_subparsers(dest="backup_command", required=True)
    sync = backup_commands.add_parser("sync", parents=[common])
    sync.add_argument(
        "--save-dir",
        type=Path,
        required=True,
        help="Root directory of the vault where backup information will be persisted",
    )
    sync.add_argument(
        "--delay-ms",
        type=_u32,
        required=True,
        help="Delay between remote actions, e.g., fetching image assets",
    )
    sync.add_argument(
        "--jiggle-ms",
        type=_u32,
        default=0,
        help="Jitter in milliseconds to add to the delay",
    )
    sync.add_argument(
        "--jiggle-strategy",
        type=_jiggle_strategy,
        default=JiggleStrategy.NORMAL,
        help="Jiggle distribution strategy (uniform, normal)",
    )
    return parser


def _configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level, format="%(levelname)s %(filename)s:%(lineno)d: %(message)s"
    )
    logging.getLogger().setLevel(level)


def _dispatch(args: argparse.Namespace) -> None:
    if args.command == "login":
        login()
    elif args.command == "logout":
        logout()
    elif args.command == "frame":
        if args.frame_command == "list":
            for frame in get_frames().frames:
                print(f"{frame.id}\t{frame.name}")
        elif args.frame_asset_command == "list":
            summarize_assets_for_frame(args.frame_id)
        else:
            download_picker(args.save_dir)
    elif args.command == "asset":
        session = get_authenticated_client()
        structure = LocalBackupStructure(args.save_dir)
        output_file_path = structure.path_for_user_asset(args.user_id, args.file_name)
        AssetDownloadPlan.for_user_file(
            args.user_id, args.file_name, output_file_path
        ).run(session)
    elif args.command == "backup":
        BackupManager(
            args.save_dir,
            timedelta(milliseconds=args.delay_ms),
            timedelta(milliseconds=args.jiggle_ms),
            args.jiggle_strategy,
        ).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = build_parser().parse_args(argv)
    debug = getattr(args, "debug", False)
    _configure_logging(debug)
    try:
        _dispatch(args)
    except (
        RuntimeError,
        ValueError,
        OSError,
        ValidationError,
        requests.RequestException,
    ) as error:
        if debug:
            raise
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())