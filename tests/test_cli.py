import json
from pathlib import Path

import pytest

from aura_exporter.actions import JiggleStrategy
from aura_exporter.cli import build_parser, main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "aura-frames.json").write_text(
        json.dumps({"frames": [], "user_pending_tokens": []}), encoding="utf-8"
    )
    return tmp_path


def test_parse_backup_sync_defaults():
    args = build_parser().parse_args(
        ["backup", "sync", "--save-dir", "vault", "--delay-ms", "250"]
    )
    assert args.command == "backup"
    assert args.backup_command == "sync"
    assert args.save_dir == Path("vault")
    assert args.delay_ms == 250
    assert args.jiggle_ms == 0
    assert args.jiggle_strategy is JiggleStrategy.NORMAL


def test_parse_jiggle_strategy_uniform():
    args = build_parser().parse_args(
        [
            "backup", "sync", "--save-dir", "v", "--delay-ms", "1",
            "--jiggle-ms", "30", "--jiggle-strategy", "uniform",
        ]
    )
    assert args.jiggle_strategy is JiggleStrategy.UNIFORM
    assert args.jiggle_ms == 30


def test_parse_frame_asset_list():
    args = build_parser().parse_args(["frame", "asset", "list", "--frame-id", "f1"])
    assert (args.command, args.frame_command, args.frame_asset_command) == (
        "frame",
        "asset",
        "list",
    )
    assert args.frame_id == "f1"


def test_parse_asset_download():
    args = build_parser().parse_args(
        ["asset", "download", "--user-id", "u1", "--file-name", "p.jpg", "--save-dir", "d"]
    )
    assert (args.user_id, args.file_name, args.save_dir) == ("u1", "p.jpg", Path("d"))


def test_debug_flag_after_subcommand():
    args = build_parser().parse_args(["logout", "--debug"])
    assert args.debug is True


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["frame"],
        ["backup", "sync", "--save-dir", "v"],
        ["backup", "sync", "--save-dir", "v", "--delay-ms", "-1"],
        ["backup", "sync", "--save-dir", "v", "--delay-ms", "1", "--jiggle-strategy", "x"],
    ],
)
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(argv)
    assert info.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "0.3.0" in capsys.readouterr().out


def test_logout_removes_auth_file(workdir):
    auth_file = workdir / "aura-auth.json"
    auth_file.write_text("{}", encoding="utf-8")
    assert main(["logout"]) == 0
    assert not auth_file.exists()


def test_login_without_environment_fails(workdir, monkeypatch, capsys):
    monkeypatch.delenv("AURA_EMAIL", raising=False)
    monkeypatch.delenv("AURA_PASSWORD", raising=False)
    assert main(["login"]) == 1
    assert "AURA_EMAIL" in capsys.readouterr().err


def test_login_failure_reraised_with_debug(workdir, monkeypatch):
    monkeypatch.delenv("AURA_EMAIL", raising=False)
    monkeypatch.delenv("AURA_PASSWORD", raising=False)
    with pytest.raises(RuntimeError):
        main(["login", "--debug"])


def test_frame_list_with_no_frames(workdir, capsys):
    assert main(["frame", "list"]) == 0
    assert capsys.readouterr().out == ""


def test_frame_asset_list_with_no_assets(workdir, capsys):
    (workdir / "aura-frame-assets-f1.json").write_text(
        json.dumps({"asset_settings": [], "assets": [], "users": []}),
        encoding="utf-8",
    )
    assert main(["frame", "asset", "list", "--frame-id", "f1"]) == 0
    assert capsys.readouterr().out == ""


def test_backup_sync_with_nothing_to_do(workdir):
    vault = workdir / "vault"
    assert main(["backup", "sync", "--save-dir", str(vault), "--delay-ms", "0"]) == 0
    assert not (vault / "users").exists()


def test_download_picker_without_frames_fails(workdir):
    assert main(["frame", "asset", "download-picker", "--save-dir", "out"]) == 1