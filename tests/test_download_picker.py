import json

import pytest

from aura_exporter.download_picker import download_picker, pick_many, pick_one

CHOICES = [("alpha", "a"), ("beta", "b"), ("gamma", "c")]


def _answers(monkeypatch, *answers):
    queue = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(queue))


def _eof(prompt=""):
    raise EOFError


def test_pick_one_by_number(monkeypatch):
    _answers(monkeypatch, "2")
    assert pick_one(CHOICES, "Pick") == "b"


def test_pick_one_by_key(monkeypatch):
    _answers(monkeypatch, "gamma")
    assert pick_one(CHOICES) == "c"


def test_pick_one_retries_after_invalid(monkeypatch, capsys):
    _answers(monkeypatch, "9", "nope", "1")
    assert pick_one(CHOICES) == "a"
    assert capsys.readouterr().out.count("Invalid choice") == 2


def test_pick_one_prints_header_and_keys(monkeypatch, capsys):
    _answers(monkeypatch, "1")
    pick_one(CHOICES, "Pick the frame")
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Pick the frame"
    assert all(key in out for key, _ in CHOICES)


def test_pick_one_empty_raises():
    with pytest.raises(ValueError):
        pick_one([], "Pick")


def test_pick_one_eof_raises(monkeypatch):
    monkeypatch.setattr("builtins.input", _eof)
    with pytest.raises(RuntimeError):
        pick_one(CHOICES)


def test_pick_many_numbers(monkeypatch):
    _answers(monkeypatch, "1,3")
    assert pick_many(CHOICES) == ["a", "c"]


def test_pick_many_range(monkeypatch):
    _answers(monkeypatch, "2-3")
    assert pick_many(CHOICES) == ["b", "c"]


def test_pick_many_all(monkeypatch):
    _answers(monkeypatch, "all")
    assert pick_many(CHOICES) == [value for _, value in CHOICES]


def test_pick_many_deduplicates_in_order(monkeypatch):
    _answers(monkeypatch, "3 1 3 beta")
    assert pick_many(CHOICES) == ["c", "a", "b"]


def test_pick_many_reprompts_on_empty_and_invalid(monkeypatch, capsys):
    _answers(monkeypatch, "", "4", "3-1", "1")
    assert pick_many(CHOICES) == ["a"]
    out = capsys.readouterr().out
    assert "Nothing selected" in out
    assert out.count("Invalid selection") == 2


def test_pick_many_empty_raises():
    with pytest.raises(ValueError):
        pick_many([])


def test_pick_many_eof_raises(monkeypatch):
    monkeypatch.setattr("builtins.input", _eof)
    with pytest.raises(RuntimeError):
        pick_many(CHOICES)


def test_download_picker_without_frames_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "aura-frames.json").write_text(
        json.dumps({"frames": [], "user_pending_tokens": []}), encoding="utf-8"
    )
    with pytest.raises(ValueError):
        download_picker(tmp_path / "backup")
    assert not (tmp_path / "backup").exists()