"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

import main


def test_types_command_prints_profile(capsys) -> None:
    assert main.main(["types", "water", "ground"]) == 0
    out = capsys.readouterr().out
    assert "weaknesses: grass" in out
    assert "immunities: electric" in out


def test_types_command_json(capsys) -> None:
    assert main.main(["--json", "types", "ghost"]) == 0
    profile = json.loads(capsys.readouterr().out)
    assert profile["immunities"] == ["normal", "fighting"]


def test_debug_goes_to_stderr(capsys) -> None:
    main.main(["--debug", "types", "fire"])
    captured = capsys.readouterr()
    assert "[debug]" in captured.err
    assert "[debug]" not in captured.out


def test_too_many_pokemon_exits(monkeypatch) -> None:
    monkeypatch.setattr(main, "PokeAPIClient", lambda: None)
    with pytest.raises(SystemExit):
        main.main(["analyze", "1", "2", "3", "4", "5", "6", "7"])


def test_subcommand_is_required() -> None:
    with pytest.raises(SystemExit):
        main.main([])
