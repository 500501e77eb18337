from __future__ import annotations

import json
from pathlib import Path

import pytest

from hotkey_modes.config.parser import parse_config
from hotkey_modes.export.backend import BindingTableBackend
from hotkey_modes.export.compiler import compile_config, main
from hotkey_modes.macos import keycodes as kc


FIXTURE = Path(__file__).with_name("test_keys.skhdrc")


def test_backend_lowers_modes_and_bindings() -> None:
    registry = parse_config(":: work : echo work\nwork, default < cmd - a : echo a\nwork < b ; default")

    backend = BindingTableBackend()
    out = backend.compile(registry, description="test")

    assert out.description == "test"
    assert [m.name for m in out.modes] == ["work", "default"]

    work = out.modes[0]
    assert work.command == "echo work"
    assert len(work.bindings) == 2

    cmd_a = work.bindings[0]
    assert cmd_a.keycode == kc.kVK_ANSI_A
    assert cmd_a.modifiers == ["cmd"]
    assert cmd_a.command == "echo a"
    assert cmd_a.activate is None
    assert not cmd_a.passthrough

    activate = work.bindings[1]
    assert activate.keycode == kc.kVK_ANSI_B
    assert activate.activate == "default"

    default = out.modes[1]
    assert [b.command for b in default.bindings] == ["echo a"]


def test_backend_reports_implicit_fn() -> None:
    registry = parse_config("shift - f3 -> : x")

    out = BindingTableBackend().compile(registry, description="test")

    binding = out.modes[0].bindings[0]
    assert binding.modifiers == ["shift", "fn"]
    assert binding.passthrough


def test_compile_config_writes_json(tmp_path: Path) -> None:
    out_path = tmp_path / "bindings.json"

    compile_config(FIXTURE, out_path)

    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["description"] == str(FIXTURE)
    assert [m["name"] for m in data["modes"]] == ["work", "music", "default"]
    # exclude_none drops unset actions
    music = data["modes"][1]
    assert all("command" in b or "activate" in b for b in music["bindings"])
    assert "command" not in music


def test_main_summary(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(FIXTURE)]) == 0

    out = capsys.readouterr().out
    assert out.strip() == f"{FIXTURE}: 3 modes, 8 hotkeys"


def test_main_dump(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--dump", str(FIXTURE)]) == 0

    out = capsys.readouterr().out
    assert out.startswith(':: work : notify "work mode"\n:: music\n:: default\n')
    assert "default < a : echo two\n" in out


def test_main_json(tmp_path: Path) -> None:
    out_path = tmp_path / "out.json"

    assert main([str(FIXTURE), "--json", str(out_path), "--indent", "0"]) == 0
    assert json.loads(out_path.read_text(encoding="utf-8"))["modes"]


def test_main_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "skhdrc"
    path.write_text("cmd -\n")

    assert main([str(path)]) == 1


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing")]) == 1

    assert "[FATAL]" in capsys.readouterr().err


def test_main_options_file(tmp_path: Path) -> None:
    options = tmp_path / "options.toml"
    options.write_text("max_chain_length = 1\n")

    assert main([str(FIXTURE), "--options", str(options)]) == 1
