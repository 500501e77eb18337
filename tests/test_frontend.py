from __future__ import annotations

from pathlib import Path

import pytest

from hotkey_modes.config.errors import ConfigReadError
from hotkey_modes.config.frontend import ConfigFrontend, find_config
from hotkey_modes.config.options import ParserOptions, load_options
from hotkey_modes.macos import keycodes as kc
from hotkey_modes.macos.modifiers import Modifier


def test_load_config_basic() -> None:
    path = Path(__file__).with_name("test_keys.skhdrc")
    frontend = ConfigFrontend()
    registry = frontend.load(path)

    assert list(registry.modes) == ["work", "music", "default"]
    assert registry["work"].command == 'notify "work mode"'
    assert registry["music"].command is None

    reload = registry.lookup("default", Modifier.HYPER, kc.kVK_ANSI_R)
    assert reload is not None
    assert reload.passthrough
    assert reload.command == "reload \\\n    --all"

    grave = registry.lookup("music", 0, kc.kVK_ANSI_Grave)
    assert grave is not None
    assert grave.command == "echo grave"

    # `a` is bound twice; the later binding replaced the earlier one
    assert registry.lookup("default", 0, kc.kVK_ANSI_A).command == "echo two"
    assert len(registry.hotkeys()) == 8


def test_load_missing_file(tmp_path: Path) -> None:
    frontend = ConfigFrontend()

    with pytest.raises(ConfigReadError) as excinfo:
        frontend.load(tmp_path / "missing")
    assert excinfo.value.path == str(tmp_path / "missing")


def test_load_uses_encoding_option(tmp_path: Path) -> None:
    path = tmp_path / "skhdrc"
    path.write_bytes(":: caf\xe9\ncaf\xe9 < a : x\n".encode("latin-1"))

    with pytest.raises(ConfigReadError):
        ConfigFrontend().load(path)

    registry = ConfigFrontend(ParserOptions(encoding="latin-1")).load(path)
    assert "café" in registry


def test_find_config_prefers_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "home"
    xdg = tmp_path / "xdg"
    (xdg / "skhd").mkdir(parents=True)
    home.mkdir()
    (home / ".skhdrc").write_text("a : x\n")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))

    assert find_config() == home / ".skhdrc"

    (xdg / "skhd" / "skhdrc").write_text("a : x\n")
    assert find_config() == xdg / "skhd" / "skhdrc"


def test_find_config_none(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert find_config() is None


def test_load_options(tmp_path: Path) -> None:
    path = tmp_path / "options.toml"
    path.write_text('max_chain_length = 8\nencoding = "latin-1"\n')

    options = load_options(path)

    assert options.max_chain_length == 8
    assert options.encoding == "latin-1"


def test_load_options_rejects_invalid_values(tmp_path: Path) -> None:
    path = tmp_path / "options.toml"
    path.write_text("max_chain_length = 0\n")

    with pytest.raises(ConfigReadError):
        load_options(path)

    path.write_text("max_chain_length = \n")
    with pytest.raises(ConfigReadError):
        load_options(path)
