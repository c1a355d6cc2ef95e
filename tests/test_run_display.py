from __future__ import annotations

import importlib.util
from pathlib import Path
import sys
import textwrap
from unittest.mock import MagicMock

import pytest

from pisysinfo.display import DisplayInitError

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "run_display.py"

CONFIG_YAML = """
sensors:
  interface: "eth0"
  thermal_path: "/sys/class/thermal/thermal_zone0/temp"
display:
  width: 84
  height: 48
  contrast: 30
  output: "emulator"
  frame_path: "emulator_output/frame.png"
  splash_seconds: 0
  pins: {sclk: 26, din: 19, dc: 13, cs: 6, rst: 5, light: 21}
refresh:
  interval_seconds: 1
logging:
  level: "INFO"
  log_dir: ""
"""


@pytest.fixture()
def run_display(monkeypatch):
    spec = importlib.util.spec_from_file_location("run_display", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "setup_logging", MagicMock())
    monkeypatch.setattr(module.time, "sleep", MagicMock())
    return module


def _argv(monkeypatch, config_path) -> None:
    monkeypatch.setattr(sys, "argv", ["run_display.py", "--config", str(config_path)])


def _valid_config(tmp_path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(CONFIG_YAML))
    return path


def test_main_invalid_config_exits_2(run_display, tmp_path, monkeypatch) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("sensors: [unclosed\n")
    _argv(monkeypatch, path)

    assert run_display.main() == 2


def test_main_missing_config_exits_2(run_display, tmp_path, monkeypatch) -> None:
    _argv(monkeypatch, tmp_path / "missing.yaml")

    assert run_display.main() == 2


def test_main_display_init_failure_exits_1(run_display, tmp_path, monkeypatch) -> None:
    display = MagicMock()
    display.initialize.side_effect = DisplayInitError("no SPI")
    monkeypatch.setattr(run_display, "build_display", lambda config, output: display)
    _argv(monkeypatch, _valid_config(tmp_path))

    assert run_display.main() == 1
    display.show_splash.assert_not_called()
    display.commit.assert_not_called()


def test_main_keyboard_interrupt_exits_0(run_display, tmp_path, monkeypatch) -> None:
    display = MagicMock()
    monkeypatch.setattr(run_display, "build_display", lambda config, output: display)
    run_forever = MagicMock(side_effect=KeyboardInterrupt)
    monkeypatch.setattr(run_display.RefreshLoop, "run_forever", run_forever)
    _argv(monkeypatch, _valid_config(tmp_path))

    assert run_display.main() == 0
    display.initialize.assert_called_once()
    display.show_splash.assert_called_once()
    run_forever.assert_called_once()


def test_main_keyboard_interrupt_during_splash_exits_0(
    run_display, tmp_path, monkeypatch
) -> None:
    display = MagicMock()
    monkeypatch.setattr(run_display, "build_display", lambda config, output: display)
    run_display.time.sleep.side_effect = KeyboardInterrupt
    run_forever = MagicMock()
    monkeypatch.setattr(run_display.RefreshLoop, "run_forever", run_forever)
    _argv(monkeypatch, _valid_config(tmp_path))

    assert run_display.main() == 0
    run_forever.assert_not_called()


def test_build_display_picks_output(run_display, tmp_path) -> None:
    config = run_display.load_config(str(_valid_config(tmp_path)))

    assert isinstance(run_display.build_display(config, "emulator"), run_display.EmulatorDisplay)
    assert isinstance(run_display.build_display(config, "hardware"), run_display.PCD8544Display)
