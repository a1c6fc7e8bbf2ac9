import logging
import os
import sys

import pygame
import pytest

from lighttime import app


@pytest.fixture
def headless(tmp_path, monkeypatch):
    monkeypatch.setitem(os.environ, "SDL_VIDEODRIVER", "dummy")
    monkeypatch.setitem(os.environ, "SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
    cwd = os.getcwd()
    os.chdir(tmp_path)
    yield
    os.chdir(cwd)


def _record_units(monkeypatch):
    units = []
    panel_cls = app.CalculatorPanel

    def recording_panel(manager, unit):
        units.append(unit)
        return panel_cls(manager, unit)

    monkeypatch.setattr(app, "CalculatorPanel", recording_panel)
    return units


def test_app_starts_and_quits(headless, monkeypatch):
    units = _record_units(monkeypatch)
    app.main(["--unit", "au"])
    assert units == ["au"]


def test_app_reads_command_line(headless, monkeypatch):
    units = _record_units(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["lighttime-gui", "--unit", "km"])
    app.main()
    assert units == ["km"]


def test_app_unknown_unit_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        app.main(["--unit", "furlong"])
    assert exc.value.code == 2
    assert "unknown distance unit 'furlong'" in capsys.readouterr().err


def test_app_verbose_logs_calculation(headless, caplog):
    caplog.set_level(logging.DEBUG, logger="lighttime")
    app.main(["--unit", "ly", "-v"])
    assert "Calculated LightTimeResult(value=1.0, unit='Light Year')" in caplog.text
    assert "selected Years" in caplog.text
