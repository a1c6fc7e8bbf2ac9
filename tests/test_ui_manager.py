import math
import os

import pygame
import pygame_gui
import pytest

from lighttime import constants as C
from lighttime.calculator import ErrorKind, LightTimeError, LightTimeResult
from lighttime.ui_manager import CalculatorPanel, parse_distance


@pytest.fixture
def manager(monkeypatch):
    monkeypatch.setitem(os.environ, "SDL_VIDEODRIVER", "dummy")
    monkeypatch.setitem(os.environ, "SDL_AUDIODRIVER", "dummy")
    pygame.init()
    pygame.display.set_mode((C.WIDTH, C.HEIGHT))
    yield pygame_gui.UIManager((C.WIDTH, C.HEIGHT))
    pygame.quit()


def test_parse_distance():
    assert parse_distance(" 2.5 ") == 2.5
    assert parse_distance("1e3") == 1000.0
    assert parse_distance("abc") == "abc"
    assert math.isnan(parse_distance("nan"))


def test_panel_default_unit(manager):
    panel = CalculatorPanel(manager)
    assert panel.selected_unit().symbol == C.DEFAULT_DISTANCE_UNIT


def test_panel_calculates_light_year(manager):
    panel = CalculatorPanel(manager, "ly")
    panel.distance_entry.set_text("1")
    assert panel.calculate() == LightTimeResult(1, "Light Year")
    assert panel.result_label.text == "1 Light Year"


def test_panel_reports_invalid_text(manager):
    panel = CalculatorPanel(manager)
    panel.distance_entry.set_text("abc")
    assert panel.calculate() == LightTimeError(ErrorKind.INVALID_DISTANCE)
    assert panel.result_label.text == "Invalid distance: Must be a number."


def test_panel_button_event(manager):
    panel = CalculatorPanel(manager, "km")
    panel.distance_entry.set_text("-3")
    event = pygame.event.Event(pygame_gui.UI_BUTTON_PRESSED, {"ui_element": panel.calculate_button})
    assert panel.process_event(event) == LightTimeError(ErrorKind.NEGATIVE_DISTANCE)


def test_panel_ignores_unrelated_events(manager):
    panel = CalculatorPanel(manager)
    assert panel.process_event(pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_a})) is None
