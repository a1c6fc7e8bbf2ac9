import pygame
import pygame_gui

from . import constants as C
from .calculator import LightTime, calculate_light_time
from .units import DISTANCE_UNITS, DistanceUnit, find_distance_unit
from .utils import light_time_to_display


def unit_option(unit: DistanceUnit) -> str:
    return f"{unit.name} ({unit.symbol})"


_UNITS_BY_OPTION = {unit_option(unit): unit for unit in DISTANCE_UNITS}


def parse_distance(text: str):
    """Convert entry text to a float, or hand the raw text through.

    Unparseable text is left as a string so the calculator reports it as an
    invalid distance.
    """
    try:
        return float(text.strip())
    except ValueError:
        return text


class CalculatorPanel:
    """Distance entry, unit drop-down, calculate button and result label."""

    def __init__(self, manager: pygame_gui.UIManager, default_unit: str = C.DEFAULT_DISTANCE_UNIT):
        m = C.PANEL_MARGIN
        width = C.WIDTH - 2 * m
        self.manager = manager
        self.panel = pygame_gui.elements.UIPanel(
            pygame.Rect(0, 0, C.WIDTH, C.HEIGHT),
            manager=manager,
            object_id="#calculator_panel",
        )
        y = m
        pygame_gui.elements.UILabel(
            pygame.Rect(m, y, width, C.ROW_HEIGHT),
            text="Light Time Calculator",
            manager=manager,
            container=self.panel,
            object_id="#title_label",
        )
        y += C.ROW_HEIGHT + m
        self.distance_entry = pygame_gui.elements.UITextEntryLine(
            pygame.Rect(m, y, 160, C.ROW_HEIGHT),
            manager=manager,
            container=self.panel,
        )
        self.distance_entry.set_text("1")
        self.unit_menu = pygame_gui.elements.UIDropDownMenu(
            list(_UNITS_BY_OPTION.keys()),
            unit_option(find_distance_unit(default_unit)),
            pygame.Rect(m + 170, y, width - 170, C.ROW_HEIGHT),
            manager=manager,
            container=self.panel,
        )
        y += C.ROW_HEIGHT + m
        self.calculate_button = pygame_gui.elements.UIButton(
            pygame.Rect(m, y, 120, C.ROW_HEIGHT),
            "Calculate",
            manager,
            container=self.panel,
        )
        y += C.ROW_HEIGHT + m
        self.result_label = pygame_gui.elements.UILabel(
            pygame.Rect(m, y, width, C.ROW_HEIGHT),
            "",
            manager,
            container=self.panel,
            object_id="#result_label",
        )

    def selected_unit(self) -> DistanceUnit:
        option = self.unit_menu.selected_option
        # newer pygame_gui releases report (text, object_id) pairs
        if isinstance(option, tuple):
            option = option[0]
        return _UNITS_BY_OPTION[option]

    def calculate(self) -> LightTime:
        distance = parse_distance(self.distance_entry.get_text())
        result = calculate_light_time(distance, self.selected_unit().factor)
        self.result_label.set_text(light_time_to_display(result))
        return result

    def process_event(self, event):
        if event.type == pygame_gui.UI_BUTTON_PRESSED and event.ui_element == self.calculate_button:
            return self.calculate()
        if event.type == pygame_gui.UI_TEXT_ENTRY_FINISHED and event.ui_element == self.distance_entry:
            return self.calculate()
        if event.type == pygame_gui.UI_DROP_DOWN_MENU_CHANGED and event.ui_element == self.unit_menu:
            return self.calculate()
        return None
