"""
Single selection state machine.

States are None (unselected) or the selected calendar day. Pressing the
selected day deselects it; pressing any other in-range day selects it.
"""

from datetime import date
from typing import Callable, Optional

PressCallback = Callable[[date, float], None]


def next_selection(current: Optional[date], pressed: date) -> Optional[date]:
    """Pure transition for a press on an interactive day."""
    if current == pressed:
        return None
    return pressed


class SelectionController:
    """Owns the selection of one grid instance."""

    def __init__(self, on_press: Optional[PressCallback] = None):
        self.selected: Optional[date] = None
        self.on_press = on_press

    def press(
        self,
        day: Optional[date],
        value: float,
        display_start: date,
        display_end: date,
        interactive: bool = True,
    ) -> Optional[date]:
        """
        Handle a cell press and return the new selection.

        Presses on placeholders, out-of-range days or a non-interactive
        grid are ignored. The callback fires only when a day becomes
        selected.
        """
        if not interactive or day is None:
            return self.selected
        if not (display_start <= day <= display_end):
            return self.selected

        self.selected = next_selection(self.selected, day)
        if self.selected is not None and self.on_press:
            self.on_press(day, value)
        return self.selected

    def reset(self) -> None:
        self.selected = None
