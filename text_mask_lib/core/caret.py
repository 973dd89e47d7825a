"""
Caret controller
================

Moves the caret of a host input so that typing always lands in a slot.
The controller reacts to four event types:

* ``focus`` – caret goes to the first unfilled slot;
* ``click`` – a click on a valid offset is kept, any other offset is
  replaced by the first unfilled slot;
* ``keydown`` – ``ArrowLeft`` / ``ArrowRight`` jump to the nearest valid
  offset in that direction;
* ``change`` – after an edit the caret goes to the first unfilled slot,
  except when the edit looks like a backspace over a literal.

Every event is handled in two phases.  The value and the caret offset are
read synchronously when the event arrives; the caret is moved later,
through the :class:`~text_mask_lib.core.scheduler.Scheduler`, once the host
has applied the edit and re-rendered the formatted value.
"""

import logging
from typing import List, Optional, Protocol, Tuple

from text_mask_lib.constants import CARET_UPDATE_DELAY
from text_mask_lib.core.pattern import first_unfilled_position, is_slot
from text_mask_lib.core.scheduler import Scheduler
from text_mask_lib.data_models.events import ArrowKey, CaretEvent, EventType
from text_mask_lib.definitions.defaults import MaskDefinitions

LEFT = "left"
RIGHT = "right"


class HostInput(Protocol):
    """Capabilities the controller needs from a text input control."""

    def get_value(self) -> str: ...

    def get_selection(self) -> Tuple[int, int]: ...

    def set_selection(self, position: int) -> None: ...


def nearest_valid_position(
    valid_positions: List[int], position: int, direction: str
) -> int:
    """
    Return the nearest valid offset strictly left or right of *position*.

    When there is none in that direction the first (``left``) or the last
    (``right``) valid offset is returned.
    """
    if direction == LEFT:
        candidates = [p for p in valid_positions if p < position]
        return candidates[-1] if candidates else valid_positions[0]
    candidates = [p for p in valid_positions if p > position]
    return candidates[0] if candidates else valid_positions[-1]


class CaretController:
    """
    Event driven caret placement for a single pattern.

    Parameters
    ----------
    pattern : str
        The mask pattern.
    placeholder : str
        Character shown in unfilled slots.
    mask_definitions : Mapping[str, MaskRuleI]
        Table of slot characters.
    valid_positions : List[int]
        Ascending valid caret offsets of *pattern*; must not be empty.
    scheduler : Scheduler
        Primitive used to run the second phase of every event.
    logger : logging.Logger | None
        Logger for diagnostic output.
    """

    def __init__(
        self,
        pattern: str,
        placeholder: str,
        mask_definitions: MaskDefinitions,
        valid_positions: List[int],
        scheduler: Scheduler,
        logger: Optional[logging.Logger] = None,
    ):
        self.pattern = pattern
        self.placeholder = placeholder
        self.mask_definitions = mask_definitions
        self.valid_positions = list(valid_positions)
        self.scheduler = scheduler
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------ #
    def handle(self, event: CaretEvent) -> None:
        """Snapshot the host state and schedule the caret update."""
        target = event.target
        if target is None:
            return

        previous_selection, _ = target.get_selection()
        previous_value = target.get_value()

        self.scheduler.schedule(
            CARET_UPDATE_DELAY,
            lambda: self._update_caret(event, previous_value, previous_selection),
        )

    def _update_caret(
        self, event: CaretEvent, previous_value: str, previous_selection: int
    ) -> None:
        target = event.target
        if target is None:
            self.logger.debug("Skipping caret update, %s target detached", event.type)
            return

        value = target.get_value()
        selection_start, selection_end = target.get_selection()

        if event.type == EventType.CHANGE:
            if self._is_backspace_over_literal(
                value, previous_value, previous_selection
            ):
                self.go_to_nearest_valid_position(target, previous_selection, LEFT)
            else:
                self.go_to_first_unfilled_position(target)
        elif event.type == EventType.FOCUS:
            self.go_to_first_unfilled_position(target)
        elif event.type == EventType.CLICK:
            if selection_start == selection_end:
                if selection_start in self.valid_positions:
                    event.prevent_default()
                else:
                    self.go_to_first_unfilled_position(target)
        elif event.type == EventType.KEYDOWN:
            if event.key == ArrowKey.LEFT.value:
                self.go_to_nearest_valid_position(target, previous_selection, LEFT)
            elif event.key == ArrowKey.RIGHT.value:
                self.go_to_nearest_valid_position(target, previous_selection, RIGHT)

    def _is_backspace_over_literal(
        self, value: str, previous_value: str, previous_selection: int
    ) -> bool:
        # Best effort: a paste or a composition can produce the same shape.
        if len(value) != len(previous_value) + 1:
            return False
        if previous_selection >= len(self.pattern) or previous_selection >= len(value):
            return False
        pattern_char = self.pattern[previous_selection]
        if is_slot(pattern_char, self.mask_definitions):
            return False
        return value[previous_selection] == pattern_char

    # ------------------------------------------------------------------ #
    def go_to_first_unfilled_position(self, target: HostInput) -> None:
        value = target.get_value()
        position = first_unfilled_position(
            value, self.pattern, self.placeholder, self.mask_definitions
        )
        self._set_caret(target, position, value)

    def go_to_nearest_valid_position(
        self, target: HostInput, position: int, direction: str
    ) -> None:
        caret = nearest_valid_position(self.valid_positions, position, direction)
        self._set_caret(target, caret, target.get_value())

    @staticmethod
    def _set_caret(target: HostInput, position: int, value: str) -> None:
        target.set_selection(min(position, len(value)))
