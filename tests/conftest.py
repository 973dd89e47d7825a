from __future__ import annotations

import pytest

from text_mask_lib.core.scheduler import ManualScheduler
from text_mask_lib.core.text_mask import create_text_mask
from text_mask_lib.definitions.defaults import DEFAULT_MASK_DEFINITIONS

PHONE_PATTERN = "(999) 999-9999"


class FakeInput:
    """Host input double recording every caret move."""

    def __init__(self, value: str = "", selection: int = 0) -> None:
        self.value = value
        self.selection = (selection, selection)
        self.moves: list[int] = []

    def get_value(self) -> str:
        return self.value

    def get_selection(self) -> tuple[int, int]:
        return self.selection

    def set_selection(self, position: int) -> None:
        self.selection = (position, position)
        self.moves.append(position)


@pytest.fixture
def definitions():
    return DEFAULT_MASK_DEFINITIONS


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def phone_mask(scheduler):
    return create_text_mask(pattern=PHONE_PATTERN, scheduler=scheduler)
