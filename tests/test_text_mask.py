from __future__ import annotations

import asyncio
import threading

import pytest

from conftest import PHONE_PATTERN, FakeInput
from text_mask_lib import (
    BaseRule,
    CaretEvent,
    ConfigurationError,
    EventType,
    ManualScheduler,
    TextMaskError,
    build_mask_definitions,
    create_text_mask,
)
from text_mask_lib.core.scheduler import AsyncioScheduler


# configuration ----------------------------------------------------------
def test_missing_pattern_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="pattern required"):
        create_text_mask()
    with pytest.raises(ConfigurationError, match="pattern required"):
        create_text_mask(pattern="")


@pytest.mark.parametrize("placeholder", ["", "__", None])
def test_placeholder_must_be_one_character(placeholder) -> None:
    with pytest.raises(ConfigurationError, match="invalid placeholder length"):
        create_text_mask(pattern=PHONE_PATTERN, placeholder=placeholder)


def test_pattern_without_slots_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="pattern has no slots"):
        create_text_mask(pattern="(---)")


@pytest.mark.parametrize("placeholder,slot", [("0", "9"), ("x", "A"), ("Z", "A")])
def test_placeholder_matching_a_slot_is_rejected(placeholder, slot) -> None:
    with pytest.raises(ConfigurationError, match=f"placeholder ambiguous with slot {slot}"):
        create_text_mask(pattern=PHONE_PATTERN, placeholder=placeholder)


def test_placeholder_check_uses_custom_definitions() -> None:
    definitions = {"#": BaseRule(r"[0-9#]")}

    with pytest.raises(ConfigurationError, match="slot #"):
        create_text_mask(pattern="###", placeholder="#", mask_definitions=definitions)


def test_malformed_options_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        create_text_mask(pattern=PHONE_PATTERN, mask_definitions={"9": "digit"})
    with pytest.raises(ConfigurationError):
        create_text_mask(pattern=PHONE_PATTERN, unknown_option=True)


def test_configuration_error_is_a_text_mask_error() -> None:
    assert issubclass(ConfigurationError, TextMaskError)


def test_exposed_configuration(phone_mask) -> None:
    assert phone_mask.auto_complete == "off"
    assert phone_mask.stripped_pattern == "9999999999"
    assert phone_mask.valid_positions[0] == 1
    assert phone_mask.options.guide is True
    assert phone_mask.options.strip_mask is True


def test_default_scheduler_runs_completion_on_the_event_loop_thread() -> None:
    threads = []
    mask = create_text_mask(
        pattern="99",
        strip_mask=False,
        on_complete_pattern=lambda value: threads.append(threading.current_thread()),
    )

    async def edit() -> None:
        mask.normalize("12", "1_")
        assert threads == []
        await asyncio.sleep(0.05)

    asyncio.run(edit())

    assert isinstance(mask.scheduler, AsyncioScheduler)
    assert threads == [threading.current_thread()]


def test_default_scheduler_queues_completion_without_a_running_loop() -> None:
    completed = []
    mask = create_text_mask(
        pattern="99", strip_mask=False, on_complete_pattern=completed.append
    )

    mask.normalize("12", "1_")

    assert completed == []
    assert mask.scheduler.run_pending() == 1
    assert completed == ["12"]


def test_scheduler_passed_in_is_used(scheduler) -> None:
    mask = create_text_mask(pattern=PHONE_PATTERN, scheduler=scheduler)

    assert mask.scheduler is scheduler


# format -----------------------------------------------------------------
def test_format_phone_number(phone_mask) -> None:
    assert phone_mask.format("5551234567") == "(555) 123-4567"


def test_format_without_guide_truncates() -> None:
    mask = create_text_mask(pattern=PHONE_PATTERN, guide=False)

    assert mask.format("555") == "(555"
    assert mask.format("555x") == "(555"
    assert mask.format("") == ""


def test_format_empty_value(phone_mask) -> None:
    assert phone_mask.format("") == "(___) ___-____"
    assert phone_mask.format(None) == "(___) ___-____"
    assert create_text_mask(pattern=PHONE_PATTERN, allow_empty=True).format("") == ""


def test_format_is_idempotent(phone_mask) -> None:
    for value in ("", "5", "555123", "5551234567"):
        once = phone_mask.format(value)
        assert phone_mask.format(once) == once


def test_format_keeps_stored_formatted_value_without_strip_mask() -> None:
    mask = create_text_mask(pattern=PHONE_PATTERN, strip_mask=False)

    assert mask.format("(555) 1__-____") == "(555) 1__-____"
    assert mask.format("") == "(___) ___-____"


# normalize --------------------------------------------------------------
def test_normalize_typing_a_digit(phone_mask) -> None:
    assert phone_mask.normalize("(5555) ___-____", "555") == "5555"


def test_normalize_deleting_a_literal() -> None:
    mask = create_text_mask(pattern="99/99", scheduler=ManualScheduler())

    assert mask.normalize("1234", "1234") == "1234"
    assert mask.format("1234") == "12/34"


def test_normalize_drops_invalid_characters(phone_mask) -> None:
    assert phone_mask.normalize("(555a) ___-____", "555") == "555"


def test_normalize_with_strip_mask_disabled_returns_formatted_value() -> None:
    mask = create_text_mask(pattern=PHONE_PATTERN, strip_mask=False)

    assert mask.normalize("(5555) ___-____", "(555) ___-____") == "(555) 5__-____"


def test_normalize_applies_transform_to_new_characters() -> None:
    mask = create_text_mask(pattern="AAA-999", scheduler=ManualScheduler())

    assert mask.normalize("ABc-___", "AB") == "ABC"
    assert mask.format("ABC") == "ABC-___"


def test_normalize_with_extended_definitions() -> None:
    hex_rule = BaseRule(r"[0-9A-Fa-f]", transform=str.upper)
    mask = create_text_mask(
        pattern="#hh",
        mask_definitions=build_mask_definitions({"h": hex_rule}),
        scheduler=ManualScheduler(),
    )

    assert mask.normalize("#ag", "") == "A"
    assert mask.format("ff") == "#FF"


def test_on_change_fires_only_when_value_changes() -> None:
    changes = []
    mask = create_text_mask(
        pattern=PHONE_PATTERN, on_change=changes.append, scheduler=ManualScheduler()
    )

    mask.normalize("(5555) ___-____", "555")
    mask.normalize("(5555) ___-____", "5555")
    mask.normalize("(___) ___-____", None)

    assert changes == ["5555"]


def test_on_change_fires_for_first_non_empty_value() -> None:
    changes = []
    mask = create_text_mask(pattern=PHONE_PATTERN, on_change=changes.append)

    mask.normalize("(5__) ___-____", None)

    assert changes == ["5"]


def test_on_complete_pattern_fires_once_after_deferral() -> None:
    scheduler = ManualScheduler()
    completed = []
    mask = create_text_mask(
        pattern=PHONE_PATTERN,
        strip_mask=False,
        on_complete_pattern=completed.append,
        scheduler=scheduler,
    )

    value = mask.normalize("(555) 123-4567", "(555) 123-456_")

    assert value == "(555) 123-4567"
    assert completed == []
    scheduler.run_pending()
    assert completed == ["(555) 123-4567"]

    mask.normalize("(555) 123-45678", value)
    scheduler.run_pending()
    assert completed == ["(555) 123-4567"]


def test_on_complete_pattern_not_fired_for_partial_value() -> None:
    scheduler = ManualScheduler()
    completed = []
    mask = create_text_mask(
        pattern=PHONE_PATTERN, on_complete_pattern=completed.append, scheduler=scheduler
    )

    mask.normalize("(555) 12_-____", "55512")

    assert scheduler.pending == 0
    assert completed == []


# helpers ----------------------------------------------------------------
def test_strip_and_is_complete(phone_mask) -> None:
    assert phone_mask.strip("(555) 1__-____") == "5551"
    assert phone_mask.is_complete("5551234567")
    assert not phone_mask.is_complete("555")


# event handlers ---------------------------------------------------------
def test_event_handlers_only_move_the_caret(phone_mask, scheduler) -> None:
    target = FakeInput("(___) ___-____", selection=0)

    phone_mask.on_focus(CaretEvent(type=EventType.FOCUS, target=target))
    scheduler.run_pending()
    assert target.selection == (1, 1)

    target.selection = (0, 0)
    phone_mask.on_key_down(
        CaretEvent(type=EventType.KEYDOWN, target=target, key="ArrowRight")
    )
    scheduler.run_pending()
    assert target.selection == (1, 1)

    target.selection = (5, 5)
    phone_mask.on_click(CaretEvent(type=EventType.CLICK, target=target))
    scheduler.run_pending()
    assert target.selection == (1, 1)

    phone_mask.on_change(CaretEvent(type="change", target=target))
    scheduler.run_pending()
    assert target.selection == (1, 1)
    assert target.value == "(___) ___-____"


def test_editing_session_keeps_value_and_caret_in_sync(phone_mask, scheduler) -> None:
    target = FakeInput(phone_mask.format(""), selection=1)
    stored = ""

    for digit in "5551234567":
        caret = target.selection[0]
        target.value = target.value[:caret] + digit + target.value[caret:]
        target.selection = (caret + 1, caret + 1)
        phone_mask.on_change(CaretEvent(type=EventType.CHANGE, target=target))
        stored = phone_mask.normalize(target.value, stored)
        target.value = phone_mask.format(stored)
        scheduler.run_pending()

    assert stored == "5551234567"
    assert target.value == "(555) 123-4567"
    assert target.selection == (14, 14)
