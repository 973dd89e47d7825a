"""
Text mask module
================

Provides the :class:`TextMask` class – the only boundary the rest of an
application needs.  A mask is configured once from a pattern (plus optional
placeholder, mask definitions and flags) and then exposes:

* :meth:`TextMask.format` – stored value -> displayed value.
* :meth:`TextMask.normalize` – edited displayed value -> new stored value,
  calling ``on_change`` / ``on_complete_pattern`` on the way.
* :meth:`TextMask.on_key_down`, :meth:`TextMask.on_change`,
  :meth:`TextMask.on_focus`, :meth:`TextMask.on_click` – event handlers the
  host input calls; they only move the caret.

Example::

    mask = create_text_mask(pattern="(999) 999-9999")
    mask.format("5551234567")        # '(555) 123-4567'
    mask.normalize("(555) 1__-____", "555")    # '5551'
"""

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from text_mask_lib.constants import AUTO_COMPLETE, COMPLETE_PATTERN_DELAY
from text_mask_lib.core.caret import CaretController
from text_mask_lib.core.mask import (
    apply_mask,
    apply_transform,
    input_reformat,
    mask_strip,
)
from text_mask_lib.core.pattern import (
    char_match_test,
    is_pattern_complete,
    valid_caret_positions,
)
from text_mask_lib.core.scheduler import AsyncioScheduler, Scheduler
from text_mask_lib.data_models.events import CaretEvent
from text_mask_lib.data_models.options import TextMaskOptions
from text_mask_lib.exceptions import ConfigurationError


class TextMask:
    """
    Formats, normalizes and guides the caret for one pattern.

    Parameters
    ----------
    options : TextMaskOptions
        Validated configuration.
    scheduler : Scheduler | None
        Deferral primitive for caret updates and ``on_complete_pattern``.
        Defaults to :class:`~text_mask_lib.core.scheduler.AsyncioScheduler`,
        which runs them on the event loop of the thread that dispatches the
        events.
    logger : logging.Logger | None
        Logger for diagnostic output; a module logger is used when omitted.

    Raises
    ------
    ConfigurationError
        If the pattern is missing or has no slot, if the placeholder is not
        a single character, or if a mask definition accepts the placeholder.
    """

    auto_complete = AUTO_COMPLETE

    def __init__(
        self,
        options: TextMaskOptions,
        scheduler: Optional[Scheduler] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)

        if not options.pattern:
            raise ConfigurationError("pattern required")

        if not options.placeholder or len(options.placeholder) != 1:
            raise ConfigurationError("invalid placeholder length")

        self._options = options
        self._valid_positions = valid_caret_positions(
            options.pattern, options.mask_definitions
        )
        if not self._valid_positions:
            raise ConfigurationError("pattern has no slots")

        placeholder_match = char_match_test(
            options.placeholder, options.mask_definitions
        )
        if placeholder_match is not None:
            raise ConfigurationError(
                f"placeholder ambiguous with slot {placeholder_match}"
            )

        self._stripped_pattern = mask_strip(
            options.pattern,
            options.pattern,
            options.placeholder,
            options.mask_definitions,
        )
        self._scheduler = scheduler or AsyncioScheduler()
        self._caret = CaretController(
            pattern=options.pattern,
            placeholder=options.placeholder,
            mask_definitions=options.mask_definitions,
            valid_positions=self._valid_positions,
            scheduler=self._scheduler,
            logger=self.logger,
        )

        self.logger.debug(
            "Text mask configured: pattern=%r placeholder=%r guide=%s "
            "strip_mask=%s allow_empty=%s valid_positions=%s",
            options.pattern,
            options.placeholder,
            options.guide,
            options.strip_mask,
            options.allow_empty,
            self._valid_positions,
        )

    # ------------------------------------------------------------------ #
    @property
    def options(self) -> TextMaskOptions:
        return self._options

    @property
    def valid_positions(self):
        return list(self._valid_positions)

    @property
    def stripped_pattern(self) -> str:
        return self._stripped_pattern

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    # ------------------------------------------------------------------ #
    def format(self, store_value: Optional[str]) -> str:
        """
        Return the displayed form of a stored value.

        With ``strip_mask=False`` a non-empty stored value is already
        formatted and is returned unchanged.
        """
        return self._format(store_value)

    def _format(self, store_value: Optional[str], from_normalize: bool = False) -> str:
        o = self._options
        if not store_value:
            return apply_mask(
                "", o.pattern, o.placeholder, o.guide, o.allow_empty, o.mask_definitions
            )
        if not o.strip_mask and not from_normalize:
            return store_value
        return apply_mask(
            store_value,
            o.pattern,
            o.placeholder,
            o.guide,
            o.allow_empty,
            o.mask_definitions,
        )

    def normalize(self, updated_value: Optional[str], previous_value: Optional[str]) -> str:
        """
        Turn an edited displayed value into the new stored value.

        Parameters
        ----------
        updated_value : str
            Content of the host input after the user's edit.
        previous_value : str | None
            Stored value before the edit (``None`` before the first edit).

        Returns
        -------
        str
            The raw slot characters (``strip_mask=True``) or the formatted
            value (``strip_mask=False``).
        """
        o = self._options
        candidate = input_reformat(
            updated_value, o.pattern, o.placeholder, o.mask_definitions
        )

        if o.strip_mask:
            stripped_previous = previous_value
        else:
            stripped_previous = mask_strip(
                previous_value, o.pattern, o.placeholder, o.mask_definitions
            )
        transformed = apply_transform(
            candidate, stripped_previous, self._stripped_pattern, o.mask_definitions
        )

        formatted = self._format(transformed, from_normalize=True)
        if o.strip_mask:
            new_value = mask_strip(
                formatted, o.pattern, o.placeholder, o.mask_definitions
            )
        else:
            new_value = formatted

        has_value_changed = new_value != previous_value and (
            new_value != "" or previous_value is not None
        )

        if o.on_change is not None and has_value_changed:
            o.on_change(new_value)

        if (
            o.on_complete_pattern is not None
            and has_value_changed
            and is_pattern_complete(formatted, o.pattern, o.mask_definitions)
        ):
            self.logger.debug("Pattern %r completed with %r", o.pattern, new_value)
            self._scheduler.schedule(
                COMPLETE_PATTERN_DELAY, self._complete_callback(new_value)
            )

        return new_value

    def _complete_callback(self, value: str) -> Callable[[], None]:
        callback = self._options.on_complete_pattern
        return lambda: callback(value)

    # ------------------------------------------------------------------ #
    def strip(self, formatted: Optional[str]) -> str:
        """Return the raw slot characters of a formatted value."""
        o = self._options
        return mask_strip(formatted, o.pattern, o.placeholder, o.mask_definitions)

    def is_complete(self, store_value: Optional[str]) -> bool:
        """Check whether a stored value fills every slot of the pattern."""
        o = self._options
        formatted = self._format(store_value, from_normalize=True)
        return is_pattern_complete(formatted, o.pattern, o.mask_definitions)

    # ------------------------------------------------------------------ #
    def on_key_down(self, event: CaretEvent) -> None:
        self._caret.handle(event)

    def on_change(self, event: CaretEvent) -> None:
        self._caret.handle(event)

    def on_focus(self, event: CaretEvent) -> None:
        self._caret.handle(event)

    def on_click(self, event: CaretEvent) -> None:
        self._caret.handle(event)


def create_text_mask(
    scheduler: Optional[Scheduler] = None,
    logger: Optional[logging.Logger] = None,
    **options,
) -> TextMask:
    """
    Build a :class:`TextMask` from keyword options.

    Accepts the fields of
    :class:`~text_mask_lib.data_models.options.TextMaskOptions`
    (``pattern``, ``placeholder``, ``mask_definitions``, ``guide``,
    ``strip_mask``, ``allow_empty``, ``on_change``, ``on_complete_pattern``).

    Raises
    ------
    ConfigurationError
        If the options are malformed or describe an unusable mask.
    """
    if options.get("mask_definitions") is None:
        options.pop("mask_definitions", None)
    try:
        model = TextMaskOptions(**options)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid text mask options: {exc}") from exc
    return TextMask(model, scheduler=scheduler, logger=logger)
