from text_mask_lib.core.text_mask import TextMask, create_text_mask
from text_mask_lib.core.caret import CaretController, HostInput
from text_mask_lib.core.scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    Scheduler,
    TimerScheduler,
)
from text_mask_lib.data_models.events import ArrowKey, CaretEvent, EventType
from text_mask_lib.data_models.options import TextMaskOptions
from text_mask_lib.definitions.defaults import (
    DEFAULT_MASK_DEFINITIONS,
    build_mask_definitions,
)
from text_mask_lib.definitions.core.rule_interface import MaskRuleI
from text_mask_lib.definitions.rules import BaseRule
from text_mask_lib.exceptions import TextMaskError, ConfigurationError

__all__ = [
    "TextMask",
    "create_text_mask",
    "CaretController",
    "HostInput",
    "Scheduler",
    "AsyncioScheduler",
    "TimerScheduler",
    "ManualScheduler",
    "ArrowKey",
    "CaretEvent",
    "EventType",
    "TextMaskOptions",
    "DEFAULT_MASK_DEFINITIONS",
    "build_mask_definitions",
    "MaskRuleI",
    "BaseRule",
    "TextMaskError",
    "ConfigurationError",
]
