"""
Configuration model of a text mask.

The options are validated once, when the mask is created, and are never
mutated afterwards (the model is frozen).  Structural checks (field types)
are done by Pydantic; the mask-specific checks (placeholder length, slot
presence, placeholder ambiguity) are done by
:class:`~text_mask_lib.core.text_mask.TextMask` so that they raise
:class:`~text_mask_lib.exceptions.ConfigurationError`.
"""

from typing import Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from text_mask_lib.constants import DEFAULT_PLACEHOLDER
from text_mask_lib.definitions.core.rule_interface import MaskRuleI
from text_mask_lib.definitions.defaults import DEFAULT_MASK_DEFINITIONS


class TextMaskOptions(BaseModel):
    """
    Options accepted by :func:`~text_mask_lib.core.text_mask.create_text_mask`.

    Attributes
    ----------

    pattern: str, required. Literal characters mixed with slot characters.

    placeholder: str, Default ``_``. Single character shown in unfilled slots.

    mask_definitions: Dict[str, MaskRuleI], Default built-in table.
    Maps slot characters to rules.

    guide: bool, Default True. Show placeholders for unfilled slots instead
    of truncating the formatted value.

    strip_mask: bool, Default True. The stored value is the raw slot content
    instead of the formatted value.

    allow_empty: bool, Default False. An empty value formats to an empty
    string instead of the placeholder skeleton.

    on_change: Optional callback called with the new stored value whenever
    it changes.

    on_complete_pattern: Optional callback called (deferred) with the new
    stored value when a change fills every slot.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True, frozen=True, extra="forbid"
    )

    pattern: Optional[str] = None
    placeholder: Optional[str] = DEFAULT_PLACEHOLDER
    mask_definitions: Dict[str, MaskRuleI] = Field(
        default_factory=lambda: dict(DEFAULT_MASK_DEFINITIONS)
    )
    guide: bool = True
    strip_mask: bool = True
    allow_empty: bool = False
    on_change: Optional[Callable[[str], None]] = None
    on_complete_pattern: Optional[Callable[[str], None]] = None
