"""
Built-in mask definition table.

Slot characters:

* ``9`` – digit,
* ``A`` – letter, stored upper case,
* ``a`` – letter, stored lower case,
* ``*`` – letter or digit.
"""

from typing import Dict, Mapping, Optional

from text_mask_lib.definitions.core.rule_interface import MaskRuleI
from text_mask_lib.definitions.rules import (
    DigitRule,
    UpperLetterRule,
    LowerLetterRule,
    AlphanumericRule,
)

MaskDefinitions = Mapping[str, MaskRuleI]

DEFAULT_MASK_DEFINITIONS: Dict[str, MaskRuleI] = {
    "9": DigitRule(),
    "A": UpperLetterRule(),
    "a": LowerLetterRule(),
    "*": AlphanumericRule(),
}


def build_mask_definitions(
    extra: Optional[MaskDefinitions] = None,
) -> Dict[str, MaskRuleI]:
    """
    Return a copy of :data:`DEFAULT_MASK_DEFINITIONS` updated with *extra*.

    Entries of *extra* replace the built-in rule of the same slot character.
    """
    definitions = dict(DEFAULT_MASK_DEFINITIONS)
    if extra:
        definitions.update(extra)
    return definitions
