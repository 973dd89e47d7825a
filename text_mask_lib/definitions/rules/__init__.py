"""
Package that contains concrete mask definition rules.
"""

from text_mask_lib.definitions.rules.base_rule import BaseRule
from text_mask_lib.definitions.rules.digit_rule import DigitRule
from text_mask_lib.definitions.rules.letter_rule import (
    UpperLetterRule,
    LowerLetterRule,
)
from text_mask_lib.definitions.rules.alphanumeric_rule import AlphanumericRule
