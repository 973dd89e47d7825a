"""
Rule that accepts a single decimal digit.
"""

from text_mask_lib.definitions.rules.base_rule import BaseRule


class DigitRule(BaseRule):
    """
    Accepts ``0`` to ``9``.  Default slot character: ``9``.
    """

    _DIGIT_REGEX = r"[0-9]"

    def __init__(self):
        super().__init__(regex=self._DIGIT_REGEX)
