"""
Rules that accept a single ASCII letter and fold its case.
"""

from text_mask_lib.definitions.rules.base_rule import BaseRule


class UpperLetterRule(BaseRule):
    """
    Accepts ``A-Z`` and ``a-z``; stores the upper case letter.
    Default slot character: ``A``.
    """

    _LETTER_REGEX = r"[A-Za-z]"

    def __init__(self):
        super().__init__(regex=self._LETTER_REGEX, transform=str.upper)


class LowerLetterRule(BaseRule):
    """
    Accepts ``A-Z`` and ``a-z``; stores the lower case letter.
    Default slot character: ``a``.
    """

    _LETTER_REGEX = r"[A-Za-z]"

    def __init__(self):
        super().__init__(regex=self._LETTER_REGEX, transform=str.lower)
