"""
Rule that accepts a single ASCII letter or digit.
"""

from text_mask_lib.definitions.rules.base_rule import BaseRule


class AlphanumericRule(BaseRule):
    """
    Accepts letters and digits without changing them.  Default slot
    character: ``*``.
    """

    _ALNUM_REGEX = r"[A-Za-z0-9]"

    def __init__(self):
        super().__init__(regex=self._ALNUM_REGEX)
