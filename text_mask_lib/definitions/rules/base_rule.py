"""
Regex backed mask definition rule.
"""

import re
from typing import Callable, Optional

from text_mask_lib.definitions.core.rule_interface import MaskRuleI


class BaseRule(MaskRuleI):
    """
    Accepts every character fully matched by ``regex``.

    Parameters
    ----------
    regex : str
        Pattern tested against a single character.
    transform : Callable[[str], str] | None
        Optional function applied to accepted characters.
    flags : int
        ``re`` flags used to compile ``regex``.
    """

    def __init__(
        self,
        regex: str,
        transform: Optional[Callable[[str], str]] = None,
        flags: int = 0,
    ):
        self.regex = regex
        self._compiled = re.compile(regex, flags)
        self._transform = transform

    def match(self, char: str) -> bool:
        if not char:
            return False
        return self._compiled.fullmatch(char) is not None

    @property
    def has_transform(self) -> bool:
        return self._transform is not None

    def transform(self, char: str) -> str:
        if self._transform is None:
            return char
        return self._transform(char)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(regex={self.regex!r})"
