"""
Pattern analysis helpers.

A pattern is a plain string.  Each character is either a *slot* (a key of
the mask definition table) or a *literal* that is copied verbatim into the
formatted value.  The functions below classify pattern positions and derive
the caret offsets that make editing feel natural.
"""

from typing import List, Optional

from text_mask_lib.definitions.defaults import MaskDefinitions


def is_slot(char: str, mask_definitions: MaskDefinitions) -> bool:
    """Return ``True`` when the pattern character *char* is a slot."""
    return char in mask_definitions


def valid_caret_positions(pattern: str, mask_definitions: MaskDefinitions) -> List[int]:
    """
    Compute the offsets where the caret may rest.

    An offset is valid when the pattern has a slot there (the next typed
    character fills it) or right before it (the caret sits behind a typed
    character, which keeps backspace and the end of the value reachable).

    Parameters
    ----------
    pattern : str
        The mask pattern.
    mask_definitions : Mapping[str, MaskRuleI]
        Table of slot characters.

    Returns
    -------
    List[int]
        Strictly ascending offsets in ``[0, len(pattern)]``.  An empty list
        means the pattern contains no slot.
    """
    positions = []
    for index in range(len(pattern) + 1):
        here = index < len(pattern) and is_slot(pattern[index], mask_definitions)
        before = index > 0 and is_slot(pattern[index - 1], mask_definitions)
        if here or before:
            positions.append(index)
    return positions


def char_match_test(char: str, mask_definitions: MaskDefinitions) -> Optional[str]:
    """
    Return the first slot character whose rule accepts *char*.

    ``None`` is returned when no rule accepts it.
    """
    for slot, rule in mask_definitions.items():
        if rule.match(char):
            return slot
    return None


def first_unfilled_position(
    value: str,
    pattern: str,
    placeholder: str,
    mask_definitions: MaskDefinitions,
) -> int:
    """
    Find the earliest slot that still waits for input.

    A slot waits for input when *value* holds the placeholder there or when
    *value* is too short to reach it.  If every slot is filled the offset
    right after the last slot is returned.
    """
    last_slot = None
    for index, char in enumerate(pattern):
        if not is_slot(char, mask_definitions):
            continue
        if index >= len(value) or value[index] == placeholder:
            return index
        last_slot = index
    return 0 if last_slot is None else last_slot + 1


def is_pattern_complete(
    value: str, pattern: str, mask_definitions: MaskDefinitions
) -> bool:
    """
    Check whether every slot of *pattern* holds an accepted character.
    """
    if len(value) != len(pattern):
        return False
    for char, pattern_char in zip(value, pattern):
        rule = mask_definitions.get(pattern_char)
        if rule is not None and not rule.match(char):
            return False
    return True
