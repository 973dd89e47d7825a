"""
Mask module
===========

Pure string functions that move a value between its *raw* form (the
characters typed into slots, in pattern order) and its *formatted* form
(the pattern with slots filled in):

* :func:`apply_mask` – raw value -> formatted value.
* :func:`mask_strip` – formatted value -> raw value.
* :func:`input_reformat` – edited formatted value -> candidate raw value.
* :func:`apply_transform` – applies slot transforms to newly typed characters.

None of the functions raise on bad input: characters that do not fit the
pattern are dropped.
"""

from typing import Optional

from text_mask_lib.core.pattern import is_slot
from text_mask_lib.definitions.defaults import MaskDefinitions


def apply_mask(
    raw: str,
    pattern: str,
    placeholder: str,
    guide: bool,
    allow_empty: bool,
    mask_definitions: MaskDefinitions,
) -> str:
    """
    Format *raw* according to *pattern*.

    The pattern is walked left to right with an independent cursor into
    *raw*:

    * a literal is emitted; if the pending raw character equals it, that
      character is consumed (typed literals are absorbed, not duplicated);
    * a slot takes the next raw character accepted by its rule, applying
      the rule's transform.  Rejected characters are dropped.

    When *raw* runs out, the remaining slots receive *placeholder* if
    *guide* is set; otherwise the output is cut back to the last filled
    slot, dropping any literals that follow it.

    Parameters
    ----------
    raw : str
        Characters to place into the slots.
    pattern : str
        The mask pattern.
    placeholder : str
        Single character shown in unfilled slots.
    guide : bool
        Pad unfilled slots with *placeholder* instead of truncating.
    allow_empty : bool
        When ``True`` an empty *raw* formats to ``""``.  When ``False`` it
        formats to the placeholder skeleton (guide mode only).
    mask_definitions : Mapping[str, MaskRuleI]
        Table of slot characters.

    Returns
    -------
    str
        The formatted value, never longer than *pattern*.
    """
    raw = raw or ""
    if not raw and (allow_empty or not guide):
        return ""

    result = []
    filled = 0
    raw_index = 0
    for pattern_char in pattern:
        exhausted = raw_index >= len(raw)
        if exhausted and not guide:
            return "".join(result[:filled])

        rule = mask_definitions.get(pattern_char)
        if rule is None:
            result.append(pattern_char)
            if not exhausted and raw[raw_index] == pattern_char:
                raw_index += 1
            continue

        accepted = None
        while raw_index < len(raw):
            char = raw[raw_index]
            raw_index += 1
            if rule.match(char):
                accepted = rule.transform(char) if rule.has_transform else char
                break

        if accepted is None:
            if not guide:
                # Without guide the output ends at the last filled slot.
                return "".join(result[:filled])
            accepted = placeholder
        result.append(accepted)
        filled = len(result)

    return "".join(result)


def mask_strip(
    formatted: str,
    pattern: str,
    placeholder: str,
    mask_definitions: MaskDefinitions,
) -> str:
    """
    Remove literals and placeholders from *formatted*.

    A character is kept iff its pattern position is a slot and it is not the
    placeholder.  Characters beyond the end of the pattern are dropped.
    """
    return "".join(
        char
        for char, pattern_char in zip(formatted or "", pattern)
        if is_slot(pattern_char, mask_definitions) and char != placeholder
    )


def input_reformat(
    edited_value: str,
    pattern: str,
    placeholder: str,
    mask_definitions: MaskDefinitions,
) -> str:
    """
    Recover the characters a user meant to type from an edited value.

    The edited value is the previously formatted value after a keystroke,
    so it may be one character longer (insertion) or shorter (deletion)
    than the pattern expects.  A pattern cursor follows the edited value:

    * a character equal to the literal expected at the cursor is that
      literal and is skipped;
    * any other character met where a literal is expected means the literal
      was deleted, so the cursor moves on to the next slot;
    * placeholders are skipped, everything else is kept in order.

    Characters past the end of the pattern are kept as well (typing into a
    full value); :func:`apply_mask` drops whatever no longer fits.

    Returns
    -------
    str
        The candidate raw value.
    """
    raw = []
    cursor = 0
    for char in edited_value or "":
        while cursor < len(pattern) and not is_slot(pattern[cursor], mask_definitions):
            if char == pattern[cursor]:
                break
            cursor += 1

        if cursor >= len(pattern):
            if char != placeholder:
                raw.append(char)
            continue

        pattern_char = pattern[cursor]
        cursor += 1
        if not is_slot(pattern_char, mask_definitions):
            continue
        if char != placeholder:
            raw.append(char)
    return "".join(raw)


def apply_transform(
    stripped_new: str,
    stripped_prev: Optional[str],
    stripped_pattern: str,
    mask_definitions: MaskDefinitions,
) -> str:
    """
    Apply slot transforms to the characters typed since *stripped_prev*.

    Positions where *stripped_new* equals *stripped_prev* pass through;
    positions past the end of *stripped_prev*, or holding another
    character, get the transform of the slot at the same index of
    *stripped_pattern* (the pattern reduced to its slot characters).
    """
    stripped_prev = stripped_prev or ""
    result = []
    for index, char in enumerate(stripped_new):
        if index < len(stripped_prev) and stripped_prev[index] == char:
            result.append(char)
            continue
        rule = None
        if index < len(stripped_pattern):
            rule = mask_definitions.get(stripped_pattern[index])
        if rule is not None and rule.has_transform and rule.match(char):
            char = rule.transform(char)
        result.append(char)
    return "".join(result)
