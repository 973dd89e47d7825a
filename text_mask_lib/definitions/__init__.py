"""
Mask definitions: the table that maps a slot character of a pattern to the
rule deciding which characters the slot accepts.

The public API currently consists of:
- MaskRuleI (interface)
- BaseRule (regex backed rule)
- Concrete rules (DigitRule, UpperLetterRule, LowerLetterRule, AlphanumericRule)
- DEFAULT_MASK_DEFINITIONS / build_mask_definitions
"""
