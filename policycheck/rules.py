"""
Deterministic parsing rules.

This file exists to make the accepted input shapes explicit and enforceable.
"""

import re

# <low>-<high> <char>: <subject>; bounds are ASCII digits only
RECORD_PATTERN = re.compile(r"^([0-9]+)-([0-9]+) (\S): (\S+)$")
RECORD_FORMAT = "{low}-{high} {target}: {subject}"

# Record fields must survive format -> parse unchanged
TARGET_PATTERN = re.compile(r"\S")
SUBJECT_PATTERN = re.compile(r"\S+")

NUMBER_PATTERN = re.compile(r"^[+-]?[0-9]+$")

DEFAULT_EXPENSE_TARGET = 2020
EXPENSE_COMBINATION_SIZES = (2, 3)

FALLBACK_ENCODING = "utf-8-sig"
