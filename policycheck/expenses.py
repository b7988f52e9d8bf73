"""Expense report: find entries that sum to a target and multiply them."""

from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import ParseError
from .models import ReportItem
from .rules import DEFAULT_EXPENSE_TARGET, NUMBER_PATTERN

logger = logging.getLogger(__name__)


def load_numbers(lines: Iterable[str], skip_malformed: bool = False) -> Tuple[List[int], List[ReportItem]]:
    numbers: list[int] = []
    warnings: list[ReportItem] = []

    for i, line in enumerate(lines):
        value = line.strip()
        if not value:
            continue
        if NUMBER_PATTERN.match(value):
            numbers.append(int(value))
            continue

        if not skip_malformed:
            raise ParseError("expected an integer", line, row=i + 1)
        logger.warning("skipping non-integer entry on line %d: %r", i + 1, line)
        warnings.append(ReportItem(
            row=i + 1,
            issue="malformed_line",
            value=line,
            action="skipped",
        ))

    return numbers, warnings


def find_combination(numbers: Sequence[int], size: int, target: int = DEFAULT_EXPENSE_TARGET) -> Optional[Tuple[int, ...]]:
    """
    Return the first ``size`` distinct entries (in input order) summing to
    ``target``, or None when no such combination exists.
    """
    if size < 1:
        raise ValueError(f"combination size must be positive, got {size}")

    for combo in combinations(numbers, size):
        if sum(combo) == target:
            return combo
    return None


def product_of(combo: Optional[Sequence[int]]) -> Optional[int]:
    return math.prod(combo) if combo is not None else None


def find_product(numbers: Sequence[int], size: int, target: int = DEFAULT_EXPENSE_TARGET) -> Optional[int]:
    combo = find_combination(numbers, size, target)
    if combo is None:
        logger.info("no %d entries sum to %d", size, target)
    return product_of(combo)
