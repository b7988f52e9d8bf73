"""
Password policy records.

A record line looks like ``1-3 a: abcde``: two bounds, a target character and
the subject string the policy is checked against. Two rules are supported:

- count: the target occurs between ``low`` and ``high`` times (inclusive).
- position: exactly one of the 1-indexed positions ``low`` / ``high`` holds
  the target.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from .errors import ParseError
from .models import Policy, Record, ReportItem, ValidationMode
from .rules import RECORD_FORMAT, RECORD_PATTERN

logger = logging.getLogger(__name__)


def parse_record(line: str) -> Record:
    m = RECORD_PATTERN.match(line.rstrip("\n"))
    if m is None:
        raise ParseError("expected '<low>-<high> <char>: <subject>'", line)

    low, high, target, subject = m.groups()
    try:
        return Record(
            policy=Policy(low=int(low), high=int(high), target=target),
            subject=subject,
        )
    except ValidationError as exc:
        raise ParseError(str(exc), line) from exc


def format_record(record: Record) -> str:
    return RECORD_FORMAT.format(
        low=record.policy.low,
        high=record.policy.high,
        target=record.policy.target,
        subject=record.subject,
    )


def validate_count(record: Record) -> bool:
    policy = record.policy
    return policy.low <= record.subject.count(policy.target) <= policy.high


def _char_at(subject: str, position: int) -> Optional[str]:
    # positions are 1-indexed; anything outside the subject holds nothing
    if 1 <= position <= len(subject):
        return subject[position - 1]
    return None


def validate_position(record: Record) -> bool:
    policy = record.policy
    first = _char_at(record.subject, policy.low) == policy.target
    second = _char_at(record.subject, policy.high) == policy.target
    return first != second


VALIDATORS: Dict[ValidationMode, Callable[[Record], bool]] = {
    ValidationMode.count: validate_count,
    ValidationMode.position: validate_position,
}


def load_records(lines: Iterable[str], skip_malformed: bool = False) -> Tuple[List[Record], List[ReportItem]]:
    """
    Parse every non-blank line into a Record.

    A malformed line raises ParseError (with its 1-based row) unless
    ``skip_malformed`` is set, in which case it is reported and skipped.
    """
    records: list[Record] = []
    warnings: list[ReportItem] = []

    for i, line in enumerate(lines):
        if not line.strip():
            continue
        try:
            records.append(parse_record(line))
        except ParseError as exc:
            if not skip_malformed:
                raise ParseError("malformed record", line, row=i + 1) from exc
            logger.warning("skipping malformed record on line %d: %r", i + 1, line)
            warnings.append(ReportItem(
                row=i + 1,
                issue="malformed_line",
                value=line,
                action="skipped",
            ))

    return records, warnings


def count_valid(records: Iterable[Record], mode: ValidationMode) -> int:
    validator = VALIDATORS[ValidationMode(mode)]
    return sum(1 for r in records if validator(r))
