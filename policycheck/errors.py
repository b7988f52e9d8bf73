from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Raised when an input line does not have the expected shape."""

    def __init__(self, message: str, line: str, row: Optional[int] = None):
        self.line = line
        self.row = row
        location = f"line {row}: " if row is not None else ""
        super().__init__(f"{location}{message}: {line!r}")


class ConfigError(ValueError):
    """Raised when an environment setting has an invalid value."""
