"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigError
from .rules import DEFAULT_EXPENSE_TARGET

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_PREFIX = "POLICYCHECK_"


class Settings(BaseModel):
    log_level: str = "INFO"
    expense_target: int = DEFAULT_EXPENSE_TARGET

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        # getLevelName maps known names to their numeric level
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from POLICYCHECK_* variables.

    Raises ConfigError naming the offending variable when a value is invalid.
    """
    env = os.environ if environ is None else environ
    values = {}
    for field in Settings.model_fields:
        raw = env.get(ENV_PREFIX + field.upper())
        if raw is not None:
            values[field] = raw

    try:
        return Settings(**values)
    except ValidationError as exc:
        bad = ", ".join(ENV_PREFIX + str(err["loc"][0]).upper() for err in exc.errors())
        raise ConfigError(f"invalid setting {bad}: {exc}") from exc
