from __future__ import annotations

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .rules import SUBJECT_PATTERN, TARGET_PATTERN


class Policy(BaseModel):
    model_config = ConfigDict(frozen=True)

    low: int = Field(ge=0)
    high: int = Field(ge=0)
    target: str

    @field_validator("target")
    @classmethod
    def _single_visible_char(cls, v: str) -> str:
        if TARGET_PATTERN.fullmatch(v) is None:
            raise ValueError("target must be a single non-whitespace character")
        return v


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    policy: Policy
    subject: str

    @field_validator("subject")
    @classmethod
    def _no_whitespace(cls, v: str) -> str:
        if SUBJECT_PATTERN.fullmatch(v) is None:
            raise ValueError("subject must be non-empty and contain no whitespace")
        return v


class ValidationMode(str, Enum):
    count = "count"
    position = "position"


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class ValidationSummary(BaseModel):
    records: int = 0
    valid: int = 0
    skipped: int = 0


class ValidateResponse(BaseModel):
    mode: ValidationMode
    summary: ValidationSummary
    warnings: List[ReportItem] = Field(default_factory=list)


class ExpenseResponse(BaseModel):
    size: int
    target: int
    numbers: int = 0
    combination: Optional[List[int]] = Field(default=None, examples=[[1721, 299]])
    product: Optional[int] = Field(default=None, examples=[514579])
    warnings: List[ReportItem] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
