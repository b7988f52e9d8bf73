from typing import Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query

from .config import load_settings
from .decode import decode_input, split_lines
from .errors import ConfigError, ParseError
from .expenses import find_combination, load_numbers, product_of
from .models import (
    ExpenseResponse,
    HealthResponse,
    ValidateResponse,
    ValidationMode,
    ValidationSummary,
)
from .records import count_valid, load_records

app = FastAPI(
    title="policy-check",
    description="Line-oriented password policy validation and expense report search",
    version="0.1.0",
)


async def _read_lines(file: UploadFile) -> list[str]:
    raw = await file.read()
    try:
        return split_lines(decode_input(raw))
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=422, detail=f"Unreadable input: {exc}") from exc


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/passwords/validate", response_model=ValidateResponse)
async def validate_passwords(
    file: UploadFile = File(...),
    mode: ValidationMode = Query(ValidationMode.count),
    skip_malformed: bool = Query(False),
):
    lines = await _read_lines(file)
    try:
        records, warnings = load_records(lines, skip_malformed=skip_malformed)
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return ValidateResponse(
        mode=mode,
        summary=ValidationSummary(
            records=len(records),
            valid=count_valid(records, mode),
            skipped=len(warnings),
        ),
        warnings=warnings,
    )


@app.post("/expenses/product", response_model=ExpenseResponse)
async def expense_product(
    file: UploadFile = File(...),
    size: int = Query(2, ge=1, le=10),
    target: Optional[int] = Query(None),
    skip_malformed: bool = Query(False),
):
    lines = await _read_lines(file)
    try:
        numbers, warnings = load_numbers(lines, skip_malformed=skip_malformed)
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if target is None:
        try:
            target = load_settings().expense_target
        except ConfigError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    combo = find_combination(numbers, size, target)

    return ExpenseResponse(
        size=size,
        target=target,
        numbers=len(numbers),
        combination=list(combo) if combo is not None else None,
        product=product_of(combo),
        warnings=warnings,
    )
