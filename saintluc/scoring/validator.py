"""Validates raw patient values at the boundary and builds a PatientInput."""

import math
from collections.abc import Mapping
from typing import Any

from saintluc.scoring.exceptions import PatientInputValidationError
from saintluc.scoring.models import PATIENT_FIELDS, PatientInput

_BINARY_FIELDS = frozenset({"gender", "surgical_indication", "treated_hta"})
_POSITIVE_FIELDS = frozenset({"age", "preop_emoglobin"})
_ASA_SCORES = frozenset({1, 2, 3, 4})


class _InvalidValue(Exception):
    """Carries the reason a single field was rejected."""


def validate_and_build(data: Mapping[str, Any]) -> PatientInput:
    """Validate raw values and build a PatientInput.

    Every field is checked before failing so the error names all
    offending fields at once. Keys outside the six inputs are ignored.

    Raises:
        PatientInputValidationError: if any field is missing or malformed.
    """
    values: dict[str, float | int] = {}
    errors: dict[str, str] = {}
    for field in PATIENT_FIELDS:
        try:
            values[field] = _validate_field(field, data.get(field))
        except _InvalidValue as exc:
            errors[field] = str(exc)
    if errors:
        raise PatientInputValidationError(errors)
    return PatientInput(**values)  # type: ignore[arg-type]


def _validate_field(field: str, raw: Any) -> float | int:
    number = _to_number(raw)
    if field in _POSITIVE_FIELDS:
        if number <= 0:
            raise _InvalidValue("must be greater than 0")
        return number
    if field in _BINARY_FIELDS:
        return _to_category(number, frozenset({0, 1}))
    return _to_category(number, _ASA_SCORES)


def _to_number(raw: Any) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise _InvalidValue("is required")
    if isinstance(raw, bool):
        raise _InvalidValue("must be a number")
    if isinstance(raw, (int, float)):
        try:
            number = float(raw)
        except OverflowError:
            raise _InvalidValue("must be a finite number") from None
    elif isinstance(raw, str):
        try:
            number = float(raw.strip())
        except ValueError:
            raise _InvalidValue("must be a number") from None
    else:
        raise _InvalidValue("must be a number")
    if not math.isfinite(number):
        raise _InvalidValue("must be a finite number")
    return number


def _to_category(number: float, allowed: frozenset[int]) -> int:
    if not number.is_integer() or int(number) not in allowed:
        choices = ", ".join(str(v) for v in sorted(allowed))
        raise _InvalidValue(f"must be one of {choices}")
    return int(number)
