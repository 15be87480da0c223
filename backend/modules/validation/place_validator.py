"""
modules/validation/place_validator.py
---------------------------------------
Data-quality checks for place rows and day assignments.

  Place:
    ✓ Non-empty name
    ✓ Category in the closed set (legacy short names accepted)
    ✓ lat / lng both present or both absent
    ✓ Latitude in [-90, 90], longitude in [-180, 180]

  Day assignment:
    ✓ day is an integer > 0

  filter_valid() splits a batch into passing items and rejection results.

The suggestion engine never drops a place: a row failing these checks is
still suggested (a half-set position counts as "no coordinates"); the
failure is only logged by the caller.

Usage:
    from modules.validation import validate_place

    result = validate_place(row)
    if not result:
        logger.warning("bad place row: %s", result.errors)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TypeVar

from schemas.place import PlaceCategory, LEGACY_CATEGORY_ALIASES

_KNOWN_CATEGORIES: frozenset[str] = frozenset(
    {c.value for c in PlaceCategory} | set(LEGACY_CATEGORY_ALIASES)
)

T = TypeVar("T")


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """
    Outcome of a single validation run.

    Attributes:
        valid:  True iff there are zero errors.
        errors: Human-readable list of failure reasons.
        record: The input record dict (for logging purposes).
    """
    valid: bool
    errors: list[str] = field(default_factory=list)
    record: dict = field(default_factory=dict, repr=False)

    def __bool__(self) -> bool:
        return self.valid


# ── Place validation ───────────────────────────────────────────────────────────

def _check_axis(name: str, value: Any, bound: float, errors: list[str]) -> None:
    try:
        v = float(value)
    except (TypeError, ValueError):
        errors.append(f"{name}={value!r} must be numeric")
        return
    if math.isnan(v) or not (-bound <= v <= bound):
        errors.append(f"{name}={v} is outside valid range [-{bound:g}, {bound:g}]")


def validate_place(record: dict[str, Any]) -> ValidationResult:
    """Validate a `places` row (or request body) dict."""
    errors: list[str] = []

    # ── Name ───────────────────────────────────────────────────────────────
    name = record.get("name", "")
    if not name or not str(name).strip():
        errors.append("name must not be empty or NULL")

    # ── Category ───────────────────────────────────────────────────────────
    category = record.get("type", record.get("category"))
    if isinstance(category, PlaceCategory):
        category = category.value
    if str(category or "").strip().lower() not in _KNOWN_CATEGORIES:
        errors.append(
            f"type={category!r} is not one of "
            f"{', '.join(c.value for c in PlaceCategory)}"
        )

    # ── Coordinates ────────────────────────────────────────────────────────
    lat = record.get("lat")
    lng = record.get("lng")
    if (lat is None) != (lng is None):
        errors.append(
            f"lat/lng must be provided together (got lat={lat!r}, lng={lng!r})"
        )
    elif lat is not None:
        _check_axis("lat", lat, 90.0, errors)
        _check_axis("lng", lng, 180.0, errors)

    return ValidationResult(valid=len(errors) == 0, errors=errors, record=record)


# ── Day number validation ──────────────────────────────────────────────────────

def validate_day_number(day: Any) -> ValidationResult:
    """Validate a day assignment: a positive integer (bools rejected)."""
    errors: list[str] = []
    if isinstance(day, bool) or not isinstance(day, int):
        errors.append(f"day={day!r} must be a positive integer")
    elif day <= 0:
        errors.append(f"day={day} must be > 0")
    return ValidationResult(valid=len(errors) == 0, errors=errors, record={"day": day})


# ── Batch filter helper ────────────────────────────────────────────────────────

def filter_valid(
    items: Iterable[T],
    validator: Callable[[dict], ValidationResult] = validate_place,
    to_dict: Callable[[T], dict] | None = None,
) -> tuple[list[T], list[ValidationResult]]:
    """
    Apply a validator to every item; split them into passed and rejected.

    Args:
        items:     Dicts, or objects turned into dicts by `to_dict`.
        validator: Per-record check, validate_place by default.
        to_dict:   Optional converter applied before validating.

    Returns:
        (items that passed, ValidationResult of every rejected item), both in
        input order.
    """
    valid_items: list[T] = []
    rejected: list[ValidationResult] = []
    for item in items:
        result = validator(to_dict(item) if to_dict is not None else item)
        if result:
            valid_items.append(item)
        else:
            rejected.append(result)
    return valid_items, rejected
