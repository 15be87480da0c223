"""
modules/validation package: data quality guards for place rows and day assignments.
"""
from modules.validation.place_validator import (
    ValidationResult,
    filter_valid,
    validate_place,
    validate_day_number,
)

__all__ = [
    "ValidationResult",
    "filter_valid",
    "validate_place",
    "validate_day_number",
]
