"""
Validation utilities for doctor API payloads.

Validators never raise on bad input. They return a ValidationResult
carrying field-level errors and the cleaned (normalized) data, so
controllers can reject a request before touching the database.
"""

import logging
import math
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

ROOT_FIELD = "_root"

_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors: Dict[str, List[str]] = {}
        self.is_valid: bool = True
        self.cleaned_data: Dict[str, Any] = {}

    def add_error(self, message: str, field: Optional[str] = None):
        """Add validation error."""
        self.errors.setdefault(field or ROOT_FIELD, []).append(message)
        self.is_valid = False
        logger.debug(
            "Validation error",
            extra={"context": {"field": field or ROOT_FIELD, "error": message}},
        )

    @property
    def is_empty(self) -> bool:
        """True when validation succeeded but nothing usable was supplied."""
        return self.is_valid and not self.cleaned_data


class BaseValidator:
    """Base validator with common validation methods."""

    def validate(
        self, data: Any
    ) -> ValidationResult:  # pragma: no cover - interface definition
        raise NotImplementedError("Subclasses must implement validate")

    @staticmethod
    def validate_required_string(
        value: Any, field_name: str, label: str, result: ValidationResult
    ) -> Optional[str]:
        """Validate a non-empty string; the value is returned unchanged."""
        if not isinstance(value, str):
            result.add_error(f"{label} must be a string", field_name)
            return None

        if not value:
            result.add_error(f"{label} is required", field_name)
            return None
        return value

    @staticmethod
    def validate_string_list(
        value: Any,
        field_name: str,
        label: str,
        result: ValidationResult,
        min_items: int = 0,
        min_items_message: str = "",
    ) -> Optional[List[str]]:
        """Validate a list whose items are all strings."""
        if not isinstance(value, list) or not all(
            isinstance(item, str) for item in value
        ):
            result.add_error(f"{label} must be a list of strings", field_name)
            return None

        if len(value) < min_items:
            result.add_error(
                min_items_message or f"Must contain at least {min_items} items",
                field_name,
            )
            return None
        return list(value)

    @staticmethod
    def validate_positive_number(
        value: Any, field_name: str, label: str, result: ValidationResult
    ) -> Optional[float]:
        """Validate a finite number strictly greater than zero."""
        # bool is an int subclass; JSON true/false is not a price
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            result.add_error(f"{label} must be a number", field_name)
            return None

        try:
            price = float(value)
        except OverflowError:
            # Integers beyond the float range
            result.add_error(f"{label} must be a positive number", field_name)
            return None

        if not math.isfinite(price) or price <= 0:
            result.add_error(f"{label} must be a positive number", field_name)
            return None
        return price


class DoctorValidator(BaseValidator):
    """Validator for doctor create (full) and update (partial) payloads."""

    TEXT_FIELDS = (
        ("name", "Name"),
        ("registration", "Registration"),
        ("expertise", "Expertise"),
    )
    FIELD_NAMES = (
        "name",
        "registration",
        "expertise",
        "appointmentType",
        "appointmentPrice",
    )

    def __init__(self, partial: bool = False):
        self.partial = partial

    def validate(self, data: Any) -> ValidationResult:
        result = ValidationResult()

        if not isinstance(data, dict):
            result.add_error("Request body must be a JSON object")
            return result

        for field_name, label in self.TEXT_FIELDS:
            if not self._check_presence(data, field_name, label, result):
                continue
            value = self.validate_required_string(
                data[field_name], field_name, label, result
            )
            if value is not None:
                result.cleaned_data[field_name] = value

        if self._check_presence(data, "appointmentType", "Appointment type", result):
            types = self.validate_string_list(
                data["appointmentType"],
                "appointmentType",
                "Appointment type",
                result,
                min_items=1,
                min_items_message="At least one appointment type is required",
            )
            if types is not None:
                result.cleaned_data["appointmentType"] = types

        if self._check_presence(data, "appointmentPrice", "Appointment price", result):
            price = self.validate_positive_number(
                data["appointmentPrice"], "appointmentPrice", "Appointment price", result
            )
            if price is not None:
                result.cleaned_data["appointmentPrice"] = price

        return result

    def _check_presence(
        self, data: Dict[str, Any], field_name: str, label: str, result: ValidationResult
    ) -> bool:
        """Return True when the field should be validated further."""
        if field_name not in data:
            if not self.partial:
                result.add_error(f"{label} is required", field_name)
            return False

        if data[field_name] is None:
            if self.partial:
                result.add_error(f"{label} cannot be null", field_name)
            else:
                result.add_error(f"{label} is required", field_name)
            return False
        return True


def validate_doctor_create(payload: Any) -> ValidationResult:
    """Validate a doctor creation payload; every field is required."""
    return DoctorValidator(partial=False).validate(payload)


def validate_doctor_update(payload: Any) -> ValidationResult:
    """Validate a partial update payload; unknown keys are dropped."""
    return DoctorValidator(partial=True).validate(payload)


def validate_doctor_id(value: Any) -> ValidationResult:
    """Validate a doctor identifier, normalizing it to lowercase."""
    result = ValidationResult()
    if not isinstance(value, str) or not _UUID_RE.fullmatch(value):
        result.add_error("Invalid UUID format for doctor ID", "id")
        return result

    result.cleaned_data["id"] = value.lower()
    return result
