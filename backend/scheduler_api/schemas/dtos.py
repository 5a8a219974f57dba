"""
Data Transfer Objects (DTOs) for API responses.

The wire format is camelCase; domain entities stay snake_case.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class DoctorResponse:
    """DTO for doctor API responses."""

    id: str
    name: str
    registration: str
    expertise: str
    appointment_type: List[str]
    appointment_price: float
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_domain(cls, doctor) -> "DoctorResponse":
        """Create response from domain entity."""
        return cls(
            id=doctor.id,
            name=doctor.name,
            registration=doctor.registration,
            expertise=doctor.expertise,
            appointment_type=list(doctor.appointment_type),
            appointment_price=doctor.appointment_price,
            created_at=doctor.created_at,
            updated_at=doctor.updated_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "registration": self.registration,
            "expertise": self.expertise,
            "appointmentType": self.appointment_type,
            "appointmentPrice": self.appointment_price,
            "createdAt": _isoformat(self.created_at),
            "updatedAt": _isoformat(self.updated_at),
        }


@dataclass
class ErrorResponse:
    """DTO for error responses."""

    message: str
    errors: Optional[Dict[str, List[str]]] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        return body
