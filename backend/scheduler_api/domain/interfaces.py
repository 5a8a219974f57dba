"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .entities import Doctor
from .results import GatewayResult


class IDoctorReader(ABC):
    """Interface for doctor read operations."""

    @abstractmethod
    def list_all(self) -> List[Doctor]:
        """Get all doctors."""
        pass

    @abstractmethod
    def get_by_id(self, doctor_id: str) -> Optional[Doctor]:
        """Get doctor by ID, or None when absent."""
        pass


class IDoctorWriter(ABC):
    """Interface for doctor write operations.

    Payloads use the validated wire keys (``appointmentType``,
    ``appointmentPrice``...). Implementations report the outcome as a
    tagged result instead of raising.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> GatewayResult:
        """Create a new doctor."""
        pass

    @abstractmethod
    def update(self, doctor_id: str, data: Dict[str, Any]) -> GatewayResult:
        """Replace the supplied fields of an existing doctor."""
        pass

    @abstractmethod
    def delete(self, doctor_id: str) -> GatewayResult:
        """Delete a doctor, returning the removed record."""
        pass


class IDoctorRepository(IDoctorReader, IDoctorWriter):
    """Complete doctor repository interface combining read/write operations."""

    pass


class IScheduleService(ABC):
    """Interface for the scheduling collaborator behind /api/schedule."""

    @abstractmethod
    def get_schedule(self) -> Dict[str, Any]:
        """Return the schedule payload."""
        pass
