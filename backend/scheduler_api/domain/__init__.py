"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities
- results.py: Tagged repository outcomes
- interfaces.py: Repository and service contracts
"""

from .entities import Doctor
from .interfaces import (
    IDoctorReader,
    IDoctorRepository,
    IDoctorWriter,
    IScheduleService,
)
from .results import Failure, GatewayResult, NotFound, Ok, UniqueViolation

__all__ = [
    # Domain entities
    "Doctor",
    # Repository outcomes
    "GatewayResult",
    "Ok",
    "NotFound",
    "UniqueViolation",
    "Failure",
    # Interfaces
    "IDoctorRepository",
    "IDoctorReader",
    "IDoctorWriter",
    "IScheduleService",
]
