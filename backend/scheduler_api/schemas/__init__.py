"""
Schemas package - Data Transfer Objects.

This package contains DTOs that define the API response contracts.
"""

from .dtos import DoctorResponse, ErrorResponse

__all__ = [
    "DoctorResponse",
    "ErrorResponse",
]
