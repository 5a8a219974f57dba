"""Service layer package."""

from .schedule_service import StubScheduleService

__all__ = ["StubScheduleService"]
