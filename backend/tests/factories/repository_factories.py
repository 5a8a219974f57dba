"""
Repository test factories following Interface Segregation Principle.

This module provides mock factories for repository and service interfaces,
ensuring tests only depend on the contracts controllers use.
"""

from unittest.mock import Mock

from scheduler_api.domain.interfaces import IDoctorRepository, IScheduleService


class DoctorRepositoryFactory:
    """Factory for creating doctor repository mocks."""

    @staticmethod
    def create_mock() -> Mock:
        mock_repo = Mock(spec=IDoctorRepository)

        # Set up default return values
        mock_repo.list_all.return_value = []
        mock_repo.get_by_id.return_value = None

        return mock_repo


class ScheduleServiceFactory:
    """Factory for creating schedule service mocks."""

    @staticmethod
    def create_mock() -> Mock:
        mock_service = Mock(spec=IScheduleService)
        mock_service.get_schedule.return_value = {
            "message": "Schedule service not implemented yet",
            "schedule": [],
        }
        return mock_service
