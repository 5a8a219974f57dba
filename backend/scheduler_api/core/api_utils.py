"""
Common API utilities for consistent response formatting across all controllers.
"""

import logging
from typing import Dict, List, Optional

from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException

from scheduler_api.core.exceptions import DependencyNotConfiguredError
from scheduler_api.domain.interfaces import IDoctorRepository, IScheduleService
from scheduler_api.schemas.dtos import ErrorResponse

logger = logging.getLogger(__name__)

DOCTOR_REPOSITORY_KEY = "doctor_repository"
SCHEDULE_SERVICE_KEY = "schedule_service"


def error_response(
    message: str,
    status_code: int,
    errors: Optional[Dict[str, List[str]]] = None,
) -> tuple:
    """
    Standardized error response format for all endpoints.

    Returns:
        Tuple of (json_response, status_code)
    """
    return jsonify(ErrorResponse(message=message, errors=errors).to_dict()), status_code


def _get_extension(key: str):
    dependency = current_app.extensions.get(key)
    if dependency is None:
        raise DependencyNotConfiguredError(key)
    return dependency


def get_doctor_repository() -> IDoctorRepository:
    """Return the repository registered by create_app()."""
    return _get_extension(DOCTOR_REPOSITORY_KEY)


def get_schedule_service() -> IScheduleService:
    """Return the schedule collaborator registered by create_app()."""
    return _get_extension(SCHEDULE_SERVICE_KEY)


def register_error_handlers(app: Flask) -> None:
    """Answer framework errors with JSON bodies instead of HTML pages."""

    @app.errorhandler(404)
    def not_found(_error):
        return error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return error_response("Method not allowed", 405)

    @app.errorhandler(Exception)
    def unhandled_exception(error):
        if isinstance(error, HTTPException):
            return error_response(error.description or error.name, error.code or 500)

        logger.error(
            "Unhandled exception",
            extra={"context": {"error": str(error), "type": type(error).__name__}},
            exc_info=error,
        )
        return error_response("Internal server error", 500)
