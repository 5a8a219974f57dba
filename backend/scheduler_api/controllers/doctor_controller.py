"""
Doctor controller for handling HTTP requests following SOLID principles.

This controller:
- Handles HTTP concerns only (Single Responsibility)
- Depends on the repository abstraction registered on the app (Dependency Inversion)
- Rejects invalid input before any persistence call
"""

import logging

from flask import Blueprint, jsonify, request

from scheduler_api.core.api_utils import error_response, get_doctor_repository
from scheduler_api.core.validation import (
    validate_doctor_create,
    validate_doctor_id,
    validate_doctor_update,
)
from scheduler_api.domain.results import NotFound, Ok, UniqueViolation
from scheduler_api.schemas.dtos import DoctorResponse

logger = logging.getLogger(__name__)

doctor_bp = Blueprint("doctors", __name__, url_prefix="/doctors")

MSG_VALIDATION_FAILED = "Validation failed"
MSG_INVALID_ID = "Invalid ID format"
MSG_NO_FIELDS = "No fields to update provided"
MSG_NOT_FOUND = "Doctor not found"
MSG_DUPLICATE_REGISTRATION = "Doctor with this registration already exists"
MSG_DELETED = "Doctor deleted successfully"


def _serialize(doctor) -> dict:
    return DoctorResponse.from_domain(doctor).to_dict()


def _write_failure(outcome, action: str, doctor_id=None):
    """Map a non-Ok write outcome to an HTTP response."""
    if isinstance(outcome, NotFound):
        return error_response(MSG_NOT_FOUND, 404)

    if isinstance(outcome, UniqueViolation) and outcome.involves("registration"):
        return error_response(MSG_DUPLICATE_REGISTRATION, 409)

    logger.error(
        f"Error {action} doctor",
        extra={
            "context": {
                "doctor_id": doctor_id,
                "outcome": type(outcome).__name__,
                "detail": getattr(outcome, "detail", None),
                "fields": list(getattr(outcome, "fields", ())),
            }
        },
    )
    return error_response(f"Error {action} doctor", 500)


@doctor_bp.route("/", methods=["POST"], strict_slashes=False)
def create_doctor():
    """Create a doctor from a full JSON payload."""
    validation = validate_doctor_create(request.get_json(silent=True))
    if not validation.is_valid:
        return error_response(MSG_VALIDATION_FAILED, 400, validation.errors)

    try:
        outcome = get_doctor_repository().create(validation.cleaned_data)
    except Exception as e:
        logger.error(
            "Error creating doctor",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        return error_response("Error creating doctor", 500)

    if isinstance(outcome, Ok):
        return jsonify(_serialize(outcome.doctor)), 201
    return _write_failure(outcome, "creating")


@doctor_bp.route("/", methods=["GET"], strict_slashes=False)
def list_doctors():
    """List every doctor."""
    try:
        doctors = get_doctor_repository().list_all()
    except Exception as e:
        logger.error(
            "Error getting doctors",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        return error_response("Error getting doctors", 500)

    return jsonify([_serialize(doctor) for doctor in doctors]), 200


@doctor_bp.route("/<doctor_id>", methods=["GET"])
def get_doctor(doctor_id):
    """Fetch one doctor by UUID."""
    id_validation = validate_doctor_id(doctor_id)
    if not id_validation.is_valid:
        return error_response(MSG_INVALID_ID, 400, id_validation.errors)

    try:
        doctor = get_doctor_repository().get_by_id(id_validation.cleaned_data["id"])
    except Exception as e:
        logger.error(
            "Error getting doctor by ID",
            extra={"context": {"doctor_id": doctor_id, "error": str(e)}},
            exc_info=True,
        )
        return error_response("Error getting doctor by ID", 500)

    if doctor is None:
        return error_response(MSG_NOT_FOUND, 404)
    return jsonify(_serialize(doctor)), 200


@doctor_bp.route("/<doctor_id>", methods=["PUT"])
def update_doctor(doctor_id):
    """Replace the supplied fields of a doctor; absent fields keep their values."""
    id_validation = validate_doctor_id(doctor_id)
    if not id_validation.is_valid:
        return error_response(MSG_INVALID_ID, 400, id_validation.errors)

    validation = validate_doctor_update(request.get_json(silent=True))
    if not validation.is_valid:
        return error_response(MSG_VALIDATION_FAILED, 400, validation.errors)
    if validation.is_empty:
        return error_response(MSG_NO_FIELDS, 400)

    normalized_id = id_validation.cleaned_data["id"]
    try:
        outcome = get_doctor_repository().update(normalized_id, validation.cleaned_data)
    except Exception as e:
        logger.error(
            "Error updating doctor",
            extra={"context": {"doctor_id": normalized_id, "error": str(e)}},
            exc_info=True,
        )
        return error_response("Error updating doctor", 500)

    if isinstance(outcome, Ok):
        return jsonify(_serialize(outcome.doctor)), 200
    return _write_failure(outcome, "updating", normalized_id)


@doctor_bp.route("/<doctor_id>", methods=["DELETE"])
def delete_doctor(doctor_id):
    """Delete a doctor and echo the removed record."""
    id_validation = validate_doctor_id(doctor_id)
    if not id_validation.is_valid:
        return error_response(MSG_INVALID_ID, 400, id_validation.errors)

    normalized_id = id_validation.cleaned_data["id"]
    try:
        outcome = get_doctor_repository().delete(normalized_id)
    except Exception as e:
        logger.error(
            "Error deleting doctor",
            extra={"context": {"doctor_id": normalized_id, "error": str(e)}},
            exc_info=True,
        )
        return error_response("Error deleting doctor", 500)

    if isinstance(outcome, Ok):
        return jsonify({"message": MSG_DELETED, "doctor": _serialize(outcome.doctor)}), 200
    return _write_failure(outcome, "deleting", normalized_id)
