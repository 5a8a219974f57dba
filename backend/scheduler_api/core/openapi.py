"""
OpenAPI 3.0 document for the Scheduler API.

The document is assembled in code so the server URL follows APP_PORT.
"""

from typing import Any, Dict

from scheduler_api.core.config import get_app_port

API_TITLE = "AI Scheduler API"
API_VERSION = "1.0.0"

_DOCTOR_ID_PARAM = {
    "name": "id",
    "in": "path",
    "required": True,
    "description": "The doctor's UUID.",
    "schema": {"type": "string", "format": "uuid"},
}


def _json_content(schema_ref: str) -> Dict[str, Any]:
    return {"application/json": {"schema": {"$ref": schema_ref}}}


def _error(description: str) -> Dict[str, Any]:
    return {
        "description": description,
        "content": _json_content("#/components/schemas/ErrorResponse"),
    }


def _doctor_properties() -> Dict[str, Any]:
    return {
        "name": {"type": "string", "description": "Doctor's full name.", "example": "Dr. Jane Doe"},
        "registration": {
            "type": "string",
            "description": "Medical registration number (e.g., CRM). Must be unique.",
            "example": "CRM54321",
        },
        "expertise": {
            "type": "string",
            "description": "Medical specialty or expertise.",
            "example": "Pediatrics",
        },
        "appointmentType": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 1,
            "description": "Types of appointments offered (e.g., PRIVATE, HEALTH_PLAN).",
            "example": ["PRIVATE"],
        },
        "appointmentPrice": {
            "type": "number",
            "format": "float",
            "exclusiveMinimum": 0,
            "description": "Price for a private consultation.",
            "example": 180.0,
        },
    }


def _components() -> Dict[str, Any]:
    required = ["name", "registration", "expertise", "appointmentType", "appointmentPrice"]
    doctor_properties = {
        "id": {
            "type": "string",
            "format": "uuid",
            "readOnly": True,
            "description": "The auto-generated ID of the doctor.",
        },
        **_doctor_properties(),
        "createdAt": {
            "type": "string",
            "format": "date-time",
            "readOnly": True,
            "description": "Timestamp of when the doctor was created.",
        },
        "updatedAt": {
            "type": "string",
            "format": "date-time",
            "readOnly": True,
            "description": "Timestamp of when the doctor was last updated.",
        },
    }
    return {
        "schemas": {
            "Doctor": {
                "type": "object",
                "required": required,
                "properties": doctor_properties,
                "example": {
                    "id": "d290f1ee-6c54-4b01-90e6-d701748f0851",
                    "name": "Dr. John Doe",
                    "registration": "CRM12345",
                    "expertise": "Cardiology",
                    "appointmentType": ["PRIVATE", "HEALTH_PLAN"],
                    "appointmentPrice": 250.75,
                    "createdAt": "2023-10-07T10:00:00+00:00",
                    "updatedAt": "2023-10-07T12:30:00+00:00",
                },
            },
            "DoctorInput": {
                "type": "object",
                "required": required,
                "properties": _doctor_properties(),
            },
            "DoctorUpdate": {
                "type": "object",
                "minProperties": 1,
                "properties": _doctor_properties(),
            },
            "DoctorDeleted": {
                "type": "object",
                "properties": {
                    "message": {"type": "string", "example": "Doctor deleted successfully"},
                    "doctor": {"$ref": "#/components/schemas/Doctor"},
                },
            },
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "message": {"type": "string"},
                    "errors": {
                        "type": "object",
                        "additionalProperties": {
                            "type": "array",
                            "items": {"type": "string"},
                        },
                    },
                },
            },
        }
    }


def _paths() -> Dict[str, Any]:
    doctor_ref = "#/components/schemas/Doctor"
    return {
        "/doctors": {
            "post": {
                "tags": ["Doctors"],
                "summary": "Create a new doctor",
                "requestBody": {
                    "required": True,
                    "content": _json_content("#/components/schemas/DoctorInput"),
                },
                "responses": {
                    "201": {"description": "Doctor created", "content": _json_content(doctor_ref)},
                    "400": _error("Validation failed"),
                    "409": _error("Doctor with this registration already exists"),
                    "500": _error("Error creating doctor"),
                },
            },
            "get": {
                "tags": ["Doctors"],
                "summary": "List all doctors",
                "responses": {
                    "200": {
                        "description": "Array of doctors",
                        "content": {
                            "application/json": {
                                "schema": {"type": "array", "items": {"$ref": doctor_ref}}
                            }
                        },
                    },
                    "500": _error("Error getting doctors"),
                },
            },
        },
        "/doctors/{id}": {
            "parameters": [_DOCTOR_ID_PARAM],
            "get": {
                "tags": ["Doctors"],
                "summary": "Get a doctor by ID",
                "responses": {
                    "200": {"description": "The doctor", "content": _json_content(doctor_ref)},
                    "400": _error("Invalid ID format"),
                    "404": _error("Doctor not found"),
                    "500": _error("Error getting doctor by ID"),
                },
            },
            "put": {
                "tags": ["Doctors"],
                "summary": "Update some or all fields of a doctor",
                "requestBody": {
                    "required": True,
                    "content": _json_content("#/components/schemas/DoctorUpdate"),
                },
                "responses": {
                    "200": {"description": "Updated doctor", "content": _json_content(doctor_ref)},
                    "400": _error("Invalid ID, invalid body, or no fields to update"),
                    "404": _error("Doctor not found"),
                    "409": _error("Doctor with this registration already exists"),
                    "500": _error("Error updating doctor"),
                },
            },
            "delete": {
                "tags": ["Doctors"],
                "summary": "Delete a doctor",
                "responses": {
                    "200": {
                        "description": "Doctor deleted",
                        "content": _json_content("#/components/schemas/DoctorDeleted"),
                    },
                    "400": _error("Invalid ID format"),
                    "404": _error("Doctor not found"),
                    "500": _error("Error deleting doctor"),
                },
            },
        },
        "/schedule": {
            "get": {
                "tags": ["Schedule"],
                "summary": "Get the schedule (stub)",
                "responses": {
                    "200": {"description": "Schedule payload"},
                    "500": _error("Error getting schedule"),
                },
            }
        },
    }


def build_openapi_spec() -> Dict[str, Any]:
    """Return the OpenAPI document as a plain dict."""
    return {
        "openapi": "3.0.0",
        "info": {
            "title": API_TITLE,
            "version": API_VERSION,
            "description": (
                "API documentation for the AI Scheduler application, "
                "including Doctor management."
            ),
        },
        "servers": [
            {
                "url": f"http://localhost:{get_app_port()}/api",
                "description": "Development server",
            }
        ],
        "paths": _paths(),
        "components": _components(),
    }
