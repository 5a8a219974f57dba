"""
Unit tests for the doctor payload validators.
"""

import pytest

from scheduler_api.core.validation import (
    ROOT_FIELD,
    validate_doctor_create,
    validate_doctor_id,
    validate_doctor_update,
)


@pytest.mark.unit
@pytest.mark.validation
class TestCreateValidation:
    def test_valid_payload_is_cleaned(self, new_doctor_payload):
        result = validate_doctor_create(new_doctor_payload)

        assert result.is_valid
        assert result.errors == {}
        assert result.cleaned_data == new_doctor_payload

    def test_text_fields_are_kept_verbatim(self, new_doctor_payload):
        payload = {**new_doctor_payload, "name": "  Dr. New  ", "expertise": " "}

        result = validate_doctor_create(payload)

        assert result.is_valid
        assert result.cleaned_data["name"] == "  Dr. New  "
        assert result.cleaned_data["expertise"] == " "

    @pytest.mark.parametrize(
        "field,message",
        [
            ("name", "Name is required"),
            ("registration", "Registration is required"),
            ("expertise", "Expertise is required"),
            ("appointmentType", "Appointment type is required"),
            ("appointmentPrice", "Appointment price is required"),
        ],
    )
    def test_missing_field_reports_that_field(self, new_doctor_payload, field, message):
        payload = dict(new_doctor_payload)
        del payload[field]

        result = validate_doctor_create(payload)

        assert not result.is_valid
        assert result.errors == {field: [message]}

    def test_empty_registration_is_rejected(self, new_doctor_payload):
        result = validate_doctor_create({**new_doctor_payload, "registration": ""})

        assert result.errors == {"registration": ["Registration is required"]}

    def test_null_field_counts_as_missing(self, new_doctor_payload):
        result = validate_doctor_create({**new_doctor_payload, "expertise": None})

        assert result.errors == {"expertise": ["Expertise is required"]}

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("name", 42, "Name must be a string"),
            ("appointmentType", "PRIVATE", "Appointment type must be a list of strings"),
            ("appointmentType", ["PRIVATE", 3], "Appointment type must be a list of strings"),
            ("appointmentType", [], "At least one appointment type is required"),
            ("appointmentPrice", "not-a-number", "Appointment price must be a number"),
            ("appointmentPrice", True, "Appointment price must be a number"),
            ("appointmentPrice", 0, "Appointment price must be a positive number"),
            ("appointmentPrice", -10.5, "Appointment price must be a positive number"),
            ("appointmentPrice", float("inf"), "Appointment price must be a positive number"),
            ("appointmentPrice", 10**400, "Appointment price must be a positive number"),
            ("appointmentPrice", -(10**400), "Appointment price must be a positive number"),
        ],
    )
    def test_wrong_values_report_field_error(
        self, new_doctor_payload, field, value, message
    ):
        result = validate_doctor_create({**new_doctor_payload, field: value})

        assert not result.is_valid
        assert result.errors == {field: [message]}

    def test_integer_price_is_normalized_to_float(self, new_doctor_payload):
        result = validate_doctor_create({**new_doctor_payload, "appointmentPrice": 120})

        assert result.cleaned_data["appointmentPrice"] == 120.0
        assert isinstance(result.cleaned_data["appointmentPrice"], float)

    def test_every_offending_field_is_reported(self):
        result = validate_doctor_create({"name": "", "appointmentPrice": -1})

        assert set(result.errors) == {
            "name",
            "registration",
            "expertise",
            "appointmentType",
            "appointmentPrice",
        }

    @pytest.mark.parametrize("payload", [None, [], "doctor", 12])
    def test_non_object_payload_is_rejected(self, payload):
        result = validate_doctor_create(payload)

        assert not result.is_valid
        assert result.errors == {ROOT_FIELD: ["Request body must be a JSON object"]}


@pytest.mark.unit
@pytest.mark.validation
class TestUpdateValidation:
    def test_partial_payload_is_valid(self):
        result = validate_doctor_update({"expertise": "Neurology"})

        assert result.is_valid
        assert not result.is_empty
        assert result.cleaned_data == {"expertise": "Neurology"}

    def test_empty_payload_is_valid_but_empty(self):
        result = validate_doctor_update({})

        assert result.is_valid
        assert result.is_empty

    def test_unknown_keys_are_stripped(self):
        result = validate_doctor_update({"id": "x", "createdAt": "now", "foo": 1})

        assert result.is_valid
        assert result.is_empty
        assert result.cleaned_data == {}

    def test_present_fields_follow_create_rules(self):
        result = validate_doctor_update({"appointmentPrice": 0, "appointmentType": []})

        assert result.errors == {
            "appointmentType": ["At least one appointment type is required"],
            "appointmentPrice": ["Appointment price must be a positive number"],
        }

    def test_null_value_is_rejected(self):
        result = validate_doctor_update({"name": None})

        assert result.errors == {"name": ["Name cannot be null"]}

    def test_invalid_result_is_not_reported_empty(self):
        result = validate_doctor_update({"name": ""})

        assert not result.is_valid
        assert not result.is_empty


@pytest.mark.unit
@pytest.mark.validation
class TestIdValidation:
    def test_valid_uuid(self):
        result = validate_doctor_id("a1b2c3d4-e5f6-7890-1234-567890abcdef")

        assert result.is_valid
        assert result.cleaned_data == {"id": "a1b2c3d4-e5f6-7890-1234-567890abcdef"}

    def test_uppercase_uuid_is_normalized(self):
        result = validate_doctor_id("A1B2C3D4-E5F6-7890-1234-567890ABCDEF")

        assert result.cleaned_data["id"] == "a1b2c3d4-e5f6-7890-1234-567890abcdef"

    @pytest.mark.parametrize(
        "value",
        [
            "invalid-uuid-format",
            "",
            "a1b2c3d4e5f678901234567890abcdef",
            "{a1b2c3d4-e5f6-7890-1234-567890abcdef}",
            "a1b2c3d4-e5f6-7890-1234-567890abcdeg",
            None,
            123,
        ],
    )
    def test_invalid_values_report_id_error(self, value):
        result = validate_doctor_id(value)

        assert not result.is_valid
        assert result.errors == {"id": ["Invalid UUID format for doctor ID"]}
