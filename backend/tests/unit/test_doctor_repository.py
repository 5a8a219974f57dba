"""
Unit tests for DoctorRepository against an in-memory SQLite database.
"""

import uuid
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from scheduler_api.db.base import Doctor as DoctorModel
from scheduler_api.domain.results import Failure, NotFound, Ok, UniqueViolation
from scheduler_api.repositories.doctor_repo import (
    DoctorRepository,
    classify_integrity_error,
)
from tests.fixtures.doctor_fixtures import MISSING_UUID


def _create(repo, payload):
    outcome = repo.create(payload)
    assert isinstance(outcome, Ok)
    return outcome.doctor


@pytest.mark.unit
@pytest.mark.repositories
class TestDoctorRepositoryCreate:
    def test_create_assigns_id_and_timestamps(self, doctor_repository, new_doctor_payload):
        doctor = _create(doctor_repository, new_doctor_payload)

        assert str(uuid.UUID(doctor.id)) == doctor.id
        assert doctor.name == "Dr. New"
        assert doctor.registration == "CRM54321"
        assert doctor.expertise == "Development"
        assert doctor.appointment_type == ["HEALTH_PLAN"]
        assert doctor.appointment_price == 100.0
        assert doctor.created_at is not None
        assert doctor.updated_at is not None
        assert doctor.created_at.tzinfo is not None

    def test_create_persists_row(self, doctor_repository, session_factory, new_doctor_payload):
        doctor = _create(doctor_repository, new_doctor_payload)

        with session_factory() as session:
            persisted = session.get(DoctorModel, doctor.id)
            assert persisted is not None
            assert persisted.registration == "CRM54321"
            assert persisted.appointment_type == ["HEALTH_PLAN"]

    def test_duplicate_registration_is_unique_violation(
        self, doctor_repository, new_doctor_payload
    ):
        _create(doctor_repository, new_doctor_payload)

        outcome = doctor_repository.create({**new_doctor_payload, "name": "Dr. Other"})

        assert outcome == UniqueViolation(fields=("registration",))
        assert len(doctor_repository.list_all()) == 1

    def test_database_error_becomes_failure(self, new_doctor_payload):
        failing_factory = Mock(
            side_effect=OperationalError("INSERT", {}, Exception("database is down"))
        )
        repo = DoctorRepository(failing_factory)

        outcome = repo.create(new_doctor_payload)

        assert isinstance(outcome, Failure)
        assert "database is down" in outcome.detail


@pytest.mark.unit
@pytest.mark.repositories
class TestDoctorRepositoryRead:
    def test_list_all_empty(self, doctor_repository):
        assert doctor_repository.list_all() == []

    def test_list_all_returns_every_doctor(self, doctor_repository, new_doctor_payload):
        _create(doctor_repository, new_doctor_payload)
        _create(doctor_repository, {**new_doctor_payload, "registration": "CRM99999"})

        registrations = {d.registration for d in doctor_repository.list_all()}

        assert registrations == {"CRM54321", "CRM99999"}

    def test_get_by_id_returns_none_when_missing(self, doctor_repository):
        assert doctor_repository.get_by_id(MISSING_UUID) is None

    def test_get_by_id_round_trip(self, doctor_repository, new_doctor_payload):
        created = _create(doctor_repository, new_doctor_payload)

        fetched = doctor_repository.get_by_id(created.id)

        assert fetched == created


@pytest.mark.unit
@pytest.mark.repositories
class TestDoctorRepositoryUpdate:
    def test_update_replaces_only_supplied_fields(
        self, doctor_repository, new_doctor_payload
    ):
        created = _create(doctor_repository, new_doctor_payload)

        outcome = doctor_repository.update(
            created.id, {"expertise": "Neurology", "appointmentPrice": 220.5}
        )

        assert isinstance(outcome, Ok)
        updated = outcome.doctor
        assert updated.expertise == "Neurology"
        assert updated.appointment_price == 220.5
        assert updated.name == created.name
        assert updated.registration == created.registration
        assert updated.appointment_type == created.appointment_type
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    def test_update_missing_doctor_is_not_found(self, doctor_repository):
        assert doctor_repository.update(MISSING_UUID, {"name": "Dr. X"}) == NotFound()

    def test_update_to_taken_registration_is_unique_violation(
        self, doctor_repository, new_doctor_payload
    ):
        _create(doctor_repository, new_doctor_payload)
        other = _create(
            doctor_repository, {**new_doctor_payload, "registration": "CRM11111"}
        )

        outcome = doctor_repository.update(other.id, {"registration": "CRM54321"})

        assert isinstance(outcome, UniqueViolation)
        assert outcome.involves("registration")
        assert doctor_repository.get_by_id(other.id).registration == "CRM11111"


@pytest.mark.unit
@pytest.mark.repositories
class TestDoctorRepositoryDelete:
    def test_delete_returns_removed_doctor(self, doctor_repository, new_doctor_payload):
        created = _create(doctor_repository, new_doctor_payload)

        outcome = doctor_repository.delete(created.id)

        assert outcome == Ok(created)
        assert doctor_repository.get_by_id(created.id) is None

    def test_delete_missing_doctor_is_not_found(self, doctor_repository):
        assert doctor_repository.delete(MISSING_UUID) == NotFound()


class _FakeDriverError(Exception):
    def __init__(self, message, pgcode=None):
        super().__init__(message)
        self.pgcode = pgcode


@pytest.mark.unit
@pytest.mark.repositories
class TestClassifyIntegrityError:
    def test_sqlite_unique_message(self):
        error = IntegrityError(
            "INSERT", {}, _FakeDriverError("UNIQUE constraint failed: doctors.registration")
        )

        assert classify_integrity_error(error) == UniqueViolation(fields=("registration",))

    def test_postgres_unique_sqlstate(self):
        error = IntegrityError(
            "INSERT",
            {},
            _FakeDriverError(
                'duplicate key value violates unique constraint "doctors_registration_key"\n'
                "DETAIL:  Key (registration)=(CRM1) already exists.",
                pgcode="23505",
            ),
        )

        assert classify_integrity_error(error) == UniqueViolation(fields=("registration",))

    def test_unique_violation_on_unknown_column_has_no_fields(self):
        error = IntegrityError(
            "INSERT", {}, _FakeDriverError("UNIQUE constraint failed: doctors.id")
        )

        outcome = classify_integrity_error(error)

        assert outcome == UniqueViolation(fields=())
        assert not outcome.involves("registration")

    def test_other_integrity_errors_are_failures(self):
        error = IntegrityError(
            "INSERT", {}, _FakeDriverError("NOT NULL constraint failed: doctors.name")
        )

        outcome = classify_integrity_error(error)

        assert isinstance(outcome, Failure)
        assert "NOT NULL" in outcome.detail
