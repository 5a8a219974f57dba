"""Doctor repository implementation backed by SQLAlchemy.

The repository is built once per process around a sessionmaker and opens
a short-lived session for every call, so a single instance can be shared
across concurrent requests. Write operations report their outcome as a
tagged result (see ``scheduler_api.domain.results``).
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from scheduler_api.db.base import Doctor as DbDoctor
from scheduler_api.domain.entities import Doctor as DomainDoctor
from scheduler_api.domain.interfaces import IDoctorRepository
from scheduler_api.domain.results import (
    Failure,
    GatewayResult,
    NotFound,
    Ok,
    UniqueViolation,
)

logger = logging.getLogger(__name__)

# Wire key -> model attribute
FIELD_MAP = {
    "name": "name",
    "registration": "registration",
    "expertise": "expertise",
    "appointmentType": "appointment_type",
    "appointmentPrice": "appointment_price",
}

UNIQUE_VIOLATION_SQLSTATE = "23505"


def _unique_columns() -> Tuple[str, ...]:
    return tuple(c.name for c in DbDoctor.__table__.columns if c.unique)


def classify_integrity_error(error: IntegrityError) -> GatewayResult:
    """Turn an IntegrityError into UniqueViolation or Failure.

    Recognises SQLite ("UNIQUE constraint failed: doctors.registration")
    and PostgreSQL (SQLSTATE 23505, "Key (registration)=...") messages.
    """
    orig = getattr(error, "orig", None)
    message = str(orig if orig is not None else error)
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)

    is_unique = (
        sqlstate == UNIQUE_VIOLATION_SQLSTATE
        or "UNIQUE constraint failed" in message
        or "duplicate key value violates unique constraint" in message
    )
    if not is_unique:
        return Failure(detail=message)

    fields = tuple(column for column in _unique_columns() if column in message)
    return UniqueViolation(fields=fields)


class DoctorRepository(IDoctorRepository):
    """Repository for Doctor persistence operations.

    This implementation:
    - Implements IDoctorRepository interface (Dependency Inversion)
    - Handles data access only (Single Responsibility)
    - Maps between domain entities and database models
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def list_all(self) -> List[DomainDoctor]:
        with self._session_factory() as session:
            rows = session.scalars(
                select(DbDoctor).order_by(DbDoctor.created_at, DbDoctor.id)
            ).all()
            return [self._to_domain(row) for row in rows]

    def get_by_id(self, doctor_id: str) -> Optional[DomainDoctor]:
        with self._session_factory() as session:
            db_doctor = session.get(DbDoctor, doctor_id)
            return self._to_domain(db_doctor) if db_doctor else None

    def create(self, data: Dict[str, Any]) -> GatewayResult:
        try:
            with self._session_factory() as session:
                db_doctor = DbDoctor(**self._to_columns(data))
                session.add(db_doctor)
                session.commit()
                session.refresh(db_doctor)
                created = self._to_domain(db_doctor)
        except IntegrityError as e:
            return self._integrity_outcome("create", e)
        except SQLAlchemyError as e:
            return self._failure("create", e)

        logger.info(
            "Doctor created",
            extra={"context": {"doctor_id": created.id}},
        )
        return Ok(created)

    def update(self, doctor_id: str, data: Dict[str, Any]) -> GatewayResult:
        try:
            with self._session_factory() as session:
                db_doctor = session.get(DbDoctor, doctor_id)
                if db_doctor is None:
                    return NotFound()

                for attribute, value in self._to_columns(data).items():
                    setattr(db_doctor, attribute, value)
                db_doctor.updated_at = datetime.now(timezone.utc)
                session.commit()
                session.refresh(db_doctor)
                updated = self._to_domain(db_doctor)
        except IntegrityError as e:
            return self._integrity_outcome("update", e, doctor_id)
        except SQLAlchemyError as e:
            return self._failure("update", e, doctor_id)

        logger.info(
            "Doctor updated",
            extra={"context": {"doctor_id": doctor_id, "fields": sorted(data)}},
        )
        return Ok(updated)

    def delete(self, doctor_id: str) -> GatewayResult:
        try:
            with self._session_factory() as session:
                db_doctor = session.get(DbDoctor, doctor_id)
                if db_doctor is None:
                    return NotFound()

                deleted = self._to_domain(db_doctor)
                session.delete(db_doctor)
                session.commit()
        except SQLAlchemyError as e:
            return self._failure("delete", e, doctor_id)

        logger.info("Doctor deleted", extra={"context": {"doctor_id": doctor_id}})
        return Ok(deleted)

    def _integrity_outcome(
        self, operation: str, error: IntegrityError, doctor_id: Optional[str] = None
    ) -> GatewayResult:
        outcome = classify_integrity_error(error)
        if isinstance(outcome, UniqueViolation):
            logger.warning(
                "Unique constraint violated",
                extra={
                    "context": {
                        "operation": operation,
                        "doctor_id": doctor_id,
                        "fields": list(outcome.fields),
                    }
                },
            )
            return outcome
        return self._failure(operation, error, doctor_id)

    def _failure(
        self, operation: str, error: Exception, doctor_id: Optional[str] = None
    ) -> Failure:
        logger.error(
            f"Doctor {operation} failed",
            extra={
                "context": {
                    "operation": operation,
                    "doctor_id": doctor_id,
                    "error": str(error),
                }
            },
            exc_info=True,
        )
        return Failure(detail=str(error))

    @staticmethod
    def _to_columns(data: Dict[str, Any]) -> Dict[str, Any]:
        return {FIELD_MAP[key]: value for key, value in data.items() if key in FIELD_MAP}

    @staticmethod
    def _to_domain(db_doctor: DbDoctor) -> DomainDoctor:
        """Convert DB model to domain entity."""
        return DomainDoctor(
            id=db_doctor.id,
            name=db_doctor.name,
            registration=db_doctor.registration,
            expertise=db_doctor.expertise,
            appointment_type=list(db_doctor.appointment_type or []),
            appointment_price=db_doctor.appointment_price,
            created_at=_as_utc(db_doctor.created_at),
            updated_at=_as_utc(db_doctor.updated_at),
        )


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo on the way back
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
