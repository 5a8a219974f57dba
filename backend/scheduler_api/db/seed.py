"""
Database seeding functions.

Seeding is idempotent: doctors whose registration already exists are skipped.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from scheduler_api.db.base import Doctor

logger = logging.getLogger(__name__)

SAMPLE_DOCTORS: List[Dict[str, Any]] = [
    {
        "name": "Dr. John Doe",
        "registration": "CRM12345",
        "expertise": "Cardiology",
        "appointment_type": ["PRIVATE", "HEALTH_PLAN"],
        "appointment_price": 250.75,
    },
    {
        "name": "Dr. Jane Doe",
        "registration": "CRM54321",
        "expertise": "Pediatrics",
        "appointment_type": ["PRIVATE"],
        "appointment_price": 180.0,
    },
    {
        "name": "Dr. Ana Souza",
        "registration": "CRM67890",
        "expertise": "Dermatology",
        "appointment_type": ["HEALTH_PLAN"],
        "appointment_price": 150.0,
    },
]


def seed_doctors(session_factory: sessionmaker) -> int:
    """Insert SAMPLE_DOCTORS that are missing. Returns how many were added."""
    with session_factory() as db:
        existing = set(db.scalars(select(Doctor.registration)).all())
        added = 0
        for sample in SAMPLE_DOCTORS:
            if sample["registration"] in existing:
                logger.debug(
                    "Sample doctor already present",
                    extra={"context": {"registration": sample["registration"]}},
                )
                continue
            db.add(Doctor(**sample))
            added += 1
        db.commit()

    logger.info(
        "Sample doctors seeded",
        extra={"context": {"added": added, "total_samples": len(SAMPLE_DOCTORS)}},
    )
    return added
