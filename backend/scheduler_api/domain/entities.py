"""
Domain entities - Pure business representation, no framework dependencies.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Doctor:
    """Domain entity representing a doctor's schedulable profile.

    This is the pure business representation, independent of:
    - Database implementation (SQLAlchemy)
    - HTTP frameworks (Flask)

    ``id``, ``created_at`` and ``updated_at`` are assigned by the
    persistence layer and are never set by callers.
    """

    id: Optional[str] = None
    name: str = ""
    registration: str = ""
    expertise: str = ""
    appointment_type: List[str] = field(default_factory=list)
    appointment_price: float = 0.0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
