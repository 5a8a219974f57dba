"""
Tagged outcomes returned by the doctor repository.

Write operations return exactly one of these variants so controllers
branch on the outcome type instead of inspecting driver exceptions.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .entities import Doctor


@dataclass(frozen=True)
class Ok:
    """The operation succeeded and produced ``doctor``."""

    doctor: Doctor


@dataclass(frozen=True)
class NotFound:
    """No doctor exists with the requested id."""


@dataclass(frozen=True)
class UniqueViolation:
    """A unique constraint rejected the write; ``fields`` names the columns."""

    fields: Tuple[str, ...]

    def involves(self, field_name: str) -> bool:
        return field_name in self.fields


@dataclass(frozen=True)
class Failure:
    """Any other persistence error. ``detail`` is for logs only."""

    detail: str


GatewayResult = Union[Ok, NotFound, UniqueViolation, Failure]
