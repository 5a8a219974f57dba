# Controllers package initialization
# This file makes the controllers directory a Python package
# and allows importing controller modules

from . import (
    api_controller,
    docs_controller,
    doctor_controller,
    health_controller,
    schedule_controller,
)

__all__ = [
    "api_controller",
    "docs_controller",
    "doctor_controller",
    "health_controller",
    "schedule_controller",
]
