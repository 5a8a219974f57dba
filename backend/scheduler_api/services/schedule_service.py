from typing import Any, Dict

from ..domain.interfaces import IScheduleService


class StubScheduleService(IScheduleService):
    """Placeholder collaborator until real scheduling lands."""

    def get_schedule(self) -> Dict[str, Any]:
        return {"message": "Schedule service not implemented yet", "schedule": []}
