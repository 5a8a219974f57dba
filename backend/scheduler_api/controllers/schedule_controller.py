"""
Schedule controller - thin delegate to the scheduling collaborator.
"""

import logging

from flask import Blueprint, jsonify

from scheduler_api.core.api_utils import error_response, get_schedule_service

logger = logging.getLogger(__name__)

schedule_bp = Blueprint("schedule", __name__)


@schedule_bp.route("/schedule", methods=["GET"])
def get_schedule():
    try:
        payload = get_schedule_service().get_schedule()
    except Exception as e:
        logger.error(
            "Error getting schedule",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        return error_response("Error getting schedule", 500)

    return jsonify(payload), 200
