"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")

SESSION_FACTORY_KEY = "session_factory"


@health_bp.route("", methods=["GET"])
def health_check():
    """
    Check that the database answers a trivial query.

    Status codes:
        200: Database reachable
        503: Database unreachable or not configured
    """
    session_factory = current_app.extensions.get(SESSION_FACTORY_KEY)
    if session_factory is None:
        return jsonify({"status": "unhealthy", "database": "not_configured"}), 503

    try:
        with session_factory() as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(
            "Health check: database query failed",
            extra={"context": {"endpoint": "/health", "error": str(e)}},
            exc_info=True,
        )
        return jsonify({"status": "unhealthy", "database": "error"}), 503

    return jsonify({"status": "healthy", "database": "ok"}), 200
