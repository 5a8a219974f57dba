"""
Umbrella blueprint for the JSON API.

Resource blueprints are nested here so every route lives under /api.
"""

from flask import Blueprint

from .doctor_controller import doctor_bp
from .schedule_controller import schedule_bp

# Create a blueprint for API routes
api_bp = Blueprint("api", __name__, url_prefix="/api")

api_bp.register_blueprint(doctor_bp)
api_bp.register_blueprint(schedule_bp)
