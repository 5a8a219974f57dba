import logging
import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask
from sqlalchemy.orm import sessionmaker

from scheduler_api.core import config
from scheduler_api.core.api_utils import (
    DOCTOR_REPOSITORY_KEY,
    SCHEDULE_SERVICE_KEY,
    register_error_handlers,
)
from scheduler_api.core.logging_config import setup_logging
from scheduler_api.domain.interfaces import IDoctorRepository, IScheduleService

logger = logging.getLogger(__name__)


def create_app(
    config_overrides: Optional[Mapping[str, Any]] = None,
    repository: Optional[IDoctorRepository] = None,
    schedule_service: Optional[IScheduleService] = None,
    session_factory: Optional[sessionmaker] = None,
) -> Flask:
    """
    Build the Flask application.

    Collaborators are injected so tests can swap them for fakes. When no
    repository is given, one is built around ``session_factory`` (or the
    process-wide sessionmaker) and shared by every request.
    """
    # Only load from .env when DATABASE_URL is not already defined by the environment
    if not os.getenv("DATABASE_URL"):
        load_dotenv()

    app = Flask(__name__)
    app.json.sort_keys = False

    testing_env = os.getenv("TESTING", "").lower().strip()
    app.config["TESTING"] = testing_env in ("true", "1", "yes")
    app.config["API_DOCS_ENABLED"] = config.is_api_docs_enabled()
    app.config["AUTO_CREATE_TABLES"] = config.should_auto_create_tables()
    if config_overrides:
        app.config.update(config_overrides)

    production = config.is_production()
    setup_logging(
        app=app,
        log_level=logging.INFO if production else logging.DEBUG,
        enable_sql_echo=config.is_sql_echo_enabled(),
        log_to_file=config.is_log_to_file_enabled(),
        use_json_format=production,
        # Keep pytest's capture handlers in place
        configure_handlers=not app.config["TESTING"],
    )
    config.log_app_config()

    if repository is None:
        from scheduler_api.db.session import create_tables, get_sessionmaker
        from scheduler_api.repositories.doctor_repo import DoctorRepository

        session_factory = session_factory or get_sessionmaker()
        if app.config["AUTO_CREATE_TABLES"]:
            create_tables(session_factory.kw.get("bind"))
            logger.info("Database tables ensured")
        repository = DoctorRepository(session_factory)

    if schedule_service is None:
        from scheduler_api.services.schedule_service import StubScheduleService

        schedule_service = StubScheduleService()

    app.extensions[DOCTOR_REPOSITORY_KEY] = repository
    app.extensions[SCHEDULE_SERVICE_KEY] = schedule_service
    if session_factory is not None:
        from scheduler_api.controllers.health_controller import SESSION_FACTORY_KEY

        app.extensions[SESSION_FACTORY_KEY] = session_factory

    # Register blueprints/controllers here
    from scheduler_api.controllers.api_controller import api_bp
    from scheduler_api.controllers.health_controller import health_bp

    app.register_blueprint(api_bp)
    app.register_blueprint(health_bp)

    if app.config["API_DOCS_ENABLED"]:
        from scheduler_api.controllers.docs_controller import docs_bp

        app.register_blueprint(docs_bp)

    register_error_handlers(app)

    logger.info(
        "Application created",
        extra={
            "context": {
                "testing": app.config["TESTING"],
                "repository": type(repository).__name__,
                "api_docs": app.config["API_DOCS_ENABLED"],
            }
        },
    )
    return app
