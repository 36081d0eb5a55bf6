from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_PERIOD
from .core.exceptions import NotFoundError, ValidationError
from .dashboard.controller import register as register_dashboard
from .grades.controller import register as register_grades

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_PERIOD"] = getattr(settings, "DEFAULT_PERIOD", DEFAULT_PERIOD)
    app.json.sort_keys = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("academic-records settings=%s snapshot=%s", settings_module, getattr(settings, "SNAPSHOT_PATH"))

    if container is None:
        container = build_container(
            snapshot_path=getattr(settings, "SNAPSHOT_PATH"),
            semester_fee=getattr(settings, "SEMESTER_FEE"),
        )

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(ValidationError)
    def _invalid(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    register_dashboard(app, container)
    register_grades(app, container)

    return app
