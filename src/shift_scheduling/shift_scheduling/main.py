from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .locations.controller import register as register_locations
from .shifts.controller import register as register_shifts
from .skills.controller import register as register_skills

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = bool(getattr(settings, "JSON_SORT_KEYS", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("Starting shift scheduling API (settings=%s)", settings_module)

    container = container or build_container()

    register_shifts(app, container)
    register_employees(app, container)
    register_skills(app, container)
    register_locations(app, container)
    register_dashboard(app, container)

    return app
