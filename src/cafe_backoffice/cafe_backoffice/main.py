from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .payroll.controller import register as register_payroll
from .service_charge.controller import register as register_service_charge


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole app."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    config = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}

    app.secret_key = config["SECRET_KEY"]
    app.config["DEBUG"] = bool(config.get("DEBUG", False))
    app.config["TESTING"] = bool(config.get("TESTING", False))

    setup_logging(config.get("LOG_LEVEL", "INFO"))
    logger = logging.getLogger(__name__)
    logger.info("Starting cafe back-office (settings=%s)", settings_module)

    container = container or build_container(settings=config)
    app.extensions["cafe_backoffice"] = container

    register_attendance(app, container)
    register_service_charge(app, container)
    register_payroll(app, container)

    return app
