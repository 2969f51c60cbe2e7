from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .container import build_container
from .payroll.controller import register as register_payroll
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)


def create_app(env: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings(env)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("[worked-hours] settings=%s", get_settings_module(env))

    container = build_container(settings=settings)

    register_payroll(app, container)
    register_schedules(app, container)

    return app
