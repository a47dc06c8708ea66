from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import setup_logging
from .container import Container, build_container
from .burnout.controller import register as register_burnout

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["BURNOUT_DEFAULT_PERIOD_DAYS"] = int(getattr(settings, "BURNOUT_DEFAULT_PERIOD_DAYS", 30))
    app.config["BURNOUT_MAX_PERIOD_DAYS"] = int(getattr(settings, "BURNOUT_MAX_PERIOD_DAYS", 3650))

    setup_logging(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        json_output=bool(getattr(settings, "LOG_JSON", True)),
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        container = build_container(
            db_config=db_config,
            max_workers=int(getattr(settings, "BURNOUT_MAX_WORKERS", 1)),
            max_period_days=app.config["BURNOUT_MAX_PERIOD_DAYS"],
        )

    register_burnout(app, container)

    return app
