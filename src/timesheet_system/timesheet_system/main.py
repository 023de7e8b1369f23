from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register_http
from .container import Container, build_container
from .reports.controller import register as register_reports
from .time_entries.controller import register as register_time_entries
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    backend_config = getattr(settings, "SUPABASE_CONFIG")
    deduct_travel_time = bool(getattr(settings, "DEDUCT_TRAVEL_TIME", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s backend=%s deduct_travel_time=%s", settings_module, backend_config.get("url"), deduct_travel_time)

    if not backend_config.get("url") or not backend_config.get("service_role_key"):
        logger.warning("Backend credentials missing: SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY")

    if container is None:
        container = build_container(backend_config=backend_config, deduct_travel_time=deduct_travel_time)

    register_http(app, cors_origin=getattr(settings, "CORS_ORIGIN", "*"))
    register_users(app, container)
    register_time_entries(app, container)
    register_reports(app, container)

    return app
