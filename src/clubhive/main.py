from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .settings import get_settings_module
from .common.http import register_error_handlers
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .database.seed import seed_store
from .storage import build_store

from .clubs.controller import register as register_clubs
from .events.controller import register as register_events
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting with settings=%s", settings_module)

    backend = str(getattr(settings, "STORE_BACKEND", "memory")).lower()
    if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        db_config = getattr(settings, "DB_CONFIG")
        apply_schema(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

    store = build_store(settings)
    if bool(getattr(settings, "AUTO_SEED", False)):
        seed_store(store)

    container = build_container(store, enforce_capacity=bool(getattr(settings, "ENFORCE_CAPACITY", False)))
    app.extensions["clubhive"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_clubs(app, container)
    register_events(app, container)
    register_reports(app, container)

    return app
