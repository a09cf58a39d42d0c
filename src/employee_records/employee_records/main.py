from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .common.logging import configure_logging, get_logger
from .container import Container, build_container, build_memory_container
from .core.constants import DEFAULT_PAGE_SIZE
from .core.enums import StoreBackend
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .database.demo_data import seed_demo_data
from .employees.controller import register as register_employees

logger = get_logger(__name__)


def build_container_from_settings(settings) -> Container:
    backend = StoreBackend(str(getattr(settings, "STORE_BACKEND", StoreBackend.MYSQL.value)).lower())
    if backend == StoreBackend.MEMORY:
        return build_memory_container()

    db_config = getattr(settings, "DB_CONFIG")
    logger.info("Using MySQL store %s", DBConfig.from_dict(db_config).describe())
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    return build_container(db_config=db_config)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PAGE_SIZE"] = int(getattr(settings, "PAGE_SIZE", DEFAULT_PAGE_SIZE))

    if container is None:
        container = build_container_from_settings(settings)
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_demo_data(container)
    logger.info("settings=%s backend=%s", settings_module, container.backend.value)

    app.extensions["container"] = container
    register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok", "backend": container.backend.value})

    return app
