from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import Clock
from .common.logging import configure_logging, get_logger
from .container import build_container, build_store
from .core.constants import DEFAULT_MAP_CENTER
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DatabaseConnection, DBConfig
from .location.geolocation import GeolocationOptions
from .storage.repository import SnapshotStore
from .tasks.controller import register as register_tasks
from .users.controller import register as register_users
from .dashboard.controller import register as register_dashboard

logger = get_logger(__name__)


def create_app(
    settings_module: str | None = None,
    *,
    store: SnapshotStore | None = None,
    clock: Clock | None = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOCATION_POLL_SECONDS"] = int(getattr(settings, "LOCATION_POLL_SECONDS", 60))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    backend = getattr(settings, "STORE_BACKEND", "file")
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info("settings=%s store=%s", settings_module, backend)

    if store is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = DatabaseConnection(DBConfig.from_dict(db_config))
            apply_schema(conn)
            logger.info("schema ready (tables=%d)", len(list_tables(conn)))

        store = build_store(
            backend=backend,
            store_path=getattr(settings, "STORE_PATH", "instance/fieldforce_store.json"),
            storage_key=getattr(settings, "STORAGE_KEY", "truthface_db"),
            db_config=db_config,
        )

    container = build_container(
        store=store,
        clock=clock,
        geo_options=GeolocationOptions(
            enable_high_accuracy=bool(getattr(settings, "GEO_HIGH_ACCURACY", True)),
            timeout_ms=int(getattr(settings, "GEO_TIMEOUT_MS", 10000)),
        ),
        map_default_center=tuple(getattr(settings, "MAP_DEFAULT_CENTER", None) or DEFAULT_MAP_CENTER),
    )
    app.extensions["fieldforce"] = container

    register_users(app, container)
    register_dashboard(app, container)
    register_attendance(app, container)
    register_tasks(app, container)

    return app
