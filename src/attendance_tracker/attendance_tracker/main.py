from __future__ import annotations

import importlib
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import now_local
from .database.bootstrap import apply_schema
from .employees.seed import ensure_demo_employees

from .container import build_container, build_store
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .goals.controller import register as register_goals
from .leaves.controller import register as register_leaves
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(*, clock: Optional[Callable[[], datetime]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    backend = getattr(settings, "STORAGE_BACKEND", "mysql")
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info("settings=%s storage=%s", settings_module, backend)

    if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)

    container = build_container(
        store=build_store(backend=backend, db_config=db_config),
        office=getattr(settings, "OFFICE_LOCATION", None),
        sheets_defaults=getattr(settings, "GOOGLE_SHEETS", None),
        clock=clock or now_local,
    )

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_demo_employees(container.employee_service)

    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_goals(app, container)
    register_reports(app, container)

    return app
