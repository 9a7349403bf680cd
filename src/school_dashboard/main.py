from __future__ import annotations

import importlib
import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask

from .announcements.controller import register as register_announcements
from .attendance.controller import register as register_attendance
from .behavior.controller import register as register_behavior
from .common.datetime_utils import now_local
from .container import build_container
from .core.errors import register_error_handlers, register_request_logging
from .core.logging import setup_logging
from .dashboard.controller import register as register_dashboard
from .reports.controller import register as register_reports
from .schedules.controller import register as register_schedules
from .settings import get_settings_module
from .storage.seed import SeedData, demo_seed
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "SEED_DEMO_DATA",
    "RECENT_ACTIVITY_LIMIT",
)


def create_app(
    overrides: Optional[dict] = None,
    *,
    clock: Callable[[], datetime] = now_local,
    seed: Optional[SeedData] = None,
) -> Flask:
    """Application factory.

    ``overrides`` replaces individual settings; ``seed`` replaces the demo
    content that ``SEED_DEMO_DATA`` would otherwise load.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config.update(overrides or {})
    app.secret_key = app.config["SECRET_KEY"]
    app.json.ensure_ascii = False

    setup_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("Starting with settings=%s", settings_module)

    if seed is None and app.config.get("SEED_DEMO_DATA"):
        seed = demo_seed(clock())

    container = build_container(
        seed=seed,
        clock=clock,
        activity_limit=int(app.config.get("RECENT_ACTIVITY_LIMIT", 10)),
    )
    app.extensions["container"] = container

    register_error_handlers(app)
    register_request_logging(app)

    register_dashboard(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_behavior(app, container)
    register_announcements(app, container)
    register_schedules(app, container)
    register_reports(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(
        host=app.config.get("HOST", "127.0.0.1"),
        port=int(app.config.get("PORT", 5000)),
        debug=bool(app.config.get("DEBUG", False)),
        threaded=True,
    )


if __name__ == "__main__":
    run()
