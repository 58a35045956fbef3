from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.controller import register as register_api
from .common.datetime_utils import parse_iso_date
from .common.logger import setup_logger
from .container import build_container
from .core.constants import DEFAULT_TERM_START
from .timetable.catalog import build_default_catalog, load_catalog_file


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log = setup_logger(getattr(settings, "LOG_LEVEL", "INFO"))

    term_start = parse_iso_date(getattr(settings, "TERM_START_DATE", DEFAULT_TERM_START))
    timetable_file = getattr(settings, "TIMETABLE_FILE", None)
    catalog = load_catalog_file(timetable_file) if timetable_file else build_default_catalog()

    log.info(
        "settings=%s term_start=%s timetable=%s (subjects=%d slots=%d)",
        settings_module, term_start, timetable_file or "built-in", len(catalog.subjects), len(catalog.slots),
    )

    container = build_container(catalog=catalog, term_start=term_start)
    app.extensions["classtrack"] = container

    register_api(app, container)

    return app
