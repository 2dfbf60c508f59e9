from __future__ import annotations

import importlib
import logging
from datetime import date
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .settings import get_settings_module

from .container import build_container
from .seed import seed_demo_requests
from .portaria.controller import register as register_portaria
from .reports.controller import register as register_reports
from .requests.controller import register as register_requests
from .saldo.controller import register as register_saldo

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("[extras-control] settings=%s", settings_module)

    container = build_container(
        expected_arrival=str(getattr(settings, "EXPECTED_ARRIVAL", "08:00")),
        valor_diaria=float(getattr(settings, "VALOR_DIARIA", 130)),
    )
    app.extensions["container"] = container

    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        created = seed_demo_requests(container, today=date.today())
        logger.info("[extras-control] demo seed ready (%d requests)", created)

    register_requests(app, container)
    register_portaria(app, container)
    register_reports(app, container)
    register_saldo(app, container)

    return app
