from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .policy.loader import policy_from_settings
from .policy.model import Policy
from .timesheets.controller import register as register_timesheets

logger = logging.getLogger(__name__)


def create_app(*, policy: Optional[Policy] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    policy = policy or policy_from_settings(settings)
    logger.info(
        "settings=%s pay periods of %d days from %s, %d holiday(s)",
        settings_module,
        policy.pay_period_length,
        policy.pay_period_start_date.isoformat(),
        len(policy.holidays),
    )

    container = build_container(policy=policy)
    app.extensions["timesheet_container"] = container

    register_timesheets(app, container)

    return app
