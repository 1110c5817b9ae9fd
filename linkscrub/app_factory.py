from __future__ import annotations

import logging
from typing import Optional

from flask import Flask

from linkscrub.config import AppSettings, IniConfig
from linkscrub.services.clean_service import CleanService
from linkscrub.services.redirect_resolver import HttpxRedirectResolver
from linkscrub.services.url_normalization import DomainRuleEngine, build_default_rules
from linkscrub.web.routes import create_blueprint

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_clean_service(settings: AppSettings) -> CleanService:
    resolver = HttpxRedirectResolver(
        timeout_seconds=settings.timeout_seconds,
        max_redirects=settings.max_redirects,
        user_agent=settings.user_agent,
    )

    # The same resolver backs the generic pass and the 163cn.tv rule's nested pass.
    engine = DomainRuleEngine(rules=build_default_rules(resolver))

    return CleanService(resolver=resolver, cleaner=engine)


def create_app(settings: Optional[AppSettings] = None, clean_service: Optional[CleanService] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    if clean_service is None:
        clean_service = build_clean_service(settings)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(clean_service))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app
