from __future__ import annotations

import logging

from flask import Flask

from urlkey.config.ini_config import AppSettings, IniConfig
from urlkey.services.indexing_service import UrlIndexService
from urlkey.services.url_extraction import UrlExtractor
from urlkey.services.url_normalization import IndexKeyUrlNormalizer
from urlkey.web.routes import create_blueprint


def create_app(settings: AppSettings | None = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    logging.basicConfig(level=settings.log_level)

    index_service = UrlIndexService(
        extractor=UrlExtractor(),
        url_normalizer=IndexKeyUrlNormalizer(),
        max_limit=settings.max_limit,
        default_limit=settings.default_limit,
    )

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(index_service))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    return app
