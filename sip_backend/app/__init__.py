"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from sip_backend.app.api.routes import api_bp
from sip_backend.config import Config
from sip_backend.schemas.sip import GrowthSeries


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)

    app.config.from_object(Config)
    app.config.from_prefixed_env()
    if test_config is not None:
        app.config.from_mapping(test_config)

    # fail at startup rather than on every request
    app.config["SIP_GROWTH_SERIES"] = GrowthSeries(app.config["SIP_GROWTH_SERIES"])

    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
