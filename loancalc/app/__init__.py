"""Application factory and app-wide configuration."""

import logging
from typing import Any, Optional

from flask import Flask
from flask_cors import CORS

from loancalc.app.api.routes import api_bp
from loancalc.app.web.routes import web_bp
from loancalc.config import Config


def create_app(config_object: Optional[object] = None, **overrides: Any) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.config.update(overrides)

    logging.getLogger("loancalc").setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(web_bp)
    return app
