from __future__ import annotations

from typing import Optional

from flask import Flask

from .config import DEFAULT_PORT, ServiceSettings
from .routes import AnyMethodRule, pages_bp

SERVICE_NAME = "frontend"


def create_app(settings: Optional[ServiceSettings] = None) -> Flask:
    # The page is served by an explicit route; no /static/<path> rule
    app = Flask(__name__, static_folder=None)
    app.config["SERVICE_SETTINGS"] = settings or ServiceSettings(port=DEFAULT_PORT)

    app.json.sort_keys = False

    app.url_rule_class = AnyMethodRule
    app.register_blueprint(pages_bp)

    @app.errorhandler(404)
    def not_found(_exc):
        resp = app.response_class(status=404)
        del resp.headers["Content-Type"]
        return resp

    return app


__all__ = ["create_app", "DEFAULT_PORT", "SERVICE_NAME", "ServiceSettings"]
