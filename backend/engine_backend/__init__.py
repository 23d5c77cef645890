from __future__ import annotations

from typing import Optional

from flask import Flask

from .config import DEFAULT_PORT, ServiceSettings
from .routes import AnyMethodRule, SuffixConverter, api_bp

SERVICE_NAME = "backend"


def create_app(settings: Optional[ServiceSettings] = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config["SERVICE_SETTINGS"] = settings or ServiceSettings(port=DEFAULT_PORT)

    # Keep insertion order in JSON bodies
    app.json.sort_keys = False

    # Both must be in place before the blueprint's rules are bound to the map
    app.url_rule_class = AnyMethodRule
    app.url_map.converters["suffix"] = SuffixConverter
    app.register_blueprint(api_bp)

    @app.errorhandler(404)
    def not_found(_exc):
        resp = app.response_class(status=404)
        del resp.headers["Content-Type"]
        return resp

    return app


__all__ = ["create_app", "DEFAULT_PORT", "SERVICE_NAME", "ServiceSettings"]
