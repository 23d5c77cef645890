# backend/engine_backend/server.py
from __future__ import annotations

import logging
import sys
from typing import Mapping, Optional

from pydantic import ValidationError
from werkzeug.serving import BaseWSGIServer, make_server

from . import SERVICE_NAME, create_app
from .config import DEFAULT_PORT, ServiceSettings

log = logging.getLogger("engine_backend.server")

EXIT_BIND_FAILED = 1
EXIT_BAD_CONFIG = 2


def configure_logging(level: str = "INFO") -> None:
    numeric = logging.getLevelName(level)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )
    # Startup and shutdown lines are emitted even when LOG_LEVEL is quieter
    log.setLevel(min(numeric, logging.INFO))


def bind(settings: ServiceSettings) -> BaseWSGIServer:
    """Create the app and bind its listening socket.

    Raises ``OSError`` when the address cannot be bound. Werkzeug reports
    the OS error on stderr and exits on its own; that exit is turned back
    into an ``OSError`` so callers decide how the process ends.
    """

    app = create_app(settings)
    try:
        return make_server(settings.host, settings.port, app, threaded=True)
    except SystemExit as exc:
        raise OSError(f"address {settings.host}:{settings.port} unavailable") from exc


def serve(server: BaseWSGIServer) -> None:
    """Serve until shutdown() or Ctrl-C; the socket is closed on return."""

    log.info("[%s] listening on %s", SERVICE_NAME, server.server_address[1])
    # werkzeug swallows KeyboardInterrupt and closes the socket itself
    server.serve_forever()
    log.info("[%s] stopped", SERVICE_NAME)


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    try:
        settings = ServiceSettings.from_env(environ, default_port=DEFAULT_PORT)
    except ValidationError as exc:
        configure_logging()
        log.error("[%s] invalid configuration: %s", SERVICE_NAME, exc)
        return EXIT_BAD_CONFIG

    configure_logging(settings.log_level)
    try:
        server = bind(settings)
    except OSError as exc:
        log.error(
            "[%s] cannot listen on %s:%s: %s",
            SERVICE_NAME, settings.host, settings.port, exc,
        )
        return EXIT_BIND_FAILED

    serve(server)
    return 0
