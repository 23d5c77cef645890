from __future__ import annotations

import logging
from typing import Any, Iterator

import pytest

from engine_frontend import create_app
from engine_frontend.config import ServiceSettings


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """``server.main`` reconfigures the root logger; undo it per test."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("engine_frontend.server").setLevel(logging.NOTSET)


@pytest.fixture()
def settings() -> ServiceSettings:
    return ServiceSettings(host="127.0.0.1", port=0)


@pytest.fixture()
def app(settings: ServiceSettings) -> Any:
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app) -> Any:  # noqa: ANN001
    return app.test_client()
