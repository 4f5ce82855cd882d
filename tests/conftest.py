"""Shared test fixtures for the hello service."""

import logging

import pytest
from fastapi.testclient import TestClient

from app.logging_config import LoggingConfig
from app.main import app


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.INFO)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture(scope="session", autouse=True)
def isolated_logs(tmp_path_factory):
    """Send log files to a temporary directory instead of ./logs."""
    config = LoggingConfig(logs_dir=str(tmp_path_factory.mktemp("logs")))
    config.setup_logging()
    return config


@pytest.fixture
def client():
    """TestClient bound to the application, with startup/shutdown run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_route():
    """Temporarily mount a route whose handler raises."""
    path = "/failing-route"

    async def fail():
        raise RuntimeError("boom")

    app.add_api_route(path, fail, methods=["GET"])
    try:
        yield path
    finally:
        app.router.routes[:] = [
            route for route in app.router.routes if getattr(route, "path", None) != path
        ]


@pytest.fixture
def access_records():
    """Records emitted on the non-propagating ``access`` logger."""
    access_logger = logging.getLogger("access")
    previous_level = access_logger.level
    handler = RecordingHandler()
    access_logger.addHandler(handler)
    access_logger.setLevel(logging.INFO)
    try:
        yield handler.records
    finally:
        access_logger.removeHandler(handler)
        access_logger.setLevel(previous_level)
