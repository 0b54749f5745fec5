import pytest

from error_demo.app import create_app


class MemorySink:
    """Collects written lines in memory in place of stdout/stderr."""

    def __init__(self):
        self.lines = []

    def write(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def info_sink():
    return MemorySink()


@pytest.fixture
def error_sink():
    return MemorySink()


@pytest.fixture
def app(info_sink, error_sink):
    """Create a Flask test app with in-memory sinks."""
    application = create_app(info_sink=info_sink, error_sink=error_sink)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
