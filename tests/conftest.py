from __future__ import annotations

from datetime import datetime, timedelta

import httpx
import pytest

from school_dashboard.main import create_app
from school_dashboard.storage.seed import demo_seed

# Wednesday; the week window starts on Sunday 2025-03-09.
NOW = datetime(2025, 3, 12, 9, 30, 0)


class FakeClock:
    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> datetime:
        self.now = self.now + timedelta(**delta)
        return self.now


def flask_transport(app, calls=None) -> httpx.MockTransport:
    """Serve httpx requests from the Flask app without a socket.

    When given, `calls` collects "METHOD path" for every request served.
    """
    test_client = app.test_client()

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(f"{request.method} {request.url.path}")
        headers = {k: v for k, v in request.headers.items() if k.lower() not in ("host", "content-length")}
        resp = test_client.open(
            request.url.raw_path.decode("ascii"),
            method=request.method,
            data=request.content,
            headers=headers,
        )
        return httpx.Response(resp.status_code, headers=list(resp.headers.items()), content=resp.get_data())

    return httpx.MockTransport(handler)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def app(clock, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"TESTING": True}, clock=clock, seed=demo_seed(clock()))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["container"]


@pytest.fixture
def calls():
    return []


@pytest.fixture
def transport(app, calls):
    return flask_transport(app, calls)
