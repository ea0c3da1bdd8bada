"""Shared fixtures: a fake HTTP session for the client, a temp-db backend."""

import json
from unittest.mock import MagicMock

import pytest

BASE_URL = "http://backend.test"


def _response(status_code=200, body=None, text=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    if body is not None:
        resp.text = json.dumps(body)
        resp.json.return_value = body
    else:
        resp.text = text or ""
        resp.json.side_effect = ValueError("Expecting value")
    resp.content = resp.text.encode()
    return resp


@pytest.fixture
def make_response():
    return _response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def api(session):
    from client.api import ApiClient
    return ApiClient(base_url=BASE_URL, timeout=5, session=session)


@pytest.fixture
def calls(session):
    """[(method, url, payload)] sent through the fake session so far."""
    def _calls():
        return [(c.args[0], c.args[1], c.kwargs.get("json")) for c in session.request.call_args_list]
    return _calls


@pytest.fixture
def backend(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_FILE", str(tmp_path / "test.db"))
    from fastapi.testclient import TestClient
    from database import create_database
    from main import app

    create_database()
    with TestClient(app) as c:
        yield c
