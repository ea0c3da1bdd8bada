"""Tests for ApiClient and error message extraction."""

import pytest
import requests

from client.api import ApiClient, ApiError, error_message
from config import ConfigurationError


class TestErrorMessage:

    def test_json_error_field(self, make_response):
        assert error_message(make_response(400, {"error": "Name is required"})) == "Name is required"

    def test_json_without_error_field(self, make_response):
        assert error_message(make_response(500, {"detail": "boom"})) == "HTTP error! status: 500"

    def test_non_json_body_is_truncated(self, make_response):
        msg = error_message(make_response(502, text="x" * 250))
        assert msg == "Server responded with non-JSON: " + "x" * 100 + "..."


class TestApiClient:

    def test_get_builds_api_url(self, api, session, make_response):
        session.request.return_value = make_response(200, [{"id": 1}])

        assert api.get("qna") == [{"id": 1}]
        session.request.assert_called_once_with("GET", "http://backend.test/api/qna", json=None, timeout=5)

    def test_trailing_slash_in_base_url(self, session, make_response):
        session.request.return_value = make_response(200, [])
        ApiClient(base_url="http://backend.test/", timeout=5, session=session).get("/awards")
        assert session.request.call_args.args[1] == "http://backend.test/api/awards"

    def test_non_2xx_raises_with_message(self, api, session, make_response):
        session.request.return_value = make_response(404, {"error": "Product not found"})

        with pytest.raises(ApiError) as exc:
            api.get("products/9")
        assert str(exc.value) == "Product not found"
        assert exc.value.status_code == 404

    def test_network_failure(self, api, session):
        session.request.side_effect = requests.ConnectionError("Connection refused")

        with pytest.raises(ApiError, match="Connection refused"):
            api.get("products")

    def test_no_content(self, api, session, make_response):
        session.request.return_value = make_response(204, text="")
        assert api.delete("media/3") is None

    def test_missing_backend_url_skips_request(self, monkeypatch, session):
        monkeypatch.delenv("BACKEND_URL", raising=False)
        client = ApiClient(session=session)

        assert not client.configured
        with pytest.raises(ConfigurationError, match="Backend URL not configured"):
            client.get("products")
        session.request.assert_not_called()

    def test_backend_url_from_env(self, monkeypatch, session):
        monkeypatch.setenv("BACKEND_URL", "http://env.test/")
        monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
        client = ApiClient(session=session)
        assert client.base_url == "http://env.test"
        assert client.timeout == 2.5
