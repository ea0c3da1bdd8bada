# client/api.py
"""Thin HTTP layer over the site's REST backend.

Every call goes to ``{BACKEND_URL}/api/{path}``. Failures are raised as
:class:`ApiError` carrying the message a user should see; a missing
backend URL is raised as :class:`config.ConfigurationError` before any
request is made.
"""

import logging

import requests

from config import ConfigurationError, get_backend_url, get_request_timeout

logger = logging.getLogger(__name__)

MISSING_BACKEND_MESSAGE = "Backend URL not configured."
NON_JSON_SNIPPET = 100


class ApiError(Exception):
    """A failed request: transport error or non-2xx answer."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def error_message(response):
    """Human readable message for a non-2xx response.

    ``{"error": "..."}`` bodies give their message, other JSON gives the
    status code, and anything else is quoted (truncated).
    """
    try:
        data = response.json()
    except ValueError:
        return f"Server responded with non-JSON: {response.text[:NON_JSON_SNIPPET]}..."
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return f"HTTP error! status: {response.status_code}"


class ApiClient:
    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or get_backend_url() or "").rstrip("/") or None
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.session = session or requests.Session()

    @property
    def configured(self):
        return self.base_url is not None

    def url(self, path):
        if not self.configured:
            raise ConfigurationError(MISSING_BACKEND_MESSAGE)
        return f"{self.base_url}/api/{str(path).strip('/')}"

    def request(self, method, path, payload=None):
        url = self.url(path)
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiError(str(e)) from e

        if not resp.ok:
            raise ApiError(error_message(resp), resp.status_code)
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {url}", resp.status_code) from e

    def get(self, path):
        return self.request("GET", path)

    def post(self, path, payload):
        return self.request("POST", path, payload)

    def put(self, path, payload):
        return self.request("PUT", path, payload)

    def delete(self, path):
        return self.request("DELETE", path)
