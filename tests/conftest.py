"""Shared pytest fixtures for wpapi tests."""

import json
from unittest.mock import patch

import pytest
import requests

from wpapi.site import WordPressSite


def make_response(status_code: int = 200, body=None, headers: dict = None) -> requests.Response:
    """Build a real requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode() if body is not None else b""
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


@pytest.fixture
def site() -> WordPressSite:
    return WordPressSite(
        url="https://blog.example.com/",
        headers={"Authorization": "Basic dXNlcjpwYXNz"},
        timeout=15.0,
        upload_timeout=90.0,
    )


@pytest.fixture
def transport():
    """Patch every requests verb used by the client; no network access."""
    with patch("requests.get") as get, patch("requests.post") as post, \
            patch("requests.put") as put, patch("requests.delete") as delete:
        yield {"GET": get, "POST": post, "PUT": put, "DELETE": delete}
