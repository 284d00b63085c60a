from __future__ import annotations

from collections.abc import Callable

import pytest
import requests


def _make_response(
    status_code: int = 200,
    content: bytes = b"",
    headers: dict[str, str] | None = None,
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = content
    resp.headers.update(headers or {})
    return resp


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for real requests.Response objects that never touch the network."""
    return _make_response
