"""Immutable, fluent URL builder and HTTP client for the Image-Charts API.

Every parameter setter returns a new ``ImageCharts`` instance; the receiver is
never modified, so any intermediate builder can be reused as a template:

    base = ImageCharts().cht("p").chs("300x300")
    first = base.chd("t:1,2,3")
    second = base.chd("t:4,5,6")

The result is materialized with ``to_url``, ``to_blob``, ``to_data_uri`` or
``to_file``.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any
from urllib.parse import urlencode

import requests

from . import __version__
from .core.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    DEFAULT_TIMEOUT_MS,
    Settings,
)
from .core.logging_config import get_logger
from .errors import error_from_response
from .parameters import ACCOUNT_ID_KEY, ANIMATION_KEY, PARAMETERS, SIGNATURE_KEY, ChartParameter

logger = get_logger(__name__)

CLIENT_NAME = "python-image-charts"
FALLBACK_CLIENT_VERSION = "latest"
PATHNAME = "/chart"

_SIGNATURE_PATTERN = re.compile(rf"([?&]{SIGNATURE_KEY}=)[^&]*")


@dataclass(frozen=True)
class ChartConfig:
    """Connection settings shared by every builder derived from the same root."""

    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    pathname: str = PATHNAME
    timeout: float = DEFAULT_TIMEOUT_MS  # milliseconds
    secret: str | None = field(default=None, repr=False)
    user_agent: str | None = None

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0 milliseconds, got {self.timeout!r}")


class ImageCharts:
    """Image-Charts API URL builder.

    Args:
        secret: Enterprise secret used to sign requests carrying an account id
        protocol: URL scheme (default: https)
        host: API host (default: image-charts.com)
        port: API port (default: 443)
        timeout: Connect and read timeout in milliseconds (default: 5000)
        user_agent: Overrides the computed ``user-agent`` header
        previous: Initial query parameters

    Raises:
        ValueError: If timeout is not strictly positive
    """

    def __init__(
        self,
        secret: str | None = None,
        protocol: str = DEFAULT_PROTOCOL,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: float = DEFAULT_TIMEOUT_MS,
        user_agent: str | None = None,
        previous: Mapping[str, str] | None = None,
    ):
        self._config = ChartConfig(
            protocol=protocol,
            host=host,
            port=port,
            timeout=timeout,
            secret=secret,
            user_agent=user_agent,
        )
        self._query: Mapping[str, str] = MappingProxyType(dict(previous or {}))

    @classmethod
    def from_settings(cls, settings: Settings) -> ImageCharts:
        """Create an empty builder from environment-derived settings."""
        return cls(
            secret=settings.secret,
            protocol=settings.protocol,
            host=settings.host,
            port=settings.port,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    @classmethod
    def _derive(cls, config: ChartConfig, query: dict[str, str]) -> ImageCharts:
        clone = cls.__new__(cls)
        clone._config = config
        clone._query = MappingProxyType(query)
        return clone

    # Accessors

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def protocol(self) -> str:
        return self._config.protocol

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def port(self) -> int:
        return self._config.port

    @property
    def pathname(self) -> str:
        return self._config.pathname

    @property
    def timeout(self) -> float:
        return self._config.timeout

    @property
    def query(self) -> dict[str, str]:
        """A copy of the accumulated query parameters."""
        return dict(self._query)

    # Builder core

    def with_parameter(self, key: str, value: Any) -> ImageCharts:
        """Return a new builder with ``key`` set to ``value`` (last write wins)."""
        query = dict(self._query)
        query[key] = str(value)
        return self._derive(self._config, query)

    def with_parameters(self, parameters: Mapping[str, Any]) -> ImageCharts:
        """Return a new builder with every entry of ``parameters`` applied in order."""
        query = dict(self._query)
        for key, value in parameters.items():
            query[key] = str(value)
        return self._derive(self._config, query)

    @property
    def signed(self) -> bool:
        """True when ``to_url`` appends an ``ichm`` signature."""
        secret = self._config.secret
        return ACCOUNT_ID_KEY in self._query and bool(secret) and len(secret) > 1

    def to_url(self) -> str:
        """Get the full Image-Charts API url, signed when an account id and secret are set."""
        search_params = urlencode(self._query)

        if self.signed:
            signature = hmac.new(
                self._config.secret.encode("utf-8"),
                search_params.encode("utf-8"),
                hashlib.sha256,
            ).hexdigest()
            search_params += f"&{SIGNATURE_KEY}={signature}"

        c = self._config
        return f"{c.protocol}://{c.host}:{c.port}{c.pathname}?{search_params}"

    @property
    def request_headers(self) -> dict[str, str]:
        """Headers sent by ``to_blob``."""
        return {"user-agent": self._config.user_agent or self._default_user_agent()}

    def _default_user_agent(self) -> str:
        agent = f"{CLIENT_NAME}/{__version__ or FALLBACK_CLIENT_VERSION}"
        if ACCOUNT_ID_KEY in self._query:
            agent += f" ({self._query[ACCOUNT_ID_KEY]})"
        return agent

    # Materialization

    def to_blob(self) -> bytes:
        """Download the chart image.

        Returns:
            Raw image bytes

        Raises:
            ImageChartsError: The API answered with a status outside [200, 300)
            requests.exceptions.Timeout: Connecting or reading exceeded the timeout
        """
        url = self.to_url()
        timeout_s = self._config.timeout / 1000

        logger.debug("Requesting chart", extra={
            "url": _redact_signature(url),
            "timeout_ms": self._config.timeout,
        })

        resp = requests.get(
            url,
            headers=self.request_headers,
            timeout=(timeout_s, timeout_s),
            verify=True,
        )

        if 200 <= resp.status_code < 300:
            return resp.content

        error = error_from_response(resp)
        logger.warning("Image-Charts API error", extra={
            "status_code": error.status_code,
            "validation_code": error.validation_code,
        })
        raise error

    def to_data_uri(self) -> str:
        """Download the chart and return it as a base64 data URI (gif when animated)."""
        mimetype = "image/gif" if ANIMATION_KEY in self._query else "image/png"
        encoded = base64.b64encode(self.to_blob()).decode("ascii")
        return f"data:{mimetype};base64,{encoded}"

    def to_file(self, path: str | Path) -> None:
        """Download the chart and write the raw bytes to ``path``.

        Filesystem errors (e.g. a missing directory) propagate unchanged.
        """
        data = self.to_blob()
        with open(path, "wb") as f:
            f.write(data)
        logger.debug("Chart written", extra={"path": str(path), "size": len(data)})

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageCharts):
            return NotImplemented
        return self._config == other._config and dict(self._query) == dict(other._query)

    def __hash__(self) -> int:
        return hash((self._config, frozenset(self._query.items())))

    def __repr__(self) -> str:
        return f"ImageCharts(config={self._config!r}, query={dict(self._query)!r})"


def _redact_signature(url: str) -> str:
    return _SIGNATURE_PATTERN.sub(r"\1***REDACTED***", url)


def _make_setter(param: ChartParameter):
    def setter(self: ImageCharts, value: Any) -> ImageCharts:
        return self.with_parameter(param.key, value)

    setter.__name__ = param.name
    setter.__qualname__ = f"ImageCharts.{param.name}"
    doc = f"{param.summary}.\n\nSets the ``{param.key}`` query parameter."
    if param.reference:
        doc += f"\n\nSee {param.reference}"
    setter.__doc__ = doc
    return setter


for _param in PARAMETERS:
    setattr(ImageCharts, _param.name, _make_setter(_param))
del _param
