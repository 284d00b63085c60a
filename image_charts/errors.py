"""Errors raised by the Image-Charts client.

Only API-level failures are translated. Transport timeouts
(``requests.exceptions.Timeout``) and filesystem errors from ``to_file``
propagate to the caller unchanged.
"""

from __future__ import annotations

import json

import requests

from .core.logging_config import get_logger

logger = get_logger(__name__)

VALIDATION_HEADER = "x-ic-error-validation"
ERROR_CODE_HEADER = "x-ic-error-code"


class ImageChartsError(Exception):
    """The Image-Charts API answered with a non-2xx status.

    Attributes:
        message: Human readable message (validation messages joined by newlines)
        validation_code: API error code, or ``HTTP_<status>`` when none was sent
        status_code: HTTP status of the response
    """

    def __init__(self, message: str, validation_code: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.validation_code = validation_code
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"validation_code={self.validation_code!r}, status_code={self.status_code!r})"
        )


def _validation_messages(raw: str | None) -> list[str]:
    if not raw:
        return []
    try:
        entries = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed validation header", extra={"header": raw[:200]})
        return []
    if not isinstance(entries, list):
        logger.warning("Ignoring non-list validation header", extra={"header": raw[:200]})
        return []
    return [str(e["message"]) for e in entries if isinstance(e, dict) and "message" in e]


def error_from_response(response: requests.Response) -> ImageChartsError:
    """Build an ImageChartsError from a failed API response.

    Message precedence: validation messages, then the error code header, then
    the status code. The error code is the ``x-ic-error-code`` header when
    present, else ``HTTP_<status>``.
    """
    status = response.status_code
    validation_code = response.headers.get(ERROR_CODE_HEADER) or None
    messages = _validation_messages(response.headers.get(VALIDATION_HEADER))

    if messages:
        message = "\n".join(messages)
    elif validation_code:
        message = validation_code
    else:
        message = str(status)

    return ImageChartsError(message, validation_code or f"HTTP_{status}", status)
