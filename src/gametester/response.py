"""
Response envelope model and parsing.

No I/O occurs here; all functions are pure transformations of strings to
``GameTesterResponse`` values to support easy unit testing.

The server replies with ``{"code": <int>, "message": <str>}``.  Codes the
SDK does not know are preserved as plain integers rather than rejected.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import IntEnum

logger = logging.getLogger(__name__)


class ResponseCode(IntEnum):
    """Known response codes.  Negative values are produced locally."""

    HTTP_ERROR = -10
    RESPONSE_PARSE_ERROR = -11

    SUCCESS = 0
    GENERAL_ERROR = 1

    MISSING_DEVELOPER_TOKEN = 2
    MISSING_PLAYER_AUTHENTICATION = 3
    INVALID_DEVELOPER_TOKEN = 4
    INVALID_PLAYER_TOKEN = 5
    INVALID_PLAYER_PIN = 6
    MISSING_PARAMETERS = 7
    DATA_POINT_DOES_NOT_EXIST = 8
    TEST_NOT_RUNNING = 9
    INVALID_PLAYER_FOR_TEST = 10
    INVALID_FUNCTION_NAME = 11
    TEST_ALREADY_UNLOCKED = 12
    TEST_NOT_IN_SETUP_STATE = 13


_KNOWN_CODES: frozenset[int] = frozenset(int(c) for c in ResponseCode)


@dataclass(frozen=True)
class GameTesterResponse:
    """
    Result of a single API call.

    ``code`` is an ``int`` rather than a ``ResponseCode`` so that codes added
    server-side after this SDK was released survive unchanged.  Compare it
    against ``ResponseCode`` members directly (``IntEnum`` equality).
    """

    code: int
    message: str

    @property
    def known_code(self) -> ResponseCode | None:
        """The matching ``ResponseCode`` member, or ``None`` if unrecognized."""
        if self.code in _KNOWN_CODES:
            return ResponseCode(self.code)
        return None

    @property
    def code_name(self) -> str:
        known = self.known_code
        return known.name if known is not None else "Unknown"

    @property
    def ok(self) -> bool:
        return self.code == ResponseCode.SUCCESS

    def __str__(self) -> str:
        return f"[({self.code}){self.code_name}] {self.message}"


def http_error(description: str) -> GameTesterResponse:
    """Build the response reported for a transport-level failure."""
    return GameTesterResponse(code=int(ResponseCode.HTTP_ERROR), message=description)


def _parse_error(description: str) -> GameTesterResponse:
    logger.warning("Could not parse server response: %s", description)
    return GameTesterResponse(
        code=int(ResponseCode.RESPONSE_PARSE_ERROR),
        message=description,
    )


def parse_response(raw_body: str) -> GameTesterResponse:
    """
    Decode a raw response body into a ``GameTesterResponse``.

    Args:
        raw_body: Full response body text as received from the server.

    Returns:
        The decoded response.  Any decode failure (invalid JSON, a non-object
        payload, a missing field, or a field of the wrong type) yields
        ``RESPONSE_PARSE_ERROR`` with a description of the failure; this
        function never raises.
    """
    try:
        payload = json.loads(raw_body)
    # ValueError covers JSONDecodeError and oversized integer literals;
    # RecursionError comes from pathologically nested arrays/objects
    except (ValueError, TypeError, RecursionError) as exc:
        return _parse_error(f"Invalid JSON in response body: {exc}")

    if not isinstance(payload, dict):
        return _parse_error(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    for key in ("code", "message"):
        if key not in payload:
            return _parse_error(f"Response is missing required field '{key}'")

    code = payload["code"]
    message = payload["message"]

    # bool is a subclass of int; reject it explicitly
    if isinstance(code, bool) or not isinstance(code, int):
        return _parse_error(
            f"Field 'code' must be an integer, got {type(code).__name__}"
        )
    if not isinstance(message, str):
        return _parse_error(
            f"Field 'message' must be a string, got {type(message).__name__}"
        )

    return GameTesterResponse(code=code, message=message)
