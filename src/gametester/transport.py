"""
HTTP transport: endpoint resolution, request execution, error mapping.

Design notes:
- send_request is the only function that touches the network.  It never
  raises for transport or parse failures; both are reported through the
  returned GameTesterResponse.
- post runs send_request in the event loop's default executor so a caller
  awaiting an API call never blocks the loop on socket I/O.
- The endpoint URL is resolved from the session before the first await,
  so a concurrent re-initialize cannot redirect a call already in flight.
"""

from __future__ import annotations

import asyncio
import functools
import logging

import requests

from .config import REQUEST_HEADERS, REQUEST_TIMEOUT_SECONDS, SERVER_URLS
from .response import GameTesterResponse, http_error, parse_response
from .session import GameTesterMode, GameTesterSession

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request construction
# ---------------------------------------------------------------------------

def build_endpoint_url(mode: GameTesterMode | str, path: str = "") -> str:
    """
    Return the full URL for ``path`` on the server selected by ``mode``.

    Args:
        mode: Deployment target.
        path: Sub-path beginning with ``/``, or ``""`` for the API root.

    Returns:
        Base URL for the mode with ``path`` appended unchanged.
    """
    return f"{SERVER_URLS[GameTesterMode.coerce(mode).value]}{path}"


def build_request_headers() -> dict[str, str]:
    return dict(REQUEST_HEADERS)


# ---------------------------------------------------------------------------
# Request execution
# ---------------------------------------------------------------------------

def send_request(
    url: str,
    fields: dict,
    timeout: float | None = REQUEST_TIMEOUT_SECONDS,
) -> GameTesterResponse:
    """
    POST ``fields`` as a JSON object and decode the reply.

    Args:
        url: Full endpoint URL from :func:`build_endpoint_url`.
        fields: Request body; serialized in insertion order.
        timeout: Passed through to ``requests.post``.

    Returns:
        ``HTTP_ERROR`` on a network failure or non-2xx status (the body is
        not parsed), otherwise the result of :func:`parse_response`.
    """
    logger.debug("POST %s fields=%s", url, sorted(fields))

    try:
        response = requests.post(
            url,
            headers=build_request_headers(),
            json=fields,
            timeout=timeout,
        )
        response.raise_for_status()  # raises HTTPError for 4xx/5xx
    except requests.RequestException as exc:
        logger.warning("Request to %s failed: %s", url, exc)
        return http_error(str(exc))

    result = parse_response(response.text)
    logger.debug("Response from %s: %s", url, result.code_name)
    return result


async def post(session: GameTesterSession, path: str, fields: dict) -> GameTesterResponse:
    """
    Send one request for ``session`` without blocking the running event loop.

    Args:
        session: Session whose mode selects the server.
        path: Sub-path for the operation.
        fields: Fully assembled request body.

    Returns:
        The decoded response; see :func:`send_request`.
    """
    url = build_endpoint_url(session.mode, path)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, functools.partial(send_request, url, fields)
    )
