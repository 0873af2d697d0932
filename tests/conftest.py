"""
Shared pytest fixtures for the GameTester SDK tests.

HTTP is never performed: tests patch ``gametester.transport.requests.post``
and use :func:`make_http_response` to build the object it returns.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
import requests

from gametester.session import GameTesterMode, GameTesterSession


DEVELOPER_TOKEN = "dev123"
PLAYER_PIN = "4321"
PLAYER_TOKEN = "player-token-abc"


# ---------------------------------------------------------------------------
# Session fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fresh_session():
    """Session exactly as constructed: not initialized, no player credential."""
    return GameTesterSession()


@pytest.fixture
def sandbox_session():
    """Sandbox session with a developer token and a player pin."""
    session = GameTesterSession()
    session.initialize(GameTesterMode.SANDBOX, DEVELOPER_TOKEN)
    session.set_player_pin(PLAYER_PIN)
    return session


@pytest.fixture
def production_session():
    """Production session authenticated with a player token."""
    session = GameTesterSession()
    session.initialize(GameTesterMode.PRODUCTION, DEVELOPER_TOKEN)
    session.set_player_token(PLAYER_TOKEN)
    return session


# ---------------------------------------------------------------------------
# HTTP response builders
# ---------------------------------------------------------------------------

def _build_http_response(body, status_code: int = 200) -> MagicMock:
    text = body if isinstance(body, str) else json.dumps(body)
    mock_resp = MagicMock()
    mock_resp.status_code = status_code
    mock_resp.text = text
    if status_code >= 400:
        mock_resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Server Error: for url: https://server.gametester.gg"
        )
    else:
        mock_resp.raise_for_status = MagicMock()
    return mock_resp


@pytest.fixture
def make_http_response():
    """Factory: ``make_http_response(body, status_code=200)`` → mocked response."""
    return _build_http_response
