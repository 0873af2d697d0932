"""
gametester — Python client for the GameTester developer API.

Module layout
-------------
config.py    — server URLs, wire field names, env variable names
response.py  — response codes, GameTesterResponse, envelope parsing
session.py   — deployment mode, developer token, player pin/token state
request.py   — request body construction
transport.py — endpoint resolution, HTTP POST, transport error mapping
api.py       — GameTesterApi: auth, datapoint, unlock_test

Public interface
----------------
Set up a session once:
    session = GameTesterSession()
    session.initialize(GameTesterMode.SANDBOX, developer_token)
    session.set_player_pin(pin)        # or session.set_player_token(token)

Or load it from GAMETESTER_* environment variables:
    session = GameTesterSession.from_env()

Make calls (coroutines; an optional callback receives the same response):
    api = GameTesterApi(session)
    await api.auth()
    await api.datapoint(datapoint_id)
    await api.unlock_test()
"""

from .api import GameTesterApi
from .response import GameTesterResponse, ResponseCode, http_error, parse_response
from .session import GameTesterMode, GameTesterSession, PlayerAuthenticationMode

__version__ = "1.0.0"

__all__ = [
    # Session
    "GameTesterSession",
    "GameTesterMode",
    "PlayerAuthenticationMode",
    # Calls
    "GameTesterApi",
    # Responses
    "GameTesterResponse",
    "ResponseCode",
    "parse_response",
    "http_error",
]
