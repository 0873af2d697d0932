"""
Server endpoints, wire constants, and environment variable names.

All constants used across the SDK modules are centralized here so that
config is separated from logic.

ENVIRONMENT VARIABLES (read only by ``GameTesterSession.from_env``):
    GAMETESTER_MODE             — ``production`` or ``sandbox`` (default sandbox)
    GAMETESTER_DEVELOPER_TOKEN  — developer token issued for the studio (required)
    GAMETESTER_PLAYER_TOKEN     — optional player token
    GAMETESTER_PLAYER_PIN       — optional player pin (ignored if a token is set)
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Server endpoints
# ---------------------------------------------------------------------------

# Keyed by GameTesterMode value.  Every mode must have exactly one entry.
SERVER_URLS: dict[str, str] = {
    "production": "https://server.gametester.gg/dev-api/v1",
    "sandbox": "https://server.gametester.gg/dev-api/v1/sandbox",
}

DEFAULT_MODE: str = "sandbox"

# Sub-paths appended to the base URL
AUTH_PATH: str = "/auth"
ROOT_PATH: str = ""

# ---------------------------------------------------------------------------
# Request body
# ---------------------------------------------------------------------------

# Field names expected by the server
DEVELOPER_TOKEN_FIELD: str = "developerToken"
PLAYER_PIN_FIELD: str = "playerPin"
PLAYER_TOKEN_FIELD: str = "playerToken"
DATAPOINT_ID_FIELD: str = "datapointId"
FUNCTION_FIELD: str = "function"

# Value of the ``function`` field for the unlock-test call
UNLOCK_FUNCTION_NAME: str = "unlock"

REQUEST_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# None leaves the requests default in place (no client-side timeout)
REQUEST_TIMEOUT_SECONDS: float | None = None

# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------

MODE_ENV: str = "GAMETESTER_MODE"
DEVELOPER_TOKEN_ENV: str = "GAMETESTER_DEVELOPER_TOKEN"
PLAYER_TOKEN_ENV: str = "GAMETESTER_PLAYER_TOKEN"
PLAYER_PIN_ENV: str = "GAMETESTER_PLAYER_PIN"
