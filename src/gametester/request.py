"""
Request body construction.

Every call carries the developer token and exactly one player credential;
operation-specific fields are appended after them so the serialized body
has a stable field order.
"""

from __future__ import annotations

from .config import (
    DATAPOINT_ID_FIELD,
    DEVELOPER_TOKEN_FIELD,
    FUNCTION_FIELD,
    PLAYER_PIN_FIELD,
    PLAYER_TOKEN_FIELD,
    UNLOCK_FUNCTION_NAME,
)
from .session import GameTesterSession, PlayerAuthenticationMode


def build_auth_fields(session: GameTesterSession) -> dict[str, str]:
    """
    Return the credential fields common to every request.

    Nothing is validated locally: an uninitialized session sends an empty
    developer token and the server answers with the matching error code.
    """
    if session.player_authentication_mode == PlayerAuthenticationMode.PIN:
        credential_field = PLAYER_PIN_FIELD
    else:
        credential_field = PLAYER_TOKEN_FIELD

    return {
        DEVELOPER_TOKEN_FIELD: session.developer_token,
        credential_field: session.player_credential,
    }


def build_datapoint_fields(session: GameTesterSession, datapoint_id: int) -> dict:
    """
    Return the auth fields plus ``datapointId``.

    The id is sent as a JSON number after ``int()`` coercion, so a float is
    truncated toward zero (``7.9`` → ``7``) and ``True`` becomes ``1``.
    Range validation is left to the server.
    """
    fields: dict = build_auth_fields(session)
    fields[DATAPOINT_ID_FIELD] = int(datapoint_id)
    return fields


def build_unlock_test_fields(session: GameTesterSession) -> dict[str, str]:
    fields = build_auth_fields(session)
    fields[FUNCTION_FIELD] = UNLOCK_FUNCTION_NAME
    return fields
