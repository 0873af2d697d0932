"""
Public API operations.

Each operation is a coroutine that builds its request body from the
session, awaits a single POST, hands the resulting response to the
optional callback exactly once, and returns that same response.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from . import transport
from .config import AUTH_PATH, ROOT_PATH
from .request import (
    build_auth_fields,
    build_datapoint_fields,
    build_unlock_test_fields,
)
from .response import GameTesterResponse
from .session import GameTesterSession

logger = logging.getLogger(__name__)

ResponseCallback = Callable[[GameTesterResponse], None]


class GameTesterApi:
    """
    Auth, datapoint, and unlock-test calls bound to one session.

    Usage::

        session = GameTesterSession()
        session.initialize(GameTesterMode.SANDBOX, "dev-token")
        session.set_player_pin("4321")

        api = GameTesterApi(session)
        response = await api.datapoint(7)
        if not response.ok:
            print(response)

    Calls made before ``initialize`` or before a player credential is set
    are still sent; the server reports the problem through the response
    code.
    """

    def __init__(self, session: GameTesterSession):
        self.session = session

    async def auth(self, callback: ResponseCallback | None = None) -> GameTesterResponse:
        """Verify the developer token and player credential."""
        fields = build_auth_fields(self.session)
        return await self._call("auth", AUTH_PATH, fields, callback)

    async def datapoint(
        self,
        datapoint_id: int,
        callback: ResponseCallback | None = None,
    ) -> GameTesterResponse:
        """Record datapoint ``datapoint_id`` for the current player."""
        fields = build_datapoint_fields(self.session, datapoint_id)
        return await self._call("datapoint", ROOT_PATH, fields, callback)

    async def unlock_test(self, callback: ResponseCallback | None = None) -> GameTesterResponse:
        """Move the current player's test out of its setup state."""
        fields = build_unlock_test_fields(self.session)
        return await self._call("unlock_test", ROOT_PATH, fields, callback)

    async def _call(
        self,
        operation: str,
        path: str,
        fields: dict,
        callback: ResponseCallback | None,
    ) -> GameTesterResponse:
        if not self.session.initialized:
            logger.warning("%s called on an uninitialized session", operation)
        if not self.session.player_authenticated:
            logger.warning("%s called before a player pin or token was set", operation)

        response = await transport.post(self.session, path, fields)
        logger.debug("%s -> %s", operation, response)

        if callback is not None:
            callback(response)
        return response
