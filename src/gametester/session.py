"""
Developer and player authentication state.

A ``GameTesterSession`` is created once by the embedding application and
handed to ``GameTesterApi``.  Nothing here performs I/O; the session only
records which server to talk to and which credentials to send.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from .config import (
    DEFAULT_MODE,
    DEVELOPER_TOKEN_ENV,
    MODE_ENV,
    PLAYER_PIN_ENV,
    PLAYER_TOKEN_ENV,
)

logger = logging.getLogger(__name__)


class GameTesterMode(str, Enum):
    """Deployment target; selects the server base URL."""

    PRODUCTION = "production"
    SANDBOX = "sandbox"

    @classmethod
    def coerce(cls, value: GameTesterMode | str) -> GameTesterMode:
        """
        Accept either a member or its (case-insensitive) string value.

        Raises:
            ValueError: ``value`` names no known mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown GameTester mode '{value}'. Expected one of: {valid}."
            ) from None


class PlayerAuthenticationMode(str, Enum):
    """Which kind of player credential is active."""

    TOKEN = "token"
    PIN = "pin"


@dataclass
class GameTesterSession:
    """
    Mutable authentication state shared by every call made through one API.

    Pin and token share a single credential slot: setting one replaces the
    other.  State is exposed through read-only properties; use
    :meth:`initialize`, :meth:`set_player_pin` and :meth:`set_player_token`
    to change it.
    """

    _initialized: bool = False
    _mode: GameTesterMode = GameTesterMode(DEFAULT_MODE)
    _developer_token: str = field(default="", repr=False)
    _player_authenticated: bool = False
    _player_authentication_mode: PlayerAuthenticationMode = PlayerAuthenticationMode.PIN
    _player_credential: str = field(default="", repr=False)

    # -- read-only accessors ------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def mode(self) -> GameTesterMode:
        return self._mode

    @property
    def developer_token(self) -> str:
        return self._developer_token

    @property
    def player_authenticated(self) -> bool:
        return self._player_authenticated

    @property
    def player_authentication_mode(self) -> PlayerAuthenticationMode:
        return self._player_authentication_mode

    @property
    def player_credential(self) -> str:
        return self._player_credential

    # -- mutators -----------------------------------------------------------

    def initialize(self, mode: GameTesterMode | str, developer_token: str) -> None:
        """
        Select the deployment target and set the developer token.

        Calling again overwrites both values.  The token is not validated
        locally; a bad token surfaces as a server response code.
        """
        self._mode = GameTesterMode.coerce(mode)
        self._developer_token = developer_token
        self._initialized = True
        logger.debug("Session initialized for %s mode", self._mode.value)

    def set_player_pin(self, pin: str) -> None:
        self._player_credential = pin
        self._player_authentication_mode = PlayerAuthenticationMode.PIN
        self._player_authenticated = True

    def set_player_token(self, token: str) -> None:
        self._player_credential = token
        self._player_authentication_mode = PlayerAuthenticationMode.TOKEN
        self._player_authenticated = True

    # -- construction from environment --------------------------------------

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameTesterSession:
        """
        Build an initialized session from ``GAMETESTER_*`` environment variables.

        A player token takes precedence over a player pin when both are set.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests).

        Returns:
            Initialized session, with a player credential if one was provided.

        Raises:
            ValueError: The developer token variable is unset or empty, or the
                        mode variable names no known mode.
        """
        env = os.environ if environ is None else environ

        developer_token = env.get(DEVELOPER_TOKEN_ENV)
        if not developer_token:
            raise ValueError(
                f"Developer token not found. Set the '{DEVELOPER_TOKEN_ENV}' "
                "environment variable before creating a session."
            )

        session = cls()
        session.initialize(env.get(MODE_ENV) or DEFAULT_MODE, developer_token)

        player_token = env.get(PLAYER_TOKEN_ENV)
        player_pin = env.get(PLAYER_PIN_ENV)
        if player_token:
            session.set_player_token(player_token)
        elif player_pin:
            session.set_player_pin(player_pin)

        return session
