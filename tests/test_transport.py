"""
Unit tests for gametester/transport.py.

Covers:
- build_endpoint_url: every mode has a URL; path appended unchanged.
- send_request: JSON body and headers, 2xx → parsed, non-2xx and network
  failures → HTTP_ERROR without parsing.
- post: runs off the event loop and resolves the URL from the session.
"""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import requests

from gametester.config import SERVER_URLS
from gametester.response import ResponseCode
from gametester.session import GameTesterMode
from gametester.transport import build_endpoint_url, post, send_request

SANDBOX_URL = "https://server.gametester.gg/dev-api/v1/sandbox"
PRODUCTION_URL = "https://server.gametester.gg/dev-api/v1"


# ---------------------------------------------------------------------------
# Class: endpoint resolution
# ---------------------------------------------------------------------------

class TestBuildEndpointUrl:

    def test_every_mode_has_a_url(self):
        assert set(SERVER_URLS) == {mode.value for mode in GameTesterMode}

    def test_sandbox_root(self):
        assert build_endpoint_url(GameTesterMode.SANDBOX) == SANDBOX_URL

    def test_production_auth(self):
        assert build_endpoint_url(GameTesterMode.PRODUCTION, "/auth") == f"{PRODUCTION_URL}/auth"

    def test_string_mode(self):
        assert build_endpoint_url("sandbox", "/auth") == f"{SANDBOX_URL}/auth"


# ---------------------------------------------------------------------------
# Class: send_request
# ---------------------------------------------------------------------------

class TestSendRequest:

    def test_posts_json_body(self, make_http_response):
        fields = {"developerToken": "d", "playerPin": "p", "datapointId": 3}
        with patch("gametester.transport.requests.post") as mock_post:
            mock_post.return_value = make_http_response({"code": 0, "message": "ok"})
            send_request(SANDBOX_URL, fields)

        args, kwargs = mock_post.call_args
        assert args[0] == SANDBOX_URL
        assert kwargs["json"] == fields
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["timeout"] is None

    def test_success_is_parsed(self, make_http_response):
        with patch("gametester.transport.requests.post") as mock_post:
            mock_post.return_value = make_http_response({"code": 12, "message": "already"})
            result = send_request(SANDBOX_URL, {})

        assert result.code == ResponseCode.TEST_ALREADY_UNLOCKED
        assert result.message == "already"

    def test_malformed_body_is_parse_error(self, make_http_response):
        with patch("gametester.transport.requests.post") as mock_post:
            mock_post.return_value = make_http_response("<html>oops</html>")
            result = send_request(SANDBOX_URL, {})

        assert result.code == ResponseCode.RESPONSE_PARSE_ERROR

    def test_http_status_error_skips_parsing(self, make_http_response):
        with patch("gametester.transport.requests.post") as mock_post, \
             patch("gametester.transport.parse_response") as mock_parse:
            mock_post.return_value = make_http_response(
                {"code": 0, "message": "ignored"}, status_code=500
            )
            result = send_request(SANDBOX_URL, {})

        mock_parse.assert_not_called()
        assert result.code == ResponseCode.HTTP_ERROR
        assert "500" in result.message

    def test_network_failure_is_http_error(self):
        error = requests.ConnectionError("Cannot connect to destination host")
        with patch("gametester.transport.requests.post", side_effect=error):
            result = send_request(SANDBOX_URL, {})

        assert result.code == ResponseCode.HTTP_ERROR
        assert result.message == "Cannot connect to destination host"

    def test_timeout_is_http_error(self):
        with patch("gametester.transport.requests.post",
                   side_effect=requests.Timeout("timed out")):
            result = send_request(SANDBOX_URL, {})

        assert result.code == ResponseCode.HTTP_ERROR
        assert result.message == "timed out"


# ---------------------------------------------------------------------------
# Class: post
# ---------------------------------------------------------------------------

class TestPost:

    def test_uses_session_mode(self, production_session, make_http_response):
        with patch("gametester.transport.requests.post") as mock_post:
            mock_post.return_value = make_http_response({"code": 0, "message": "ok"})
            result = asyncio.run(post(production_session, "/auth", {"a": "b"}))

        assert result.ok
        assert mock_post.call_args.args[0] == f"{PRODUCTION_URL}/auth"

    def test_url_is_fixed_at_call_time(self, sandbox_session, make_http_response):
        """Re-initializing after the call starts does not redirect it."""

        async def scenario():
            task = asyncio.ensure_future(post(sandbox_session, "", {}))
            await asyncio.sleep(0)  # let the call reach its executor await
            sandbox_session.initialize(GameTesterMode.PRODUCTION, "other")
            return await task

        with patch("gametester.transport.requests.post") as mock_post:
            mock_post.return_value = make_http_response({"code": 0, "message": "ok"})
            asyncio.run(scenario())

        assert mock_post.call_args.args[0] == SANDBOX_URL
