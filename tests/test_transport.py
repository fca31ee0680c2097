"""Tests for HttpTransport: verbs, envelope unwrapping and error mapping."""

import json
import sys
import os
from unittest.mock import patch, MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from teleclient.exceptions import APIException
from teleclient.files import InputFile
from teleclient.transport import HttpTransport

URL = "https://api.telegram.org/bot123:ABC/getMe"


def _response(body, status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


# ── Envelope unwrapping ──────────────────────────────────────────────────────


class TestEnvelope:
    """Validate how the ``{"ok", "result"}`` envelope is handled."""

    @patch("teleclient.transport.requests.post")
    def test_returns_result(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": {"id": 1}})
        assert HttpTransport().post(URL, {"a": "1"}) == {"id": 1}

    @patch("teleclient.transport.requests.post")
    def test_scalar_result(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": True})
        assert HttpTransport().post(URL) is True

    @patch("teleclient.transport.requests.post")
    def test_ok_false_raises(self, mock_post: MagicMock) -> None:
        """A 200 with ``ok: false`` is still an API error."""
        mock_post.return_value = _response({"ok": False, "error_code": 400, "description": "Bad Request"})
        with pytest.raises(APIException) as exc_info:
            HttpTransport().post(URL)
        assert exc_info.value.status_code == 200
        assert exc_info.value.description == "Bad Request"

    @patch("teleclient.transport.requests.post")
    def test_http_error_raises(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            {"ok": False, "error_code": 401, "description": "Unauthorized"}, status=401
        )
        with pytest.raises(APIException) as exc_info:
            HttpTransport().post(URL)
        assert exc_info.value.status_code == 401
        assert exc_info.value.response_body["error_code"] == 401

    @patch("teleclient.transport.requests.post")
    def test_flood_control_exposes_retry_after(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            {"ok": False, "error_code": 429, "description": "Too Many Requests", "parameters": {"retry_after": 7}},
            status=429,
        )
        with pytest.raises(APIException) as exc_info:
            HttpTransport().post(URL)
        assert exc_info.value.retry_after == 7

    @patch("teleclient.transport.requests.post")
    def test_non_json_body_raises(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(ValueError("No JSON"))
        with pytest.raises(APIException, match="not valid JSON"):
            HttpTransport().post(URL)

    @patch("teleclient.transport.requests.post")
    def test_network_error_propagates(self, mock_post: MagicMock) -> None:
        mock_post.side_effect = requests.ConnectionError("offline")
        with pytest.raises(requests.ConnectionError):
            HttpTransport().post(URL)


# ── Request shapes ───────────────────────────────────────────────────────────


class TestRequestShapes:
    """Validate the arguments handed to ``requests``."""

    @patch("teleclient.transport.requests.get")
    def test_get_sends_query_params(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response({"ok": True, "result": []})
        HttpTransport(timeout=5).get(URL, {"offset": "3"})
        args, kwargs = mock_get.call_args
        assert args[0] == URL
        assert kwargs["params"] == {"offset": "3"}
        assert kwargs["timeout"] == 5

    @patch("teleclient.transport.requests.post")
    def test_post_timeout_override(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": True, "result": True})
        HttpTransport(timeout=5).post(URL, {"a": "b"}, timeout=42)
        assert mock_post.call_args.kwargs["timeout"] == 42
        assert mock_post.call_args.kwargs["data"] == {"a": "b"}

    @patch("teleclient.transport.requests.post")
    def test_multipart_closes_handles(self, mock_post: MagicMock, tmp_path) -> None:
        path = tmp_path / "cat.jpg"
        path.write_bytes(b"\xff\xd8\xff")
        mock_post.return_value = _response({"ok": True, "result": {"message_id": 1}})

        HttpTransport().post_multipart(URL, {"chat_id": "42"}, {"photo": InputFile(path)})

        kwargs = mock_post.call_args.kwargs
        assert kwargs["data"] == {"chat_id": "42"}
        filename, handle = kwargs["files"]["photo"]
        assert filename == "cat.jpg"
        assert handle.closed

    @patch("teleclient.transport.requests.get")
    def test_download_returns_bytes(self, mock_get: MagicMock) -> None:
        resp = MagicMock()
        resp.content = b"payload"
        mock_get.return_value = resp
        assert HttpTransport().download("https://api.telegram.org/file/bot123:ABC/a.txt") == b"payload"
        resp.raise_for_status.assert_called_once()


# ── Logging ──────────────────────────────────────────────────────────────────


class TestLogging:
    """The token is part of every URL and must never reach a log record."""

    @patch("teleclient.transport.requests.post")
    def test_records_carry_method_name_only(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response({"ok": False, "description": "Bad Request"}, status=400)
        logger = MagicMock()
        with pytest.raises(APIException):
            HttpTransport(logger=logger).post(URL)

        debug_extra = logger.debug.call_args.kwargs["extra"]
        warning_extra = logger.warning.call_args.kwargs["extra"]
        assert debug_extra["api_endpoint"] == "getMe"
        assert debug_extra["http_method"] == "POST"
        assert warning_extra["status_code"] == 400
        assert "123:ABC" not in json.dumps([debug_extra, warning_extra])
