"""HTTP transport for the Bot API, built on ``requests``.

Three request shapes are supported: ``GET`` with a query string, ``POST``
with a form-encoded body, and ``POST`` with a multipart body when files are
uploaded.  Every response is expected to carry the Bot API envelope
``{"ok": bool, "result": ..., "description": ...}``; the transport returns
``result`` and raises :class:`APIException` for everything else.
"""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Dict, Optional

import requests

from teleclient.exceptions import APIException
from teleclient.files import InputFile, open_parts
from teleclient.logger import TeleclientLogger


class HttpTransport:
    """Issues Bot API requests and unwraps the response envelope.

    URLs embed the bot token, so log records only carry the last path
    segment (the API method name).
    """

    _DEFAULT_TIMEOUT: int = 10

    def __init__(self, timeout: int = _DEFAULT_TIMEOUT, logger: Optional[logging.Logger] = None) -> None:
        self._timeout = timeout
        self._logger = logger or TeleclientLogger.get_logger()

    @property
    def timeout(self) -> int:
        return self._timeout

    def get(self, url: str, params: Optional[Dict[str, str]] = None, timeout: Optional[float] = None) -> Any:
        """Send a GET request with *params* as the query string and return ``result``."""
        self._log_call("GET", url)
        response = requests.get(url, params=params or None, timeout=timeout or self._timeout)
        return self._unwrap(url, response)

    def post(self, url: str, data: Optional[Dict[str, str]] = None, timeout: Optional[float] = None) -> Any:
        """Send a form-encoded POST request and return ``result``."""
        self._log_call("POST", url)
        response = requests.post(url, data=data or None, timeout=timeout or self._timeout)
        return self._unwrap(url, response)

    def post_multipart(
        self,
        url: str,
        data: Optional[Dict[str, str]],
        files: Dict[str, InputFile],
        timeout: Optional[float] = None,
    ) -> Any:
        """Send a multipart POST request uploading *files* and return ``result``.

        File handles are closed once the request has completed or failed.
        """
        self._log_call("POST", url, files=sorted(files))
        with contextlib.ExitStack() as stack:
            parts = open_parts(files, stack)
            response = requests.post(url, data=data or None, files=parts, timeout=timeout or self._timeout)
        return self._unwrap(url, response)

    def download(self, url: str, timeout: Optional[float] = None) -> bytes:
        """Fetch raw bytes, e.g. from the Bot API file endpoint.

        Raises:
            requests.HTTPError: If the HTTP response status is not 2xx.
        """
        self._log_call("GET", url)
        response = requests.get(url, timeout=timeout or self._timeout)
        response.raise_for_status()
        return response.content

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _endpoint(url: str) -> str:
        return url.rsplit("/", 1)[-1]

    def _log_call(self, http_method: str, url: str, **extra: Any) -> None:
        self._logger.debug(
            "Bot API request",
            extra={"api_endpoint": self._endpoint(url), "http_method": http_method, **extra},
        )

    def _unwrap(self, url: str, response: requests.Response) -> Any:
        endpoint = self._endpoint(url)
        try:
            body = response.json()
        except ValueError:
            self._logger.warning(
                "Bot API returned a non-JSON body",
                extra={"api_endpoint": endpoint, "status_code": response.status_code},
            )
            raise APIException(response.status_code, {"description": "response is not valid JSON"})

        if not isinstance(body, dict):
            raise APIException(response.status_code, {"description": "response is not a Bot API envelope"})

        if not response.ok or not body.get("ok"):
            self._logger.warning(
                "Bot API call failed",
                extra={
                    "api_endpoint": endpoint,
                    "status_code": response.status_code,
                    "description": body.get("description"),
                },
            )
            raise APIException(response.status_code, body)

        return body.get("result")
