"""HTTP transport — authenticated GET, JSON body decode."""

from __future__ import annotations

from typing import Any

import httpx

from stockfighter.config.schema import ClientConfig
from stockfighter.exchange.errors import InvalidResponseBody, RequestFailed
from stockfighter.logging import get_logger

log = get_logger(__name__)

AUTH_HEADER = "X-Starfighter-Authorization"


class HttpTransport:
    """Sends GET requests to the API and returns the decoded JSON body.

    The underlying httpx.Client is created on first use and reused until
    close(). Pass *http* to supply a preconfigured client (tests inject one
    backed by httpx.MockTransport); a supplied client is not closed here.
    """

    def __init__(self, config: ClientConfig, http: httpx.Client | None = None):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._http = http
        self._owns_http = http is None

    def _get_http(self) -> httpx.Client:
        if self._http is None or self._http.is_closed:
            self._http = httpx.Client(timeout=self.config.timeout_s)
            self._owns_http = True
        return self._http

    def close(self) -> None:
        if self._owns_http and self._http and not self._http.is_closed:
            self._http.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def send(self, path: str) -> Any:
        """GET ``base_url + path`` and return the parsed JSON body.

        *path* is appended as-is; callers must encode path segments.
        The HTTP status is not checked: the API reports failures in the body.
        """
        url = f"{self.base_url}{path}"
        http = self._get_http()
        log.debug("stockfighter_request", method="GET", path=path)
        try:
            resp = http.get(
                url,
                headers={AUTH_HEADER: self.config.api_key},
                timeout=self.config.timeout_s,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.debug("stockfighter_request_failed", path=path, error=repr(e))
            raise RequestFailed(f"error sending request to {path}: {e}") from e

        log.debug("stockfighter_response", path=path, status=resp.status_code)
        try:
            return resp.json()
        except (ValueError, RecursionError) as e:
            raise InvalidResponseBody(f"response body from {path} is not valid JSON: {e}") from e
