from __future__ import annotations

from typing import Any

import httpx
import structlog

from rulerkit.clients.errors import RequestFailedError, ResourceNotFoundError


async def check_response(response: httpx.Response, logger: Any) -> bytes:
    """Classify a streamed response and return its body on success.

    2xx returns the full body. 404 raises ResourceNotFoundError; every other
    status raises RequestFailedError carrying whatever body could be read;
    a failed read leaves the body empty and is reported in the message.
    """
    status = response.status_code
    logger.debug("http_response_checking", status=status, url=str(response.url))

    if 200 <= status <= 299:
        return await response.aread()

    summary = None
    try:
        data = await response.aread()
        body = data.decode("utf-8", errors="replace")
        msg = f"request failed with response body {body}"
    except httpx.HTTPError as exc:
        body = ""
        msg = summary = f"unable to decode body, {exc}"

    if status == 404:
        logger.debug("http_resource_not_found", status=status, msg=msg)
        raise ResourceNotFoundError(details={"status_code": status, "url": str(response.url)})

    logger.debug("http_request_failed", status=status, msg=msg)
    raise RequestFailedError(status, body, summary, details={"url": str(response.url)})


class BaseHTTPClient:
    """Base HTTP client: one request per call, no retries.

    Pass ``http_client`` to share a connection pool between clients; it is
    safe for concurrent use and stays owned by the caller. Without it every
    request opens and closes its own short-lived client.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        logger: Any = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client
        self._logger = logger or structlog.get_logger()

    def _headers(self) -> dict[str, str]:
        """Override to provide custom headers."""
        return {}

    def _auth(self) -> tuple[str, str] | None:
        """Override to provide basic auth credentials."""
        return None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        """Execute a request and return the body of a 2xx response.

        The response is streamed inside a context manager so it is closed on
        every exit path, including cancellation.
        """
        url = f"{self._base_url}{path}"
        req_headers = self._headers()
        if headers:
            req_headers.update(headers)

        self._logger.debug("http_request_sending", method=method, url=url)

        if self._http_client is not None:
            return await self._send(self._http_client, method, url, content, req_headers)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._send(client, method, url, content, req_headers)

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        content: bytes | str | None,
        headers: dict[str, str],
    ) -> bytes:
        async with client.stream(
            method,
            url,
            content=content,
            headers=headers,
            auth=self._auth(),
            timeout=self._timeout,
        ) as response:
            return await check_response(response, self._logger)
