"""
Request dispatch for the Face service.

Every operation goes through FaceApiTransport.request(): build the request,
send it with httpx, return the parsed body or raise the mapped error.
"""

import time
from typing import Any, Dict, Optional

import httpx

from mscs_face.core.config import ClientConfig
from mscs_face.core.exceptions import (
    ServiceError,
    UnexpectedResponseError,
    InvalidResponseError,
    TransportError,
)
from mscs_face.core.logging import get_logger, log_request, log_response

logger = get_logger(__name__)


def parse_error(response: httpx.Response) -> ServiceError:
    """
    Map a failed response to ServiceError.

    The `error` object from the body is passed through untouched. Bodies
    without one produce UnexpectedResponseError.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return ServiceError(payload["error"], status_code=response.status_code)

    return UnexpectedResponseError(
        response.status_code,
        body=response.text or response.reason_phrase
    )


def parse_body(response: httpx.Response) -> Any:
    """
    Parsed JSON body, or None for an empty response.

    Raises:
        InvalidResponseError: If the body is not JSON
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise InvalidResponseError(
            f"Response body is not JSON: {response.text[:200]}",
            status_code=response.status_code
        ) from e


class FaceApiTransport:
    """
    Sends authenticated requests to the Face service.

    If an httpx.AsyncClient is supplied it is reused for every request and
    left open; otherwise a short-lived client is opened per request.
    """

    def __init__(self, config: ClientConfig, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = http_client

    @property
    def http_client(self) -> Optional[httpx.AsyncClient]:
        return self._client

    @http_client.setter
    def http_client(self, client: Optional[httpx.AsyncClient]):
        self._client = client

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]],
        json: Any
    ) -> httpx.Response:
        return await client.request(
            method,
            url,
            params=params,
            json=json,
            headers=self.config.headers,
        )

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None
    ) -> Any:
        """
        Send one request and return the parsed response body.

        Args:
            method: HTTP method
            url: Absolute endpoint URL
            params: Query parameters (optional)
            json: JSON body (optional)

        Returns:
            Parsed JSON body, or None when the service returned no content

        Raises:
            ServiceError: The service answered with an HTTP failure
            TransportError: No response was received
            InvalidResponseError: The service answered 2xx with a non-JSON body
        """
        log_request(logger, method, url, params=params)
        started = time.perf_counter()

        try:
            if self._client is not None:
                response = await self._send(self._client, method, url, params, json)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, method, url, params, json)
        except httpx.RequestError as e:
            logger.error(f"Request failed: {method} {url} - {e}")
            raise TransportError(str(e) or type(e).__name__, url=url) from e

        log_response(logger, response.status_code, (time.perf_counter() - started) * 1000)

        if response.is_error:
            error = parse_error(response)
            logger.warning(f"Face API error: {method} {url} -> {error.status_code} {error.code}: {error.message}")
            raise error

        return parse_body(response)
