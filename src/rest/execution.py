"""HTTP execution of request descriptions.

This is the only layer that performs I/O. It attaches account credentials,
sends the request, checks the status and decodes the payload found at the
request's root element. Every call is a single request with no retry.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel

from rest.deserialize import parse_body, parse_error, to_record
from rest.errors import TransportError
from rest.request import RequestDescription
from rest.session import TwilioSession

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_ACCEPT = {
    "xml": "application/xml",
    "json": "application/json",
}


class _BaseExecutor:
    def __init__(self, session: TwilioSession) -> None:
        self._session = session

    def _headers(self, request: RequestDescription) -> dict[str, str]:
        accept = "text/plain" if request.extension == ".txt" else _ACCEPT[self._session.response_format]
        return {
            "Accept": accept,
            "User-Agent": self._session.user_agent,
        }

    def build_http_request(self, client: httpx.Client | httpx.AsyncClient, request: RequestDescription) -> httpx.Request:
        path = request.resolve_path(self._session.account_sid, self._session.response_format)
        url = f"{self._session.base_resource_url}/{path}"
        params = request.param_dict()

        LOGGER.debug("Twilio %s %s", request.method, path)
        if request.method == "POST":
            return client.build_request(
                request.method,
                url,
                data=params,
                headers=self._headers(request),
            )
        return client.build_request(
            request.method,
            url,
            params=params or None,
            headers=self._headers(request),
        )

    def _check_status(self, request: RequestDescription, response: httpx.Response) -> None:
        if response.is_success:
            return

        error = parse_error(response.content, self._session.response_format)
        message = error.get("message") or response.reason_phrase or "request failed"
        LOGGER.error(
            "Twilio %s %s failed with status %s: %s",
            request.method,
            request.resource,
            response.status_code,
            message,
        )
        raise TransportError(
            f"Twilio API error {response.status_code}: {message}",
            status_code=response.status_code,
            code=error.get("code"),
            more_info=error.get("more_info"),
        )

    def _decode(self, request: RequestDescription, response: httpx.Response, model: type[ModelT]) -> ModelT:
        data = parse_body(response.content, self._session.response_format, request.root_element)
        return to_record(model, data)

    @staticmethod
    def _transport_error(request: RequestDescription, exc: httpx.HTTPError) -> TransportError:
        LOGGER.error("Twilio %s %s transport failure: %s", request.method, request.resource, exc)
        return TransportError(f"Twilio HTTP request failed: {exc}")


class Executor(_BaseExecutor):
    """Blocking executor backed by ``httpx.Client``."""

    def __init__(self, session: TwilioSession, *, transport: httpx.BaseTransport | None = None) -> None:
        super().__init__(session)
        self._client = httpx.Client(
            auth=session.auth,
            timeout=session.timeout,
            transport=transport,
        )

    def _send(self, request: RequestDescription) -> httpx.Response:
        http_request = self.build_http_request(self._client, request)
        try:
            return self._client.send(http_request)
        except httpx.HTTPError as exc:
            raise self._transport_error(request, exc) from exc

    def execute(self, request: RequestDescription, model: type[ModelT]) -> ModelT:
        response = self._send(request)
        self._check_status(request, response)
        return self._decode(request, response, model)

    def execute_text(self, request: RequestDescription) -> str:
        response = self._send(request)
        self._check_status(request, response)
        return response.text

    def execute_status(self, request: RequestDescription) -> int:
        response = self._send(request)
        if not response.is_success:
            LOGGER.warning(
                "Twilio %s %s returned status %s",
                request.method,
                request.resource,
                response.status_code,
            )
        return response.status_code

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Executor:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncExecutor(_BaseExecutor):
    """Non-blocking executor backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        session: TwilioSession,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(session)
        self._client = httpx.AsyncClient(
            auth=session.auth,
            timeout=session.timeout,
            transport=transport,
        )

    async def _send(self, request: RequestDescription) -> httpx.Response:
        http_request = self.build_http_request(self._client, request)
        try:
            return await self._client.send(http_request)
        except httpx.HTTPError as exc:
            raise self._transport_error(request, exc) from exc

    async def execute(self, request: RequestDescription, model: type[ModelT]) -> ModelT:
        response = await self._send(request)
        self._check_status(request, response)
        return self._decode(request, response, model)

    async def execute_text(self, request: RequestDescription) -> str:
        response = await self._send(request)
        self._check_status(request, response)
        return response.text

    async def execute_status(self, request: RequestDescription) -> int:
        response = await self._send(request)
        if not response.is_success:
            LOGGER.warning(
                "Twilio %s %s returned status %s",
                request.method,
                request.resource,
                response.status_code,
            )
        return response.status_code

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncExecutor:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
