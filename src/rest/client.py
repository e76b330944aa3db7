"""Public call surface: blocking and async clients.

Both clients build their requests with the same functions from the resource
modules and differ only in how the request is executed.
"""

from __future__ import annotations

import logging

import httpx

from resources import incoming_phone_numbers, transcriptions
from resources.base import DeleteStatus
from resources.incoming_phone_numbers import (
    IncomingPhoneNumber,
    IncomingPhoneNumberResult,
    PhoneNumberOptions,
)
from resources.transcriptions import Transcription, TranscriptionResult
from rest.execution import AsyncExecutor, Executor
from rest.session import TwilioSession

LOGGER = logging.getLogger(__name__)


class TwilioRestClient:
    """Blocking client for the Twilio REST API.

    Example:
        ```python
        with TwilioRestClient(TwilioSession("AC123", "token")) as client:
            number = client.get_incoming_phone_number("PN123")
        ```
    """

    def __init__(
        self,
        session: TwilioSession,
        *,
        transport: httpx.BaseTransport | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.session = session
        self._executor = executor or Executor(session, transport=transport)

    @classmethod
    def from_settings(cls, *, transport: httpx.BaseTransport | None = None) -> TwilioRestClient:
        return cls(TwilioSession.from_settings(), transport=transport)

    def close(self) -> None:
        self._executor.close()

    def __enter__(self) -> TwilioRestClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Incoming phone numbers

    def get_incoming_phone_number(self, incoming_phone_number_sid: str) -> IncomingPhoneNumber:
        """Retrieve one incoming phone number by sid."""
        request = incoming_phone_numbers.get_request(incoming_phone_number_sid)
        return self._executor.execute(request, IncomingPhoneNumber)

    def list_incoming_phone_numbers(
        self,
        phone_number: str | None = None,
        friendly_name: str | None = None,
        page_number: int | None = None,
        count: int | None = None,
    ) -> IncomingPhoneNumberResult:
        """List numbers on the account, optionally filtered and paged."""
        request = incoming_phone_numbers.list_request(phone_number, friendly_name, page_number, count)
        return self._executor.execute(request, IncomingPhoneNumberResult)

    def add_incoming_phone_number(self, options: PhoneNumberOptions) -> IncomingPhoneNumber:
        """Purchase a number. ``phone_number`` takes precedence over ``area_code``."""
        request = incoming_phone_numbers.add_request(options)
        number = self._executor.execute(request, IncomingPhoneNumber)
        LOGGER.info("Provisioned incoming phone number %s", number.sid)
        return number

    def update_incoming_phone_number(
        self,
        incoming_phone_number_sid: str,
        options: PhoneNumberOptions,
    ) -> IncomingPhoneNumber:
        """Update a number; only options that are set or cleared are sent."""
        request = incoming_phone_numbers.update_request(incoming_phone_number_sid, options)
        return self._executor.execute(request, IncomingPhoneNumber)

    def delete_incoming_phone_number(self, incoming_phone_number_sid: str) -> DeleteStatus:
        """Release a number from the account."""
        request = incoming_phone_numbers.delete_request(incoming_phone_number_sid)
        return DeleteStatus.from_status_code(self._executor.execute_status(request))

    # Transcriptions

    def get_transcription(self, transcription_sid: str) -> Transcription:
        request = transcriptions.get_request(transcription_sid)
        return self._executor.execute(request, Transcription)

    def get_transcription_text(self, transcription_sid: str) -> str:
        request = transcriptions.get_text_request(transcription_sid)
        return self._executor.execute_text(request)

    def list_transcriptions(
        self,
        page_number: int | None = None,
        count: int | None = None,
    ) -> TranscriptionResult:
        request = transcriptions.list_request(page_number, count)
        return self._executor.execute(request, TranscriptionResult)

    def list_recording_transcriptions(
        self,
        recording_sid: str,
        page_number: int | None = None,
        count: int | None = None,
    ) -> TranscriptionResult:
        request = transcriptions.list_for_recording_request(recording_sid, page_number, count)
        return self._executor.execute(request, TranscriptionResult)

    def delete_transcription(self, transcription_sid: str) -> DeleteStatus:
        request = transcriptions.delete_request(transcription_sid)
        return DeleteStatus.from_status_code(self._executor.execute_status(request))


class AsyncTwilioRestClient:
    """Async counterpart of :class:`TwilioRestClient`.

    Every operation is a coroutine that resolves exactly once, with the
    record or with the raised error. Validation errors are raised when the
    coroutine is awaited, before any request is sent.
    """

    def __init__(
        self,
        session: TwilioSession,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        executor: AsyncExecutor | None = None,
    ) -> None:
        self.session = session
        self._executor = executor or AsyncExecutor(session, transport=transport)

    @classmethod
    def from_settings(
        cls,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AsyncTwilioRestClient:
        return cls(TwilioSession.from_settings(), transport=transport)

    async def aclose(self) -> None:
        await self._executor.aclose()

    async def __aenter__(self) -> AsyncTwilioRestClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def get_incoming_phone_number(self, incoming_phone_number_sid: str) -> IncomingPhoneNumber:
        request = incoming_phone_numbers.get_request(incoming_phone_number_sid)
        return await self._executor.execute(request, IncomingPhoneNumber)

    async def list_incoming_phone_numbers(
        self,
        phone_number: str | None = None,
        friendly_name: str | None = None,
        page_number: int | None = None,
        count: int | None = None,
    ) -> IncomingPhoneNumberResult:
        request = incoming_phone_numbers.list_request(phone_number, friendly_name, page_number, count)
        return await self._executor.execute(request, IncomingPhoneNumberResult)

    async def add_incoming_phone_number(self, options: PhoneNumberOptions) -> IncomingPhoneNumber:
        request = incoming_phone_numbers.add_request(options)
        number = await self._executor.execute(request, IncomingPhoneNumber)
        LOGGER.info("Provisioned incoming phone number %s", number.sid)
        return number

    async def update_incoming_phone_number(
        self,
        incoming_phone_number_sid: str,
        options: PhoneNumberOptions,
    ) -> IncomingPhoneNumber:
        request = incoming_phone_numbers.update_request(incoming_phone_number_sid, options)
        return await self._executor.execute(request, IncomingPhoneNumber)

    async def delete_incoming_phone_number(self, incoming_phone_number_sid: str) -> DeleteStatus:
        request = incoming_phone_numbers.delete_request(incoming_phone_number_sid)
        return DeleteStatus.from_status_code(await self._executor.execute_status(request))

    async def get_transcription(self, transcription_sid: str) -> Transcription:
        request = transcriptions.get_request(transcription_sid)
        return await self._executor.execute(request, Transcription)

    async def get_transcription_text(self, transcription_sid: str) -> str:
        request = transcriptions.get_text_request(transcription_sid)
        return await self._executor.execute_text(request)

    async def list_transcriptions(
        self,
        page_number: int | None = None,
        count: int | None = None,
    ) -> TranscriptionResult:
        request = transcriptions.list_request(page_number, count)
        return await self._executor.execute(request, TranscriptionResult)

    async def list_recording_transcriptions(
        self,
        recording_sid: str,
        page_number: int | None = None,
        count: int | None = None,
    ) -> TranscriptionResult:
        request = transcriptions.list_for_recording_request(recording_sid, page_number, count)
        return await self._executor.execute(request, TranscriptionResult)

    async def delete_transcription(self, transcription_sid: str) -> DeleteStatus:
        request = transcriptions.delete_request(transcription_sid)
        return DeleteStatus.from_status_code(await self._executor.execute_status(request))
