"""Transcriptions of call recordings."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from resources.base import TwilioListPage, TwilioRecord, add_paging, require_argument
from rest.request import RequestBuilder, RequestDescription

LIST_RESOURCE = "Accounts/{AccountSid}/Transcriptions"
INSTANCE_RESOURCE = "Accounts/{AccountSid}/Transcriptions/{TranscriptionSid}"
RECORDING_LIST_RESOURCE = "Accounts/{AccountSid}/Recordings/{RecordingSid}/Transcriptions"
ROOT_ELEMENT = "Transcription"
LIST_ROOT_ELEMENT = "Transcriptions"


class Transcription(TwilioRecord):
    """A transcription of a single recording.

    ``status`` is one of ``in-progress``, ``completed`` or ``failed``.
    ``price`` stays ``None`` until the transcription has been billed.
    """

    status: str | None = None
    recording_sid: str | None = None
    duration: int | None = None
    transcription_text: str | None = None
    price: Decimal | None = None
    price_unit: str | None = None


class TranscriptionResult(TwilioListPage):
    transcriptions: list[Transcription] = Field(default_factory=list)

    @field_validator("transcriptions", mode="before")
    @classmethod
    def none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


def get_request(transcription_sid: str | None) -> RequestDescription:
    require_argument("TranscriptionSid", transcription_sid)
    builder = RequestBuilder(method="GET", resource=INSTANCE_RESOURCE, root_element=ROOT_ELEMENT)
    builder.add_url_segment("TranscriptionSid", transcription_sid)
    return builder.build()


def get_text_request(transcription_sid: str | None) -> RequestDescription:
    require_argument("TranscriptionSid", transcription_sid)
    builder = RequestBuilder(method="GET", resource=INSTANCE_RESOURCE, extension=".txt")
    builder.add_url_segment("TranscriptionSid", transcription_sid)
    return builder.build()


def list_request(page_number: int | None = None, count: int | None = None) -> RequestDescription:
    builder = RequestBuilder(method="GET", resource=LIST_RESOURCE, root_element=LIST_ROOT_ELEMENT)
    add_paging(builder, page_number, count)
    return builder.build()


def list_for_recording_request(
    recording_sid: str | None,
    page_number: int | None = None,
    count: int | None = None,
) -> RequestDescription:
    require_argument("RecordingSid", recording_sid)
    builder = RequestBuilder(
        method="GET",
        resource=RECORDING_LIST_RESOURCE,
        root_element=LIST_ROOT_ELEMENT,
    )
    builder.add_url_segment("RecordingSid", recording_sid)
    add_paging(builder, page_number, count)
    return builder.build()


def delete_request(transcription_sid: str | None) -> RequestDescription:
    require_argument("TranscriptionSid", transcription_sid)
    builder = RequestBuilder(method="DELETE", resource=INSTANCE_RESOURCE)
    builder.add_url_segment("TranscriptionSid", transcription_sid)
    return builder.build()
