"""Shared record types and validation helpers for REST resources."""

from __future__ import annotations

from datetime import datetime
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from rest.errors import ArgumentValidationError, FieldLengthError
from rest.request import RequestBuilder


class DeleteStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"

    @classmethod
    def from_status_code(cls, status_code: int) -> DeleteStatus:
        # Only "204 No Content" confirms the removal.
        return cls.SUCCESS if status_code == 204 else cls.FAILED


def parse_twilio_datetime(value: Any) -> Any:
    """Accept RFC 2822 dates as sent by the API; leave anything else to pydantic."""

    if isinstance(value, str) and value and not value[:4].isdigit():
        try:
            return parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return value
    return value


class TwilioRecord(BaseModel):
    """Immutable record populated from a response payload."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    sid: str
    account_sid: str | None = None
    date_created: datetime | None = None
    date_updated: datetime | None = None
    api_version: str | None = None
    uri: str | None = None

    @field_validator("date_created", "date_updated", mode="before")
    @classmethod
    def parse_dates(cls, value: Any) -> Any:
        return parse_twilio_datetime(value)


class TwilioListPage(BaseModel):
    """Paging metadata shared by every list response."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    page: int | None = None
    num_pages: int | None = Field(default=None, validation_alias=AliasChoices("num_pages", "numpages"))
    page_size: int | None = Field(default=None, validation_alias=AliasChoices("page_size", "pagesize"))
    total: int | None = None
    start: int | None = None
    end: int | None = None
    uri: str | None = None
    first_page_uri: str | None = Field(
        default=None, validation_alias=AliasChoices("first_page_uri", "firstpageuri")
    )
    previous_page_uri: str | None = Field(
        default=None, validation_alias=AliasChoices("previous_page_uri", "previouspageuri")
    )
    next_page_uri: str | None = Field(
        default=None, validation_alias=AliasChoices("next_page_uri", "nextpageuri")
    )
    last_page_uri: str | None = Field(
        default=None, validation_alias=AliasChoices("last_page_uri", "lastpageuri")
    )


def require_argument(name: str, value: str | None) -> str:
    if value is None or not str(value).strip():
        raise ArgumentValidationError(name)
    return value


def validate_length(name: str, value: str, max_length: int) -> None:
    if len(value) > max_length:
        raise FieldLengthError(name, max_length, len(value))


def add_paging(builder: RequestBuilder, page_number: int | None, count: int | None) -> RequestBuilder:
    if page_number is not None:
        builder.add_param("Page", page_number)
    if count is not None:
        builder.add_param("PageSize", count)
    return builder
