"""Incoming phone numbers: records, options and request construction.

Request builders here are pure functions. Both the blocking and the async
client call them, so the two call styles always send the same request.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resources.base import (
    TwilioListPage,
    TwilioRecord,
    add_paging,
    require_argument,
    validate_length,
)
from resources.fields import UNSET, FieldValue
from rest.errors import ArgumentValidationError
from rest.request import RequestBuilder, RequestDescription

LIST_RESOURCE = "Accounts/{AccountSid}/IncomingPhoneNumbers"
INSTANCE_RESOURCE = "Accounts/{AccountSid}/IncomingPhoneNumbers/{IncomingPhoneNumberSid}"
ROOT_ELEMENT = "IncomingPhoneNumber"
LIST_ROOT_ELEMENT = "IncomingPhoneNumbers"

FRIENDLY_NAME_MAX_LENGTH = 64

# Fields the API lets you blank out by sending an empty value.
CLEARABLE_FIELDS = (
    "voice_application_sid",
    "voice_url",
    "voice_fallback_url",
    "sms_application_sid",
    "sms_url",
    "sms_fallback_url",
)
TEXT_FIELDS = ("phone_number", "area_code", "friendly_name", "status_callback")
METHOD_FIELDS = (
    "voice_method",
    "voice_fallback_method",
    "status_callback_method",
    "sms_method",
    "sms_fallback_method",
)


class PhoneNumberCapabilities(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    voice: bool | None = None
    sms: bool | None = None
    mms: bool | None = None


class IncomingPhoneNumber(TwilioRecord):
    """A phone number provisioned on the account."""

    friendly_name: str | None = None
    phone_number: str | None = None
    voice_application_sid: str | None = None
    voice_url: str | None = None
    voice_method: str | None = None
    voice_fallback_url: str | None = None
    voice_fallback_method: str | None = None
    voice_caller_id_lookup: bool | None = None
    status_callback: str | None = None
    status_callback_method: str | None = None
    sms_application_sid: str | None = None
    sms_url: str | None = None
    sms_method: str | None = None
    sms_fallback_url: str | None = None
    sms_fallback_method: str | None = None
    capabilities: PhoneNumberCapabilities | None = None


class IncomingPhoneNumberResult(TwilioListPage):
    incoming_phone_numbers: list[IncomingPhoneNumber] = Field(default_factory=list)

    @field_validator("incoming_phone_numbers", mode="before")
    @classmethod
    def none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class PhoneNumberOptions(BaseModel):
    """Settings for purchasing or updating a number.

    Plain values are accepted for every field. ``None`` leaves a field alone;
    an empty string clears the clearable URL and application sid fields.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    phone_number: FieldValue = UNSET
    area_code: FieldValue = UNSET
    friendly_name: FieldValue = UNSET

    voice_application_sid: FieldValue = UNSET
    voice_url: FieldValue = UNSET
    voice_method: FieldValue = UNSET
    voice_fallback_url: FieldValue = UNSET
    voice_fallback_method: FieldValue = UNSET
    voice_caller_id_lookup: FieldValue = UNSET
    status_callback: FieldValue = UNSET
    status_callback_method: FieldValue = UNSET

    sms_application_sid: FieldValue = UNSET
    sms_url: FieldValue = UNSET
    sms_method: FieldValue = UNSET
    sms_fallback_url: FieldValue = UNSET
    sms_fallback_method: FieldValue = UNSET

    @field_validator(*CLEARABLE_FIELDS, mode="before")
    @classmethod
    def coerce_clearable(cls, value: Any) -> FieldValue:
        return FieldValue.coerce(value, clearable=True)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> FieldValue:
        return FieldValue.coerce(value, clearable=False)

    @field_validator(*METHOD_FIELDS, mode="before")
    @classmethod
    def coerce_method(cls, value: Any) -> FieldValue:
        field = FieldValue.coerce(value, clearable=False)
        if not field.is_set:
            return field
        method = str(field.value).upper()
        if method not in {"GET", "POST"}:
            raise ValueError(f"Unsupported callback method: {field.value}")
        return FieldValue.of(method)

    @field_validator("voice_caller_id_lookup", mode="before")
    @classmethod
    def coerce_flag(cls, value: Any) -> FieldValue:
        field = FieldValue.coerce(value, clearable=False)
        if field.is_set and not isinstance(field.value, bool):
            raise ValueError("voice_caller_id_lookup must be a boolean.")
        return field


def _add_phone_number_options(builder: RequestBuilder, options: PhoneNumberOptions) -> None:
    if options.friendly_name.is_set:
        validate_length("FriendlyName", str(options.friendly_name.value), FRIENDLY_NAME_MAX_LENGTH)
        builder.add_field("FriendlyName", options.friendly_name)

    builder.add_field("VoiceApplicationSid", options.voice_application_sid)
    builder.add_field("VoiceUrl", options.voice_url)
    builder.add_field("VoiceMethod", options.voice_method)
    builder.add_field("VoiceFallbackUrl", options.voice_fallback_url)
    builder.add_field("VoiceFallbackMethod", options.voice_fallback_method)
    builder.add_field("VoiceCallerIdLookup", options.voice_caller_id_lookup)
    # Documented API name; older clients sent "StatusCallbackUrl".
    builder.add_field("StatusCallback", options.status_callback)
    builder.add_field("StatusCallbackMethod", options.status_callback_method)


def _add_sms_options(builder: RequestBuilder, options: PhoneNumberOptions) -> None:
    builder.add_field("SmsApplicationSid", options.sms_application_sid)
    builder.add_field("SmsUrl", options.sms_url)
    builder.add_field("SmsMethod", options.sms_method)
    builder.add_field("SmsFallbackUrl", options.sms_fallback_url)
    builder.add_field("SmsFallbackMethod", options.sms_fallback_method)


def get_request(incoming_phone_number_sid: str | None) -> RequestDescription:
    require_argument("IncomingPhoneNumberSid", incoming_phone_number_sid)
    builder = RequestBuilder(method="GET", resource=INSTANCE_RESOURCE, root_element=ROOT_ELEMENT)
    builder.add_url_segment("IncomingPhoneNumberSid", incoming_phone_number_sid)
    return builder.build()


def list_request(
    phone_number: str | None = None,
    friendly_name: str | None = None,
    page_number: int | None = None,
    count: int | None = None,
) -> RequestDescription:
    builder = RequestBuilder(method="GET", resource=LIST_RESOURCE, root_element=LIST_ROOT_ELEMENT)
    if phone_number:
        builder.add_param("PhoneNumber", phone_number)
    if friendly_name:
        builder.add_param("FriendlyName", friendly_name)
    add_paging(builder, page_number, count)
    return builder.build()


def add_request(options: PhoneNumberOptions) -> RequestDescription:
    builder = RequestBuilder(method="POST", resource=LIST_RESOURCE, root_element=ROOT_ELEMENT)

    if options.phone_number.is_set:
        builder.add_field("PhoneNumber", options.phone_number)
    elif options.area_code.is_set:
        builder.add_field("AreaCode", options.area_code)
    else:
        # Rejected locally rather than round-tripping to a guaranteed 400.
        raise ArgumentValidationError(
            "PhoneNumber",
            "Either phone_number or area_code is required to purchase a number.",
        )

    _add_phone_number_options(builder, options)
    _add_sms_options(builder, options)
    return builder.build()


def update_request(
    incoming_phone_number_sid: str | None,
    options: PhoneNumberOptions,
) -> RequestDescription:
    require_argument("IncomingPhoneNumberSid", incoming_phone_number_sid)

    builder = RequestBuilder(method="POST", resource=INSTANCE_RESOURCE, root_element=ROOT_ELEMENT)
    builder.add_url_segment("IncomingPhoneNumberSid", incoming_phone_number_sid)
    _add_phone_number_options(builder, options)
    _add_sms_options(builder, options)
    return builder.build()


def delete_request(incoming_phone_number_sid: str | None) -> RequestDescription:
    require_argument("IncomingPhoneNumberSid", incoming_phone_number_sid)
    builder = RequestBuilder(method="DELETE", resource=INSTANCE_RESOURCE)
    builder.add_url_segment("IncomingPhoneNumberSid", incoming_phone_number_sid)
    return builder.build()
