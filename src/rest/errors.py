"""Exceptions raised by the REST client.

Validation errors are raised locally before any request is sent; transport and
deserialization errors only ever come out of the execution layer.
"""

from __future__ import annotations


class TwilioClientError(Exception):
    default_detail: str = "Twilio client error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class ArgumentValidationError(TwilioClientError, ValueError):
    default_detail = "Required argument is missing."

    def __init__(self, argument: str, detail: str | None = None) -> None:
        super().__init__(detail or f"Argument '{argument}' is required and may not be empty.")
        self.argument = argument


class FieldLengthError(TwilioClientError, ValueError):
    default_detail = "Field exceeds its maximum length."

    def __init__(self, field: str, max_length: int, actual_length: int) -> None:
        super().__init__(
            f"Field '{field}' is {actual_length} characters long; the maximum is {max_length}."
        )
        self.field = field
        self.max_length = max_length
        self.actual_length = actual_length


class TransportError(TwilioClientError):
    default_detail = "Twilio request failed."

    def __init__(
        self,
        detail: str | None = None,
        *,
        status_code: int | None = None,
        code: int | None = None,
        more_info: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.code = code
        self.more_info = more_info


class DeserializationError(TwilioClientError):
    default_detail = "Twilio response could not be deserialized."
