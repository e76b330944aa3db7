from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from config.settings import CLIENT_VERSION, Settings, get_settings

ResponseFormat = Literal["xml", "json"]


@dataclass(frozen=True)
class TwilioSession:
    """Account credentials and endpoint details shared by every call of a client."""

    account_sid: str
    auth_token: str
    base_url: str = "https://api.twilio.com"
    api_version: str = "2010-04-01"
    response_format: ResponseFormat = "xml"
    timeout: float = 30.0
    user_agent: str = f"twilio-rest-client/{CLIENT_VERSION} (python)"

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> TwilioSession:
        settings = settings or get_settings()
        if not settings.twilio_account_sid or not settings.twilio_auth_token:
            raise ValueError("Twilio credentials are not configured")

        return cls(
            account_sid=settings.twilio_account_sid,
            auth_token=settings.twilio_auth_token,
            base_url=settings.twilio_api_base_url,
            api_version=settings.twilio_api_version,
            response_format=settings.twilio_response_format,
            timeout=settings.twilio_request_timeout,
            user_agent=settings.twilio_user_agent,
        )

    @property
    def base_resource_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version.strip('/')}"

    @property
    def auth(self) -> tuple[str, str]:
        return (self.account_sid, self.auth_token)
