from __future__ import annotations

import sys
from pathlib import Path
from urllib.parse import parse_qs

import httpx
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

ACCOUNT_SID = "AC755325d45d80675a4727a7a54e1b4ce4"
NUMBER_SID = "PN2a0747eba6abf96b7e3c3ff0b4530f6e"
TRANSCRIPTION_SID = "TR8c61027b709ffb038236612dc5af8723"
RECORDING_SID = "RE557ce644e5ab84fa21cc21112e22c485"

PHONE_NUMBER_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <IncomingPhoneNumber>
    <Sid>{NUMBER_SID}</Sid>
    <AccountSid>{ACCOUNT_SID}</AccountSid>
    <FriendlyName>My Company Line</FriendlyName>
    <PhoneNumber>+15105647903</PhoneNumber>
    <VoiceUrl>http://demo.twilio.com/docs/voice.xml</VoiceUrl>
    <VoiceMethod>POST</VoiceMethod>
    <VoiceFallbackUrl/>
    <VoiceFallbackMethod>POST</VoiceFallbackMethod>
    <VoiceCallerIdLookup>false</VoiceCallerIdLookup>
    <VoiceApplicationSid/>
    <DateCreated>Mon, 16 Aug 2010 23:00:23 +0000</DateCreated>
    <DateUpdated>Mon, 16 Aug 2010 23:00:23 +0000</DateUpdated>
    <SmsUrl/>
    <SmsMethod>POST</SmsMethod>
    <SmsFallbackUrl/>
    <SmsFallbackMethod>GET</SmsFallbackMethod>
    <SmsApplicationSid/>
    <Capabilities>
      <Voice>true</Voice>
      <SMS>true</SMS>
      <MMS>false</MMS>
    </Capabilities>
    <StatusCallback/>
    <StatusCallbackMethod/>
    <ApiVersion>2010-04-01</ApiVersion>
    <Uri>/2010-04-01/Accounts/{ACCOUNT_SID}/IncomingPhoneNumbers/{NUMBER_SID}</Uri>
  </IncomingPhoneNumber>
</TwilioResponse>"""

PHONE_NUMBER_LIST_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <IncomingPhoneNumbers page="2" numpages="3" pagesize="50" total="101" start="100" end="100"
      uri="/2010-04-01/Accounts/{ACCOUNT_SID}/IncomingPhoneNumbers"
      firstpageuri="/2010-04-01/Accounts/{ACCOUNT_SID}/IncomingPhoneNumbers?Page=0&amp;PageSize=50"
      previouspageuri="/2010-04-01/Accounts/{ACCOUNT_SID}/IncomingPhoneNumbers?Page=1&amp;PageSize=50"
      nextpageuri=""
      lastpageuri="/2010-04-01/Accounts/{ACCOUNT_SID}/IncomingPhoneNumbers?Page=2&amp;PageSize=50">
    <IncomingPhoneNumber>
      <Sid>{NUMBER_SID}</Sid>
      <AccountSid>{ACCOUNT_SID}</AccountSid>
      <FriendlyName>My Company Line</FriendlyName>
      <PhoneNumber>+15105647903</PhoneNumber>
    </IncomingPhoneNumber>
  </IncomingPhoneNumbers>
</TwilioResponse>"""

TRANSCRIPTION_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <Transcription>
    <Sid>{TRANSCRIPTION_SID}</Sid>
    <DateCreated>Mon, 26 Jul 2010 00:09:58 +0000</DateCreated>
    <DateUpdated>Mon, 26 Jul 2010 00:10:25 +0000</DateUpdated>
    <AccountSid>{ACCOUNT_SID}</AccountSid>
    <Status>completed</Status>
    <Type>fast</Type>
    <RecordingSid>{RECORDING_SID}</RecordingSid>
    <Duration>6</Duration>
    <TranscriptionText>Tommy? Tommy is in the kitchen.</TranscriptionText>
    <Price>-0.05000</Price>
    <PriceUnit>USD</PriceUnit>
    <Uri>/2010-04-01/Accounts/{ACCOUNT_SID}/Transcriptions/{TRANSCRIPTION_SID}</Uri>
  </Transcription>
</TwilioResponse>"""

TRANSCRIPTION_LIST_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <Transcriptions page="0" numpages="1" pagesize="50" total="2" start="0" end="1">
    <Transcription>
      <Sid>{TRANSCRIPTION_SID}</Sid>
      <AccountSid>{ACCOUNT_SID}</AccountSid>
      <Status>completed</Status>
      <Duration>6</Duration>
      <Price>-0.05000</Price>
    </Transcription>
    <Transcription>
      <Sid>TRa5b3b4c1f39a3f7e2a0a86b3e4bd7c29</Sid>
      <AccountSid>{ACCOUNT_SID}</AccountSid>
      <Status>in-progress</Status>
      <Duration>12</Duration>
      <Price/>
    </Transcription>
  </Transcriptions>
</TwilioResponse>"""

NOT_FOUND_XML = """<?xml version="1.0" encoding="UTF-8"?>
<TwilioResponse>
  <RestException>
    <Status>404</Status>
    <Message>The requested resource was not found</Message>
    <Code>20404</Code>
    <MoreInfo>http://www.twilio.com/docs/errors/20404</MoreInfo>
  </RestException>
</TwilioResponse>"""


def form_params(request: httpx.Request) -> dict[str, list[str]]:
    return parse_qs(request.content.decode("utf-8"), keep_blank_values=True)


class RecordingHandler:
    """MockTransport handler that replays one canned response and keeps every request."""

    def __init__(self, status_code: int = 200, body: str = "", content_type: str = "application/xml") -> None:
        self.status_code = status_code
        self.body = body
        self.content_type = content_type
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body.encode("utf-8"),
            headers={"Content-Type": self.content_type},
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture()
def session():
    from rest.session import TwilioSession

    return TwilioSession(account_sid=ACCOUNT_SID, auth_token="secret-token")


@pytest.fixture()
def json_session():
    from rest.session import TwilioSession

    return TwilioSession(account_sid=ACCOUNT_SID, auth_token="secret-token", response_format="json")
