from __future__ import annotations

import pytest

from resources import transcriptions
from rest.errors import ArgumentValidationError

from conftest import ACCOUNT_SID, RECORDING_SID, TRANSCRIPTION_SID


def test_get_request():
    request = transcriptions.get_request(TRANSCRIPTION_SID)

    assert request.method == "GET"
    assert request.root_element == "Transcription"
    assert request.resolve_path(ACCOUNT_SID) == f"Accounts/{ACCOUNT_SID}/Transcriptions/{TRANSCRIPTION_SID}"
    assert request.resolve_path(ACCOUNT_SID, "json").endswith(f"{TRANSCRIPTION_SID}.json")


def test_text_request_uses_txt_suffix_for_every_format():
    request = transcriptions.get_text_request(TRANSCRIPTION_SID)

    assert request.resolve_path(ACCOUNT_SID).endswith(f"{TRANSCRIPTION_SID}.txt")
    assert request.resolve_path(ACCOUNT_SID, "json").endswith(f"{TRANSCRIPTION_SID}.txt")


def test_list_for_recording_is_scoped_to_the_recording():
    request = transcriptions.list_for_recording_request(RECORDING_SID, page_number=1, count=10)

    assert request.resolve_path(ACCOUNT_SID) == (
        f"Accounts/{ACCOUNT_SID}/Recordings/{RECORDING_SID}/Transcriptions"
    )
    assert request.params == (("Page", "1"), ("PageSize", "10"))


def test_list_without_paging_has_no_parameters():
    assert transcriptions.list_request().params == ()


@pytest.mark.parametrize(
    "build",
    [
        transcriptions.get_request,
        transcriptions.get_text_request,
        transcriptions.delete_request,
        transcriptions.list_for_recording_request,
    ],
)
@pytest.mark.parametrize("sid", [None, ""])
def test_sid_is_required(build, sid):
    with pytest.raises(ArgumentValidationError):
        build(sid)
