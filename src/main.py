"""Command-line entry point for inspecting account resources."""

from __future__ import annotations

import argparse
import logging
import sys

from config.settings import get_settings
from rest.client import TwilioRestClient
from rest.errors import TwilioClientError

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="twilio-rest", description="Twilio REST resource client")
    resources = parser.add_subparsers(dest="resource", required=True)

    numbers = resources.add_parser("numbers", help="Incoming phone numbers")
    number_actions = numbers.add_subparsers(dest="action", required=True)
    number_list = number_actions.add_parser("list")
    number_list.add_argument("--phone-number")
    number_list.add_argument("--friendly-name")
    number_list.add_argument("--page", type=int)
    number_list.add_argument("--page-size", type=int)
    number_actions.add_parser("get").add_argument("sid")
    number_actions.add_parser("delete").add_argument("sid")

    transcripts = resources.add_parser("transcriptions", help="Recording transcriptions")
    transcript_actions = transcripts.add_subparsers(dest="action", required=True)
    transcript_list = transcript_actions.add_parser("list")
    transcript_list.add_argument("--recording")
    transcript_list.add_argument("--page", type=int)
    transcript_list.add_argument("--page-size", type=int)
    transcript_actions.add_parser("get").add_argument("sid")
    transcript_actions.add_parser("text").add_argument("sid")

    return parser.parse_args(argv)


def run(args: argparse.Namespace, client: TwilioRestClient) -> str:
    if args.resource == "numbers":
        if args.action == "list":
            return client.list_incoming_phone_numbers(
                args.phone_number, args.friendly_name, args.page, args.page_size
            ).model_dump_json(indent=2)
        if args.action == "get":
            return client.get_incoming_phone_number(args.sid).model_dump_json(indent=2)
        return client.delete_incoming_phone_number(args.sid).value

    if args.action == "list":
        if args.recording:
            result = client.list_recording_transcriptions(args.recording, args.page, args.page_size)
        else:
            result = client.list_transcriptions(args.page, args.page_size)
        return result.model_dump_json(indent=2)
    if args.action == "get":
        return client.get_transcription(args.sid).model_dump_json(indent=2)
    return client.get_transcription_text(args.sid)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = _parse_args(argv)

    try:
        with TwilioRestClient.from_settings() as client:
            print(run(args, client))
    except (TwilioClientError, ValueError) as exc:
        LOGGER.debug("Command failed", exc_info=exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
