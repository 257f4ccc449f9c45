import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from app.config.settings import Settings
from app.logging.logger import Log
from app.summary.exceptions import RequestValidationError, SummaryError
from app.summary.factory import SummaryServiceFactory
from app.summary.request import parse_summary_request
from app.summary.response import error_response, success_response


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a consultation summary from a JSON request body."
    )
    parser.add_argument(
        "request",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Path to a JSON request body (reads stdin when omitted).",
    )
    return parser.parse_args(argv)


def _load_payload(source: TextIO) -> dict[str, Any]:
    try:
        payload = json.load(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RequestValidationError("Invalid JSON in request body") from exc
    if not isinstance(payload, dict):
        raise RequestValidationError("Request body must be a JSON object")
    return payload


def run(source: TextIO, settings: Settings) -> tuple[int, dict[str, Any]]:
    """Handle one request and return ``(exit_code, response_envelope)``."""
    try:
        service = SummaryServiceFactory.create(settings)
        request = parse_summary_request(_load_payload(source))
        result = service.generate_summary(
            request.session_notes, request.preferences.to_preferences()
        )
    except SummaryError as exc:
        Log.error("Request failed", status=exc.status_code, classification=exc.code)
        return 1, error_response(exc)
    return 0, success_response(result.to_dict(), "Summary generated successfully")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> handle one request."""
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    args = _parse_args(argv)
    exit_code, response = run(args.request, settings)
    json.dump(response, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
