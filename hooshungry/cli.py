"""
Command-line entry point: `hooshungry-recommend [hallId]`.

Prints the top recommendations for one dining hall using a fixed preference
payload. Results go to stdout; every diagnostic goes to stderr.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import re
import sys

import httpx

from .api.client import GraphQLClient
from .api.config import DEFAULT_TIMEOUT, LOG_LEVEL_ENV, ClientConfig, load_config
from .api.errors import (
    GraphQLResponseError,
    HTTPStatusError,
    MalformedResponseError,
    TransportError,
)
from .recommendations.display import format_header, format_item
from .recommendations.models import DEFAULT_HALL_ID
from .recommendations.retrieval import fetch_recommendations

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

# Plain base-10, ASCII digits only.
_HALL_ID_RE = re.compile(r"[+-]?[0-9]+")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hooshungry-recommend", add_help=False)
    parser.add_argument("hall_id", nargs="?", default=DEFAULT_HALL_ID)
    return parser


def parse_hall_id(argv: list[str]) -> int:
    """
    Return the hall id from the first positional argument (default 1).

    Raises SystemExit(2) with a usage message for a non-numeric value.
    """
    if not argv:
        return DEFAULT_HALL_ID

    raw, extra = argv[0], argv[1:]
    if not _HALL_ID_RE.fullmatch(raw):
        _build_parser().error(f"argument hall_id: invalid int value: '{raw}'")
    if extra:
        logger.warning("Ignoring extra arguments: %s", " ".join(extra))
    return int(raw)


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # Suppress noisy logs
    for noisy_logger in ["httpx", "httpcore"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


def run(
    hall_id: int,
    endpoint: str,
    timeout: float = DEFAULT_TIMEOUT,
    http_client: httpx.Client | None = None,
) -> int:
    config = ClientConfig(endpoint=endpoint, timeout=timeout)
    logger.info("Requesting recommendations for hall_id=%s from %s", hall_id, endpoint)

    try:
        with GraphQLClient(config, http_client=http_client) as client:
            items = fetch_recommendations(client, hall_id)
    except HTTPStatusError as exc:
        print(f"HTTP {exc.status_code}\n{exc.body}", file=sys.stderr)
        return EXIT_FAILURE
    except GraphQLResponseError as exc:
        print(f"GraphQL errors:\n{json.dumps(exc.errors, indent=2)}", file=sys.stderr)
        return EXIT_FAILURE
    except MalformedResponseError as exc:
        print(f"Malformed response: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except TransportError as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    print(format_header(hall_id))
    for item in items:
        print(format_item(item))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    try:
        hall_id = parse_hall_id(sys.argv[1:] if argv is None else argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else EXIT_USAGE

    config = load_config()
    return run(hall_id, config.endpoint, timeout=config.timeout)
