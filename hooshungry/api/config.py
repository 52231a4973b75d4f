from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

logger = logging.getLogger(__name__)

ENDPOINT_ENV = "HOOSHUNGRY_GQL"
TIMEOUT_ENV = "HOOSHUNGRY_TIMEOUT"
LOG_LEVEL_ENV = "HOOSHUNGRY_LOG_LEVEL"

DEFAULT_ENDPOINT = "http://localhost:8080/graphql"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT


DEFAULT_CLIENT_CONFIG = ClientConfig()


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %.1fs", TIMEOUT_ENV, raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %.1fs", TIMEOUT_ENV, raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def load_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """
    Build the client configuration from environment variables.

    An unset or blank endpoint falls back to the local development server.
    """
    env = os.environ if environ is None else environ

    endpoint = (env.get(ENDPOINT_ENV) or "").strip() or DEFAULT_ENDPOINT
    timeout = _parse_timeout(env.get(TIMEOUT_ENV))

    return ClientConfig(endpoint=endpoint, timeout=timeout)
