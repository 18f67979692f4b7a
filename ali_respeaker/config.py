"""Configuration defaults, environment overrides and .env loading.

WHY: Separator style, output locale, API address and log level should be
adjustable per machine without touching code. Keeping every default in
one module makes them easy to find and override.

HOW: python-dotenv loads the .env file on import. The load_* helpers
read the environment when called, fill in defaults and validate what
they find, so a changed variable takes effect without a re-import.

RULES:
- Every setting has a working default; no setting is required
- Invalid values raise ValueError with a message naming the variable
- Boolean variables accept true/false, 1/0, yes/no (any case)
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from ali_respeaker.core.ir import RenderOptions

# Load .env from the project root (where the script is run from)
load_dotenv()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(
        "{} must be one of {}, got '{}'".format(name, ", ".join(_TRUE + _FALSE), value)
    )


def load_render_options() -> RenderOptions:
    """Build RenderOptions from ALI_DEFAULT_SEPARATOR, ALI_DEFAULT_LOCALE and ALI_SHOW_SILENT.

    RULES:
    - Unset variables fall back to hyphen / en / false
    - Unknown separator or locale raises ValueError (from RenderOptions)
    """
    return RenderOptions(
        separator=os.getenv("ALI_DEFAULT_SEPARATOR", "hyphen").strip().lower(),
        locale=os.getenv("ALI_DEFAULT_LOCALE", "en").strip().lower(),
        show_silent=_parse_bool("ALI_SHOW_SILENT", os.getenv("ALI_SHOW_SILENT", "false")),
    )


def load_api_address() -> tuple[str, int]:
    """Return (host, port) for the HTTP API from ALI_API_HOST / ALI_API_PORT."""
    host = os.getenv("ALI_API_HOST", "127.0.0.1").strip() or "127.0.0.1"
    raw_port = os.getenv("ALI_API_PORT", "8000").strip()
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError("ALI_API_PORT must be an integer, got '{}'".format(raw_port)) from None
    if not 0 < port < 65536:
        raise ValueError("ALI_API_PORT must be between 1 and 65535, got {}".format(port))
    return host, port


def parse_log_level(name: str | None = None) -> int:
    """Map a level name (default: ALI_LOG_LEVEL) to a logging constant.

    Raises:
        ValueError: For names other than DEBUG, INFO, WARNING, ERROR, CRITICAL.
    """
    if name is None:
        name = os.getenv("ALI_LOG_LEVEL", "WARNING")
    level = LOG_LEVELS.get(name.strip().upper())
    if level is None:
        raise ValueError(
            "Unknown log level '{}'. Available: {}".format(name, ", ".join(LOG_LEVELS))
        )
    return level


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
