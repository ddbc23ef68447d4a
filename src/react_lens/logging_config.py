"""Process-wide logging setup, split around the litellm import.

litellm reads ``LITELLM_LOG`` when it is first imported and attaches its
own StreamHandler to each of its loggers, so every record would print
twice once the root logger is configured too. Entry points therefore:

1. call :func:`setup_logging` before anything imports litellm;
2. call :func:`cleanup_third_party_handlers` after their imports.

Repeated calls to either function do nothing.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

PACKAGE_LOGGER = "react_lens"

_LITELLM_LOGGERS = ("LiteLLM", "LiteLLM Router", "LiteLLM Proxy")

# Held at WARNING regardless of the configured level
_QUIET_LOGGERS = (*_LITELLM_LOGGERS, "httpx", "httpcore", "uvicorn.access")

_configured = False
_handlers_cleaned = False


def resolve_level(level: str | None = None) -> int:
    """Numeric level for ``level``, else ``$LOG_LEVEL``, else INFO."""
    name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger and quiet third-party loggers."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    os.environ.setdefault("LITELLM_LOG", "WARNING")
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def set_package_level(level: str) -> None:
    """Apply a configured level to react_lens loggers only."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolve_level(level))


def cleanup_third_party_handlers() -> None:
    """Drop litellm's own handlers so its records reach root only once."""
    global _handlers_cleaned  # noqa: PLW0603
    if _handlers_cleaned:
        return
    _handlers_cleaned = True

    for name in _LITELLM_LOGGERS:
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
