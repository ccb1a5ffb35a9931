"""Debug logging helpers gated on an environment flag."""

from __future__ import annotations

import logging
import os

from ..constants import DEBUG_ENV_VAR

LOGGER = logging.getLogger(__name__)


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip() == "1"


def debug_log(message: str, *args: object) -> None:
    """Emit debug logs in debug mode only."""
    if debug_enabled():
        LOGGER.debug(message, *args)


def configure_logging() -> None:
    """Route debug logs to stderr when debug mode is on."""
    if debug_enabled():
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
