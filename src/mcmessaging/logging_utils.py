"""Process logging for message rendering and console delivery."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

from mcmessaging.clickable import strip_style_codes

if TYPE_CHECKING:
    import loguru

LogProfile = Literal["default", "console"]

LOG_LEVEL_ENV = "MCMSG_LOG_LEVEL"
DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{line} | {message}"

_active: tuple[LogProfile, str] | None = None


def resolve_level(level: str | None = None) -> str:
    return (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()


def _plain_console_message(record: loguru.Record) -> None:
    # Terminals cannot render `§` codes from message templates.
    record["message"] = strip_style_codes(record["message"])


def _keep_message(record: loguru.Record) -> None:
    return None


def configure_logging(*, profile: LogProfile = "default", level: str | None = None) -> None:
    """Point loguru at stderr or at a rich console; repeat calls are no-ops."""

    global _active
    wanted = (profile, resolve_level(level))
    if _active == wanted:
        return

    logger.remove()
    if profile == "console":
        handler = RichHandler(console=get_console(), show_time=False, show_path=False, markup=False)
        logger.add(handler, level=wanted[1], format="{message}", backtrace=False, diagnose=False)
        logger.configure(patcher=_plain_console_message)
    else:
        logger.add(sys.stderr, level=wanted[1], format=DEFAULT_FORMAT, backtrace=False, diagnose=False)
        logger.configure(patcher=_keep_message)
    _active = wanted
