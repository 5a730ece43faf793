"""
Process-level failure handling.

WHAT: Hooks that log and terminate the process on failures nothing else
handled: an uncaught exception at the top level, or an exception the event
loop reports because no one awaited the failed task.

WHY: Request-level errors are turned into JSON responses by the exception
handlers. Anything that escapes them means the process is in an unknown
state, so it exits with status 1 and lets the supervisor restart it. There
is no graceful shutdown on this path.
"""

import asyncio
import logging
import os
import sys
from types import TracebackType
from typing import Any, Dict, Optional, Type


logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


def _terminate() -> None:
    logging.shutdown()
    os._exit(EXIT_FAILURE)


def handle_uncaught_exception(
    exc_type: Type[BaseException],
    exc: BaseException,
    tb: Optional[TracebackType],
) -> None:
    """sys.excepthook replacement: log the exception, then exit(1)."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    logger.critical("Uncaught Exception", exc_info=(exc_type, exc, tb))
    _terminate()


def handle_loop_exception(loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
    """
    Event loop exception handler: log the unhandled failure, then exit(1).

    Args:
        loop: The running event loop
        context: asyncio's error context (message, exception, future, ...)
    """
    exc = context.get("exception")
    message = context.get("message", "Unhandled exception in event loop")
    if exc is not None:
        logger.critical(
            f"Unhandled Rejection: {message}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    else:
        logger.critical(f"Unhandled Rejection: {message}")
    _terminate()


def install_process_handlers() -> None:
    """Install the top-level excepthook."""
    sys.excepthook = handle_uncaught_exception


def install_loop_handler() -> None:
    """Install the exception handler on the running event loop."""
    asyncio.get_running_loop().set_exception_handler(handle_loop_exception)
