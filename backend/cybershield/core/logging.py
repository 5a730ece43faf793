"""Logging setup for the API process."""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install the root handler used by the cybershield.* loggers.

    WHY: uvicorn configures only its own loggers, so without this the
    application's INFO records (submissions, notifications) would be dropped.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
