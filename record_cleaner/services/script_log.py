"""Audit and error log lines with a title and a details string."""

import logging

AUDIT = 25
logging.addLevelName(AUDIT, "AUDIT")

logger = logging.getLogger("record_cleaner.script")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def audit(title: str, details: str) -> None:
    logger.log(AUDIT, "%s: %s", title, details, extra={"title": title, "details": details})


def error(title: str, details: str) -> None:
    logger.error("%s: %s", title, details, extra={"title": title, "details": details})


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
