import argparse
import logging
import time
from typing import Any

from record_cleaner.config import get_settings
from record_cleaner.database import SessionLocal
from record_cleaner.services.script_log import configure_logging
from record_cleaner.services.utils import now_utc
from record_cleaner.services.workflows.cleanup import cleanup_unused_records

logger = logging.getLogger(__name__)


def execute(context: Any = None) -> None:
    """Scheduled entry point: run one unused record cleanup."""
    settings = get_settings()
    correlation_id = f"cleanup-{now_utc().isoformat()}"
    with SessionLocal() as db:
        cleanup_unused_records(db, actor=settings.operator_id, correlation_id=correlation_id)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Unused record cleanup job")
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Keep running, one cleanup every CLEANUP_INTERVAL_SECONDS",
    )
    return parser.parse_args()


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    args = parse_args()

    while True:
        try:
            execute()
        except Exception:
            if not args.loop:
                return 1
            logger.warning("Cleanup run failed; next run in %s seconds", settings.cleanup_interval_seconds)
        else:
            if not args.loop:
                return 0
        time.sleep(settings.cleanup_interval_seconds)


if __name__ == "__main__":
    raise SystemExit(main())
