from record_cleaner.constants import TITLE_CLEANUP_COMPLETE, TITLE_NO_UNUSED_RECORDS
from record_cleaner.services import script_log


def log_no_records_found() -> None:
    script_log.audit(TITLE_NO_UNUSED_RECORDS, "No unused records found for deletion.")


def log_completion(count: int) -> None:
    script_log.audit(TITLE_CLEANUP_COMPLETE, f"Total records deleted: {count}")
