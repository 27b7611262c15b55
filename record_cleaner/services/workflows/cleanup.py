from sqlalchemy.orm import Session

from record_cleaner.services.reporting import log_completion, log_no_records_found
from record_cleaner.services.unused_records import (
    DependencyCheck,
    create_audit_record,
    delete_record,
    fetch_unused_records,
    no_dependencies,
)


def cleanup_unused_records(
    db: Session,
    *,
    has_dependencies: DependencyCheck = no_dependencies,
    actor: str | None = None,
    correlation_id: str | None = None,
) -> int:
    """Delete every unreferenced custom record and audit each deletion.

    Candidates are processed one at a time in fetch order. The first failure
    stops the run without a completion summary; deletions and audit rows
    written before it stay committed.
    """
    candidates = fetch_unused_records(db)
    if not candidates:
        log_no_records_found()
        return 0

    delete_count = 0
    for candidate in candidates:
        if has_dependencies(candidate):
            continue

        delete_record(db, candidate)
        delete_count += 1

        create_audit_record(db, candidate, actor=actor, correlation_id=correlation_id)

    log_completion(delete_count)
    return delete_count
