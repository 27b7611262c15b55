"""Data operations for unused record cleanup.

Fetch candidate records that nothing references, decide whether a candidate
still has dependencies, delete it, and write its deletion audit row. Each
operation logs a failure once, with a localized title, and re-raises it.
"""

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from record_cleaner.constants import (
    AUDIT_ERROR_KEY,
    CUSTOM_RECORD_TYPE,
    DELETE_ERROR_KEY,
    DELETION_AUDIT_RECORD_TYPE,
    FALLBACK_MESSAGES,
    FIELD_CORRELATION_ID,
    FIELD_DELETED_BY,
    FIELD_DELETED_RECORD_ID,
    FIELD_DELETED_RECORD_NAME,
    QUERY_ERROR_KEY,
    TITLE_AUDIT_RECORD_CREATED,
    TITLE_RECORD_DELETED,
    TRANSLATION_COLLECTION,
    UNUSED_RECORDS_QUERY,
)
from record_cleaner.services import script_log
from record_cleaner.services.query import run_query
from record_cleaner.services.records import create_record, remove_record, save_record, set_value
from record_cleaner.services.translation import get_translation


@dataclass(frozen=True)
class Candidate:
    id: str
    name: str


DependencyCheck = Callable[[Candidate], bool]


def no_dependencies(candidate: Candidate) -> bool:
    """Default dependency policy: nothing is known to depend on the candidate."""
    return False


def error_title(db: Session, key: str) -> str:
    return get_translation(db, TRANSLATION_COLLECTION, key) or FALLBACK_MESSAGES[key]


def fetch_unused_records(db: Session) -> list[Candidate]:
    try:
        results = run_query(db, UNUSED_RECORDS_QUERY)
    except Exception as exc:
        script_log.error(error_title(db, QUERY_ERROR_KEY), str(exc))
        raise
    return [Candidate(id=str(row["id"]), name=row["name"]) for row in results.as_mapped_results()]


def delete_record(db: Session, candidate: Candidate) -> None:
    try:
        remove_record(db, CUSTOM_RECORD_TYPE, candidate.id)
    except Exception as exc:
        script_log.error(error_title(db, DELETE_ERROR_KEY), str(exc))
        raise
    script_log.audit(TITLE_RECORD_DELETED, f"Record ID: {candidate.id}")


def create_audit_record(
    db: Session,
    candidate: Candidate,
    *,
    actor: str | None = None,
    correlation_id: str | None = None,
) -> str:
    try:
        audit_record = create_record(db, DELETION_AUDIT_RECORD_TYPE)
        set_value(audit_record, FIELD_DELETED_RECORD_ID, candidate.id)
        set_value(audit_record, FIELD_DELETED_RECORD_NAME, candidate.name)
        if actor:
            set_value(audit_record, FIELD_DELETED_BY, actor)
        if correlation_id:
            set_value(audit_record, FIELD_CORRELATION_ID, correlation_id)
        saved_id = save_record(db, audit_record)
    except Exception as exc:
        script_log.error(error_title(db, AUDIT_ERROR_KEY), str(exc))
        raise
    script_log.audit(TITLE_AUDIT_RECORD_CREATED, f"Audit Record ID: {saved_id}, Deleted Record ID: {candidate.id}")
    return saved_id
