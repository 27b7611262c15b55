import logging

from record_cleaner.models.core import CustomRecord, ReferencingRecord
from record_cleaner.services.script_log import AUDIT


def create_custom_records(db, *records: tuple[str, str]) -> list[CustomRecord]:
    created = [CustomRecord(id=record_id, name=name) for record_id, name in records]
    db.add_all(created)
    db.commit()
    return created


def add_reference(db, custom_record_ref: str | None, description: str = "test-reference") -> ReferencingRecord:
    reference = ReferencingRecord(custom_record_ref=custom_record_ref, description=description)
    db.add(reference)
    db.commit()
    return reference


def audit_logs(caplog, title: str | None = None) -> list[logging.LogRecord]:
    records = [record for record in caplog.records if record.levelno == AUDIT]
    if title is None:
        return records
    return [record for record in records if record.title == title]


def error_logs(caplog) -> list[logging.LogRecord]:
    return [record for record in caplog.records if record.levelno == logging.ERROR]
