import pytest
from sqlalchemy import select

from record_cleaner.constants import CUSTOM_RECORD_TYPE, DELETION_AUDIT_RECORD_TYPE
from record_cleaner.models.core import CustomRecord, DeletionAuditRecord
from record_cleaner.services.errors import AuditCreateError, DeleteError, RecordServiceError, UnknownRecordTypeError
from record_cleaner.services.records import create_record, get_record, remove_record, save_record, set_value
from tests.helpers import add_reference, create_custom_records


def test_remove_record_commits_the_delete(db_session):
    create_custom_records(db_session, ("100", "TestRecord A"))

    assert remove_record(db_session, CUSTOM_RECORD_TYPE, "100") == "100"

    db_session.expire_all()
    assert db_session.scalar(select(CustomRecord).where(CustomRecord.id == "100")) is None


def test_remove_missing_record_raises_delete_error(db_session):
    with pytest.raises(DeleteError, match="Record does not exist"):
        remove_record(db_session, CUSTOM_RECORD_TYPE, "999")


def test_remove_referenced_record_is_rejected_by_foreign_key(db_session):
    create_custom_records(db_session, ("100", "TestRecord A"))
    add_reference(db_session, "100")

    with pytest.raises(DeleteError):
        remove_record(db_session, CUSTOM_RECORD_TYPE, "100")

    assert get_record(db_session, CUSTOM_RECORD_TYPE, "100")["name"] == "TestRecord A"


def test_unknown_record_type_is_rejected(db_session):
    with pytest.raises(UnknownRecordTypeError, match="customrecord_nope"):
        create_record(db_session, "customrecord_nope")
    with pytest.raises(RecordServiceError):
        remove_record(db_session, "customrecord_nope", "1")


def test_create_set_and_save_audit_record(db_session):
    audit_record = create_record(db_session, DELETION_AUDIT_RECORD_TYPE)
    set_value(audit_record, "custrecord_deleted_record_id", "100")
    set_value(audit_record, "custrecord_deleted_record_name", "TestRecord A")

    saved_id = save_record(db_session, audit_record)

    assert saved_id.startswith("aud_")
    stored = db_session.get(DeletionAuditRecord, saved_id)
    assert stored.custrecord_deleted_record_id == "100"
    assert stored.deleted_at is not None


def test_set_value_rejects_unknown_field(db_session):
    audit_record = create_record(db_session, DELETION_AUDIT_RECORD_TYPE)

    with pytest.raises(AuditCreateError, match="custrecord_reason"):
        set_value(audit_record, "custrecord_reason", "stale")


def test_save_failure_rolls_back_and_raises(db_session):
    audit_record = create_record(db_session, DELETION_AUDIT_RECORD_TYPE)
    set_value(audit_record, "custrecord_deleted_record_id", "100")

    with pytest.raises(AuditCreateError):
        save_record(db_session, audit_record)

    assert db_session.scalars(select(DeletionAuditRecord)).all() == []
