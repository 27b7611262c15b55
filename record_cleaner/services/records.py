"""Record service: typed create, set-value, save and delete calls keyed by record type name.

Every mutating call commits on its own, so a failure later in a batch never
undoes writes that already went through.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from record_cleaner.constants import CUSTOM_RECORD_TYPE, DELETION_AUDIT_RECORD_TYPE, REFERENCING_RECORD_TYPE
from record_cleaner.models.base import Base
from record_cleaner.models.core import CustomRecord, DeletionAuditRecord, ReferencingRecord
from record_cleaner.services.errors import AuditCreateError, DeleteError, UnknownRecordTypeError


def _model_map() -> dict[str, tuple[type, str]]:
    return {
        CUSTOM_RECORD_TYPE: (CustomRecord, "id"),
        REFERENCING_RECORD_TYPE: (ReferencingRecord, "id"),
        DELETION_AUDIT_RECORD_TYPE: (DeletionAuditRecord, "id"),
    }


def _resolve(type_name: str) -> tuple[type, str]:
    mapping = _model_map()
    if type_name not in mapping:
        raise UnknownRecordTypeError(f"Unsupported record type: {type_name}")
    return mapping[type_name]


def remove_record(db: Session, type_name: str, record_id: str) -> str:
    model, id_field = _resolve(type_name)
    try:
        record = db.scalar(select(model).where(getattr(model, id_field) == record_id))
        if record is None:
            raise DeleteError(f"Record does not exist: {type_name}:{record_id}")
        db.delete(record)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise DeleteError(str(exc)) from exc
    return record_id


def create_record(db: Session, type_name: str) -> Base:
    model, _ = _resolve(type_name)
    return model()


def set_value(record: Base, field_id: str, value: Any) -> None:
    columns = record.__table__.columns
    if field_id not in columns.keys():
        raise AuditCreateError(f"Unknown field {field_id} on record type {record.__tablename__}")
    setattr(record, field_id, value)


def save_record(db: Session, record: Base) -> str:
    _, id_field = _resolve(record.__tablename__)
    try:
        db.add(record)
        db.flush()
        saved_id = getattr(record, id_field)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise AuditCreateError(str(exc)) from exc
    return saved_id


def get_record(db: Session, type_name: str, record_id: str) -> dict[str, Any] | None:
    model, id_field = _resolve(type_name)
    record = db.scalar(select(model).where(getattr(model, id_field) == record_id))
    if record is None:
        return None
    return {column.name: getattr(record, column.name) for column in record.__table__.columns}
