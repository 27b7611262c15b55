from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from record_cleaner.constants import CUSTOM_RECORD_TYPE, DELETION_AUDIT_RECORD_TYPE, REFERENCING_RECORD_TYPE
from record_cleaner.models.base import Base, TimestampedMixin, prefixed_id
from record_cleaner.services.utils import now_utc


class CustomRecord(Base, TimestampedMixin):
    __tablename__ = CUSTOM_RECORD_TYPE

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: prefixed_id("rec"))
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class ReferencingRecord(Base, TimestampedMixin):
    __tablename__ = REFERENCING_RECORD_TYPE
    __table_args__ = (Index("ix_referencing_custom_record_ref", "custom_record_ref"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: prefixed_id("ref"))
    custom_record_ref: Mapped[str | None] = mapped_column(
        String(32), ForeignKey(f"{CUSTOM_RECORD_TYPE}.id"), nullable=True
    )
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)


class DeletionAuditRecord(Base):
    __tablename__ = DELETION_AUDIT_RECORD_TYPE
    __table_args__ = (Index("ix_deletion_audit_deleted_at", "deleted_at"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: prefixed_id("aud"))
    custrecord_deleted_record_id: Mapped[str] = mapped_column(String(32), nullable=False)
    custrecord_deleted_record_name: Mapped[str] = mapped_column(String(255), nullable=False)
    deleted_by: Mapped[str | None] = mapped_column(String(120), nullable=True)
    correlation_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    deleted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=now_utc, nullable=False)


class TranslationString(Base):
    __tablename__ = "translation_strings"
    __table_args__ = (UniqueConstraint("collection", "key", "locale", name="uq_translation_collection_key_locale"),)

    translation_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(String(80), nullable=False)
    key: Mapped[str] = mapped_column(String(80), nullable=False)
    locale: Mapped[str] = mapped_column(String(20), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
