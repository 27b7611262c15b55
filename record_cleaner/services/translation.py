import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from record_cleaner.config import get_settings
from record_cleaner.models.core import TranslationString

logger = logging.getLogger(__name__)


def get_translation(db: Session, collection: str, key: str, *, locale: str | None = None) -> str | None:
    """Look up a translated string; None means the caller should use its own fallback text."""
    locale = locale or get_settings().translation_locale
    stmt = select(TranslationString.text).where(
        TranslationString.collection == collection,
        TranslationString.key == key,
        TranslationString.locale == locale,
    )
    try:
        value = db.scalar(stmt)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Translation lookup failed for %s/%s: %s", collection, key, exc)
        return None
    if value is None or not value.strip():
        return None
    return value


def upsert_translation(db: Session, collection: str, key: str, text: str, *, locale: str) -> TranslationString:
    entry = db.scalar(
        select(TranslationString).where(
            TranslationString.collection == collection,
            TranslationString.key == key,
            TranslationString.locale == locale,
        )
    )
    if entry is None:
        entry = TranslationString(collection=collection, key=key, locale=locale, text=text)
        db.add(entry)
    else:
        entry.text = text
    db.flush()
    return entry


def seed_catalog(db: Session, collection: str, messages: dict[str, str], *, locale: str) -> int:
    for key, text in messages.items():
        upsert_translation(db, collection, key, text, locale=locale)
    return len(messages)
