import argparse
import json
from pathlib import Path

from record_cleaner.config import get_settings
from record_cleaner.constants import FALLBACK_MESSAGES, TRANSLATION_COLLECTION
from record_cleaner.database import SessionLocal, engine
from record_cleaner.models.base import Base
from record_cleaner.services.translation import seed_catalog


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load cleanup error messages into the translation catalog")
    parser.add_argument("--locale", help="Locale to write (defaults to TRANSLATION_LOCALE)")
    parser.add_argument("--catalog", type=Path, help="JSON file mapping message keys to translated text")
    return parser.parse_args()


def _load_messages(path: Path | None) -> dict[str, str]:
    if path is None:
        return dict(FALLBACK_MESSAGES)
    data = json.loads(path.read_text(encoding="utf-8"))
    unknown = sorted(set(data) - set(FALLBACK_MESSAGES))
    if unknown:
        raise SystemExit(f"Unknown message keys: {', '.join(unknown)}")
    return {str(key): str(value) for key, value in data.items()}


def main() -> int:
    args = parse_args()
    settings = get_settings()
    locale = args.locale or settings.translation_locale
    messages = _load_messages(args.catalog)

    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        count = seed_catalog(db, TRANSLATION_COLLECTION, messages, locale=locale)
        db.commit()
    print(f"seeded {count} messages for {TRANSLATION_COLLECTION}/{locale}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
