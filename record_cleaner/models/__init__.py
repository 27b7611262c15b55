from record_cleaner.models.core import (
    CustomRecord,
    DeletionAuditRecord,
    ReferencingRecord,
    TranslationString,
)

__all__ = [
    "CustomRecord",
    "DeletionAuditRecord",
    "ReferencingRecord",
    "TranslationString",
]
