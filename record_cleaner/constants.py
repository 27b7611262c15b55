CUSTOM_RECORD_TYPE = "customrecord_mycustomrecord"
REFERENCING_RECORD_TYPE = "referencing_table"
DELETION_AUDIT_RECORD_TYPE = "customrecord_deletion_audit"

FIELD_DELETED_RECORD_ID = "custrecord_deleted_record_id"
FIELD_DELETED_RECORD_NAME = "custrecord_deleted_record_name"
FIELD_DELETED_BY = "deleted_by"
FIELD_CORRELATION_ID = "correlation_id"

TRANSLATION_COLLECTION = "unusedRecordCleaner"
QUERY_ERROR_KEY = "query_error"
DELETE_ERROR_KEY = "delete_error"
AUDIT_ERROR_KEY = "audit_error"

# English text used when the translation catalog has no entry for a key.
FALLBACK_MESSAGES = {
    QUERY_ERROR_KEY: "Error fetching unused records.",
    DELETE_ERROR_KEY: "Error deleting record.",
    AUDIT_ERROR_KEY: "Error creating audit record.",
}

UNUSED_RECORDS_QUERY = f"""
    SELECT
      id,
      name
    FROM
      {CUSTOM_RECORD_TYPE}
    WHERE
      id NOT IN (
        SELECT DISTINCT custom_record_ref
        FROM {REFERENCING_RECORD_TYPE}
        WHERE custom_record_ref IS NOT NULL
      )
    ORDER BY id
"""

TITLE_RECORD_DELETED = "Record Deleted"
TITLE_AUDIT_RECORD_CREATED = "Audit Record Created"
TITLE_NO_UNUSED_RECORDS = "No Unused Records"
TITLE_CLEANUP_COMPLETE = "Unused Record Cleanup Complete"
