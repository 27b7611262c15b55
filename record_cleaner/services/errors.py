class RecordServiceError(RuntimeError):
    pass


class QueryError(RecordServiceError):
    pass


class DeleteError(RecordServiceError):
    pass


class AuditCreateError(RecordServiceError):
    """Raised by the create, set-value and save steps of a record write."""


class UnknownRecordTypeError(RecordServiceError, ValueError):
    pass
