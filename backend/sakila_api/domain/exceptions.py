"""Domain-specific exceptions: framework-independent."""


class StorageError(Exception):
    """Raised when the underlying store rejects or fails an operation.

    Covers constraint violations (e.g. a duplicate primary key) as well as
    connectivity problems. Callers above the datasource layer let it
    propagate; the HTTP layer turns it into a 500 response.
    """

    def __init__(self, operation: str, entity_type: str, message: str):
        self.operation = operation
        self.entity_type = entity_type
        self.message = message
        super().__init__(f"{entity_type} {operation} failed: {message}")
