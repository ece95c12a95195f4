class StorageError(Exception):
    """Raised when a count, lookup or insert against the database fails."""

    default_message = "Storage operation failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class DuplicateCompletionError(StorageError):
    """The user has already completed this location."""

    default_message = "Completion already recorded"
