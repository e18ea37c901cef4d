"""Domain exceptions for record stores."""


class RecordStoreError(Exception):
    """Base exception for record store errors."""
    pass


class UnknownCollectionError(RecordStoreError):
    """Raised when a collection name is not one of the known collections."""
    pass


class CorruptStoreError(RecordStoreError):
    """Raised when the JSON store file cannot be parsed."""
    pass
