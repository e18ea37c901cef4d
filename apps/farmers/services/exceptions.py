"""Domain exceptions for farmers services."""


class FarmersServiceError(Exception):
    """Base exception for farmers services."""
    pass


class FarmerNotFoundError(FarmersServiceError):
    """Raised when farmer does not exist."""
    pass


class InvalidFarmerError(FarmersServiceError):
    """Raised when required farmer details are missing."""
    pass


class BatchNotFoundError(FarmersServiceError):
    """Raised when batch does not exist."""
    pass


class InvalidBatchError(FarmersServiceError):
    """Raised when batch details break a batch invariant."""
    pass


class InvalidDocumentError(FarmersServiceError):
    """Raised when an upload has no usable file."""
    pass
