"""Services for farmers business logic."""

from .exceptions import (
    FarmersServiceError,
    FarmerNotFoundError,
    InvalidFarmerError,
    BatchNotFoundError,
    InvalidBatchError,
    InvalidDocumentError,
)
from .farmer_management import (
    register_farmer,
    get_farmer,
    list_farmers,
)
from .batch_management import (
    record_batch,
    get_batch,
    list_batches,
)
from .document_management import (
    sanitize_filename,
    stored_filename,
    attach_document,
)

__all__ = [
    # Exceptions
    'FarmersServiceError',
    'FarmerNotFoundError',
    'InvalidFarmerError',
    'BatchNotFoundError',
    'InvalidBatchError',
    'InvalidDocumentError',
    # Farmer Management
    'register_farmer',
    'get_farmer',
    'list_farmers',
    # Batch Management
    'record_batch',
    'get_batch',
    'list_batches',
    # Document Management
    'sanitize_filename',
    'stored_filename',
    'attach_document',
]
