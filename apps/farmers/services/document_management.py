"""Batch document upload service."""

import logging
import re
import time

from django.db import transaction

from ..models import Batch, BatchDocument, DocumentType
from .exceptions import BatchNotFoundError, InvalidDocumentError

logger = logging.getLogger(__name__)


UNSAFE_FILENAME_CHARS = re.compile(r'[^a-zA-Z0-9._-]')


def sanitize_filename(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9._-]`` with ``_``."""
    return UNSAFE_FILENAME_CHARS.sub('_', name or '')


def stored_filename(name: str) -> str:
    """
    Name a file is stored under: ``<epoch millis>_<sanitized name>``.

    Example:
        >>> stored_filename('lab report (May).pdf')  # doctest: +SKIP
        '1714521600000_lab_report__May_.pdf'
    """
    return f"{int(time.time() * 1000)}_{sanitize_filename(name)}"


@transaction.atomic
def attach_document(
    *,
    batch_id: str,
    uploaded_file,
    doc_type: str = DocumentType.OTHER
) -> BatchDocument:
    """
    Store an uploaded file and attach it to a batch.

    Args:
        batch_id: Batch the document belongs to
        uploaded_file: Django ``UploadedFile`` from the request
        doc_type: One of the ``DocumentType`` values; anything else is
            stored as 'other'

    Returns:
        Created BatchDocument instance

    Raises:
        BatchNotFoundError: If batch doesn't exist
        InvalidDocumentError: If no file was uploaded
    """
    try:
        batch = Batch.objects.get(id=batch_id)
    except Batch.DoesNotExist:
        raise BatchNotFoundError(f"Batch {batch_id} not found")

    if uploaded_file is None or not getattr(uploaded_file, 'name', ''):
        raise InvalidDocumentError("Choose a file to upload")

    if doc_type not in DocumentType.values:
        doc_type = DocumentType.OTHER

    document = BatchDocument(
        batch=batch,
        doc_type=doc_type,
        name=uploaded_file.name,
    )
    document.file.save(uploaded_file.name, uploaded_file, save=False)
    document.save()

    logger.info(
        "Attached %s document %s (%s) to batch %s",
        doc_type, document.id, document.file.name, batch.id
    )
    return document
