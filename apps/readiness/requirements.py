"""
Export document requirements per destination.

Every shipment needs the base documents; some destinations add their own
paperwork on top. Base items always come first and the order is part of the
contract, since it drives the checklist shown to exporters.

Example::

    >>> required_documents('nz')[-2:]
    ('Importer biosecurity / phytosanitary documents (as required)', 'Certificate of Origin (if requested)')
    >>> len(required_documents('FJ'))
    4
"""

from typing import Optional

from django.db import models


DEFAULT_DESTINATION = 'AU'


class Destination(models.TextChoices):
    AU = 'AU', 'Australia (AU)'
    NZ = 'NZ', 'New Zealand (NZ)'
    US = 'US', 'United States (US)'


BASE_DOCUMENTS = (
    'Commercial Invoice',
    'Packing List',
    'Lab Test Report (quality/safety)',
    'Traceability record (batch ID, cultivar, harvest date, weight)',
)

_BIOSECURITY_DOCUMENTS = (
    'Importer biosecurity / phytosanitary documents (as required)',
    'Certificate of Origin (if requested)',
)

DESTINATION_DOCUMENTS = {
    Destination.AU.value: _BIOSECURITY_DOCUMENTS,
    Destination.NZ.value: _BIOSECURITY_DOCUMENTS,
    Destination.US.value: (
        'Importer compliance docs (depends on product form)',
        'Certificate of Origin (if requested)',
    ),
}


def normalize_destination(destination: Optional[str]) -> str:
    """Uppercase a destination code, falling back to the default when blank."""
    code = (destination or '').strip().upper()
    return code or DEFAULT_DESTINATION


def required_documents(destination: Optional[str] = None) -> tuple[str, ...]:
    """
    Return the documents an exporter must prepare for a destination.

    Args:
        destination: Two-letter destination code, case-insensitive.
            Blank or missing means the default destination.

    Returns:
        The base documents followed by the destination's extra documents.
        Unknown codes get the base documents only.
    """
    code = normalize_destination(destination)
    return BASE_DOCUMENTS + DESTINATION_DOCUMENTS.get(code, ())
