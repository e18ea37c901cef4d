"""Short record identifiers shared by every store."""

import secrets
import string


RECORD_ID_LENGTH = 8
RECORD_ID_ALPHABET = string.ascii_letters + string.digits + '_-'


def generate_record_id(length: int = RECORD_ID_LENGTH) -> str:
    """Return a random URL-safe identifier, e.g. ``'V1StGXR8'``."""
    return ''.join(secrets.choice(RECORD_ID_ALPHABET) for _ in range(length))
