"""Farmer registration service."""

import logging

from django.db import transaction
from django.db.models import Count, QuerySet

from ..models import Farmer
from .exceptions import FarmerNotFoundError, InvalidFarmerError

logger = logging.getLogger(__name__)


@transaction.atomic
def register_farmer(
    *,
    name: str,
    island: str,
    village: str,
    phone: str = ''
) -> Farmer:
    """
    Register a new farmer.

    Args:
        name: Farmer name
        island: Island the farm is on
        village: Village the farm is in
        phone: Contact number (optional)

    Returns:
        Created Farmer instance

    Raises:
        InvalidFarmerError: If name, island or village is blank
    """
    values = {
        'name': (name or '').strip(),
        'island': (island or '').strip(),
        'village': (village or '').strip(),
    }
    missing = [field for field, value in values.items() if not value]
    if missing:
        logger.warning("Rejected farmer registration, missing %s", ', '.join(missing))
        raise InvalidFarmerError(f"Missing required fields: {', '.join(missing)}")

    farmer = Farmer.objects.create(phone=(phone or '').strip(), **values)
    logger.info("Registered farmer %s (%s)", farmer.id, farmer.name)
    return farmer


def get_farmer(*, farmer_id: str) -> Farmer:
    """
    Get farmer by ID.

    Raises:
        FarmerNotFoundError: If farmer doesn't exist
    """
    try:
        return Farmer.objects.get(id=farmer_id)
    except Farmer.DoesNotExist:
        raise FarmerNotFoundError(f"Farmer {farmer_id} not found")


def list_farmers() -> QuerySet[Farmer]:
    """All farmers with their batch count, oldest registration first."""
    return Farmer.objects.annotate(batch_count=Count('batches'))
