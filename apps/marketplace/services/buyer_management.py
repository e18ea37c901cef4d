"""Buyer registration service."""

import logging

from django.db import transaction
from django.db.models import QuerySet

from apps.marketplace.models import Buyer
from .exceptions import BuyerNotFoundError, InvalidBuyerError

logger = logging.getLogger(__name__)


@transaction.atomic
def register_buyer(*, name: str, country: str, email: str = '') -> Buyer:
    """
    Register a buyer.

    Raises:
        InvalidBuyerError: If name or country is blank
    """
    name = (name or '').strip()
    country = (country or '').strip()
    if not name or not country:
        logger.warning("Rejected buyer registration, name or country missing")
        raise InvalidBuyerError("Buyer name and country are required")

    buyer = Buyer.objects.create(name=name, country=country, email=(email or '').strip())
    logger.info("Registered buyer %s (%s, %s)", buyer.id, buyer.name, buyer.country)
    return buyer


def get_buyer(*, buyer_id: str) -> Buyer:
    try:
        return Buyer.objects.get(id=buyer_id)
    except Buyer.DoesNotExist:
        raise BuyerNotFoundError(f"Buyer {buyer_id} not found")


def list_buyers() -> QuerySet[Buyer]:
    return Buyer.objects.all()
