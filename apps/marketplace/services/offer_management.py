"""Offer service - farmers offering batches against buyer requests."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.farmers.models import MAX_KG, Batch
from apps.farmers.services import BatchNotFoundError
from apps.marketplace.models import BuyerRequest, Offer, OfferStatus, RequestStatus
from .exceptions import (
    InvalidOfferError,
    OfferNotFoundError,
    OfferNotPendingError,
    RequestClosedError,
    RequestNotFoundError,
)

logger = logging.getLogger(__name__)


def _amount(value, field) -> Decimal:
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidOfferError(f"{field} must be a number, got '{value}'")
    if not amount.is_finite():
        raise InvalidOfferError(f"{field} must be a number, got '{value}'")
    if amount > MAX_KG:
        raise InvalidOfferError(f"{field} must be at most {MAX_KG}")

    amount = amount.quantize(Decimal('0.01'))
    if amount <= 0:
        raise InvalidOfferError(f"{field} must be at least 0.01")
    return amount


@transaction.atomic
def make_offer(
    *,
    request_id: str,
    batch_id: str,
    quantity_kg,
    price_per_kg=None,
    note: str = ''
) -> Offer:
    """
    Offer (part of) a batch against an open buyer request.

    Args:
        request_id: Buyer request being answered
        batch_id: Batch being offered
        quantity_kg: Kilograms offered; positive and at most the batch weight
        price_per_kg: Asking price per kilogram (optional)
        note: Free text for the buyer

    Returns:
        Created Offer, status 'pending'

    Raises:
        RequestNotFoundError: If request doesn't exist
        BatchNotFoundError: If batch doesn't exist
        RequestClosedError: If request is not open
        InvalidOfferError: If quantity or price is invalid
    """
    try:
        request = BuyerRequest.objects.select_for_update().get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")

    try:
        batch = Batch.objects.get(id=batch_id)
    except Batch.DoesNotExist:
        raise BatchNotFoundError(f"Batch {batch_id} not found")

    if request.status != RequestStatus.OPEN:
        raise RequestClosedError(f"Request {request.id} is no longer open")

    quantity = _amount(quantity_kg, 'Quantity')
    if quantity > batch.weight_kg:
        raise InvalidOfferError(
            f"Quantity {quantity}kg exceeds batch weight {batch.weight_kg}kg"
        )

    price = None
    if price_per_kg not in (None, ''):
        price = _amount(price_per_kg, 'Price per kg')

    offer = Offer.objects.create(
        request=request,
        batch=batch,
        quantity_kg=quantity,
        price_per_kg=price,
        note=(note or '').strip(),
    )
    logger.info("Batch %s offered on request %s as offer %s", batch.id, request.id, offer.id)
    return offer


@transaction.atomic
def accept_offer(*, offer_id: str) -> Offer:
    """
    Accept an offer and close its request.

    Every other pending offer on the same request is declined.

    Raises:
        OfferNotFoundError: If offer doesn't exist
        OfferNotPendingError: If offer was already accepted or declined
        RequestClosedError: If the request was closed without accepting an offer
    """
    try:
        offer = Offer.objects.select_for_update().select_related('request').get(id=offer_id)
    except Offer.DoesNotExist:
        raise OfferNotFoundError(f"Offer {offer_id} not found")

    if offer.status != OfferStatus.PENDING:
        raise OfferNotPendingError(f"Offer {offer.id} is already {offer.status}")

    request = BuyerRequest.objects.select_for_update().get(id=offer.request_id)
    if request.status != RequestStatus.OPEN:
        raise RequestClosedError(f"Request {request.id} is no longer open")

    offer.status = OfferStatus.ACCEPTED
    offer.save(update_fields=['status'])

    declined = (
        Offer.objects
        .filter(request=request, status=OfferStatus.PENDING)
        .exclude(id=offer.id)
        .update(status=OfferStatus.DECLINED)
    )

    request.status = RequestStatus.CLOSED
    request.save(update_fields=['status'])

    logger.info(
        "Accepted offer %s on request %s, declined %d other offer(s)",
        offer.id, request.id, declined
    )
    offer.request = request
    return offer


def get_offer(*, offer_id: str) -> Offer:
    try:
        return Offer.objects.select_related('request', 'batch', 'batch__farmer').get(id=offer_id)
    except Offer.DoesNotExist:
        raise OfferNotFoundError(f"Offer {offer_id} not found")


def list_offers(*, request_id: Optional[str] = None) -> QuerySet[Offer]:
    queryset = Offer.objects.select_related('request', 'batch', 'batch__farmer')
    if request_id:
        queryset = queryset.filter(request_id=request_id)
    return queryset
