"""Buyer request service."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from django.db import transaction
from django.db.models import Count, QuerySet

from apps.farmers.models import MAX_KG, KavaForm
from apps.marketplace.models import Buyer, BuyerRequest, RequestStatus
from .exceptions import BuyerNotFoundError, InvalidRequestError, RequestNotFoundError

logger = logging.getLogger(__name__)


def _quantity(value, field) -> Decimal:
    try:
        quantity = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidRequestError(f"{field} must be a number, got '{value}'")
    if not quantity.is_finite():
        raise InvalidRequestError(f"{field} must be a number, got '{value}'")
    if quantity > MAX_KG:
        raise InvalidRequestError(f"{field} must be at most {MAX_KG}")

    quantity = quantity.quantize(Decimal('0.01'))
    if quantity <= 0:
        raise InvalidRequestError(f"{field} must be at least 0.01")
    return quantity


@transaction.atomic
def post_request(
    *,
    buyer_id: str,
    destination: str,
    form: str,
    min_kg,
    max_kg,
    cultivar: str = ''
) -> BuyerRequest:
    """
    Post a buyer request to the marketplace.

    Args:
        buyer_id: Buyer posting the request
        destination: Destination country, as typed by the buyer
        form: Kava form needed ('green', 'dry', 'powder')
        min_kg: Minimum quantity in kilograms
        max_kg: Maximum quantity in kilograms
        cultivar: Preferred cultivar (optional)

    Returns:
        Created BuyerRequest, status 'open'

    Raises:
        BuyerNotFoundError: If buyer doesn't exist
        InvalidRequestError: If quantities or form are invalid
    """
    try:
        buyer = Buyer.objects.get(id=buyer_id)
    except Buyer.DoesNotExist:
        raise BuyerNotFoundError(f"Buyer {buyer_id} not found")

    destination = (destination or '').strip()
    if not destination:
        raise InvalidRequestError("Destination is required")

    form = (form or '').strip().lower()
    if form not in KavaForm.values:
        raise InvalidRequestError(f"Form must be one of {', '.join(KavaForm.values)}")

    min_quantity = _quantity(min_kg, 'Min kg')
    max_quantity = _quantity(max_kg, 'Max kg')
    if min_quantity > max_quantity:
        raise InvalidRequestError("Min kg cannot be greater than max kg")

    request = BuyerRequest.objects.create(
        buyer=buyer,
        destination=destination,
        form=form,
        cultivar=(cultivar or '').strip(),
        min_kg=min_quantity,
        max_kg=max_quantity,
    )
    logger.info("Buyer %s posted request %s", buyer.id, request.id)
    return request


def get_request(*, request_id: str) -> BuyerRequest:
    try:
        return BuyerRequest.objects.select_related('buyer').get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")


def list_requests(*, status: Optional[str] = None) -> QuerySet[BuyerRequest]:
    """Requests newest first, optionally only those in one status."""
    queryset = (
        BuyerRequest.objects
        .select_related('buyer')
        .annotate(offer_count=Count('offers'))
    )
    if status:
        queryset = queryset.filter(status=status)
    return queryset


@transaction.atomic
def close_request(*, request_id: str) -> BuyerRequest:
    """Stop a request from taking offers. Closing twice is a no-op."""
    try:
        request = BuyerRequest.objects.select_for_update().get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")

    if request.status != RequestStatus.CLOSED:
        request.status = RequestStatus.CLOSED
        request.save(update_fields=['status'])
        logger.info("Closed request %s", request.id)
    return request
