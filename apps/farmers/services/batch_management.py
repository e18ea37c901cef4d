"""Batch recording service."""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Union

from django.db import transaction
from django.db.models import QuerySet
from django.utils.dateparse import parse_date

from ..models import MAX_KG, Batch, Farmer, KavaForm, YesNo
from .exceptions import BatchNotFoundError, FarmerNotFoundError, InvalidBatchError

logger = logging.getLogger(__name__)


def _parse_weight(weight_kg) -> Decimal:
    if isinstance(weight_kg, bool):
        raise InvalidBatchError("Weight must be a number")
    try:
        weight = Decimal(str(weight_kg).strip())
    except (InvalidOperation, ValueError):
        raise InvalidBatchError(f"Weight must be a number, got '{weight_kg}'")
    if not weight.is_finite():
        raise InvalidBatchError(f"Weight must be a number, got '{weight_kg}'")
    if weight > MAX_KG:
        raise InvalidBatchError(f"Weight must be at most {MAX_KG}kg")

    # Checked after rounding so what gets stored is positive
    weight = weight.quantize(Decimal('0.01'))
    if weight <= 0:
        raise InvalidBatchError("Weight must be at least 0.01kg")
    return weight


def _parse_harvest_date(harvest_date) -> date:
    if isinstance(harvest_date, date):
        return harvest_date
    try:
        parsed = parse_date(str(harvest_date or '').strip())
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidBatchError(f"Harvest date must be YYYY-MM-DD, got '{harvest_date}'")
    return parsed


def _choice(value, choices, field) -> str:
    normalized = str(value or '').strip().lower()
    if normalized not in choices.values:
        raise InvalidBatchError(
            f"{field} must be one of {', '.join(choices.values)}, got '{value}'"
        )
    return normalized


@transaction.atomic
def record_batch(
    *,
    farmer_id: str,
    cultivar: str,
    form: str,
    weight_kg: Union[Decimal, float, str],
    harvest_date: Union[date, str],
    gi: str = YesNo.YES,
    lab: str = YesNo.NO
) -> Batch:
    """
    Record a harvested batch for a farmer.

    Args:
        farmer_id: Owning farmer
        cultivar: Cultivar name, e.g. 'Borogu'
        form: 'green', 'dry' or 'powder'
        weight_kg: Weight in kilograms, must be positive
        harvest_date: Date or 'YYYY-MM-DD' string
        gi: Geographic indication claimed ('yes'/'no')
        lab: Lab test available ('yes'/'no')

    Returns:
        Created Batch instance

    Raises:
        FarmerNotFoundError: If farmer doesn't exist
        InvalidBatchError: If any field breaks a batch invariant
    """
    try:
        farmer = Farmer.objects.get(id=farmer_id)
    except Farmer.DoesNotExist:
        raise FarmerNotFoundError(f"Farmer {farmer_id} not found")

    cultivar = (cultivar or '').strip()
    if not cultivar:
        raise InvalidBatchError("Cultivar is required")

    try:
        batch = Batch.objects.create(
            farmer=farmer,
            cultivar=cultivar,
            form=_choice(form, KavaForm, 'Form'),
            weight_kg=_parse_weight(weight_kg),
            harvest_date=_parse_harvest_date(harvest_date),
            gi=_choice(gi, YesNo, 'GI claimed'),
            lab=_choice(lab, YesNo, 'Lab test available'),
        )
    except InvalidBatchError as e:
        logger.warning("Rejected batch for farmer %s: %s", farmer_id, e)
        raise

    logger.info("Recorded batch %s for farmer %s", batch.id, farmer.id)
    return batch


def get_batch(*, batch_id: str) -> Batch:
    """
    Get batch by ID, with farmer and documents loaded.

    Raises:
        BatchNotFoundError: If batch doesn't exist
    """
    try:
        return (
            Batch.objects
            .select_related('farmer')
            .prefetch_related('documents')
            .get(id=batch_id)
        )
    except Batch.DoesNotExist:
        raise BatchNotFoundError(f"Batch {batch_id} not found")


def list_batches(*, farmer_id: str) -> QuerySet[Batch]:
    """Batches of one farmer in recording order."""
    return (
        Batch.objects
        .filter(farmer_id=farmer_id)
        .prefetch_related('documents')
    )
