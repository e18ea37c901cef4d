"""Find batches that could fill a buyer request, using fuzzy cultivar matching."""

import re
from typing import List, Tuple

from fuzzywuzzy import fuzz

from apps.farmers.models import Batch
from apps.marketplace.models import BuyerRequest
from .exceptions import RequestNotFoundError


# Thresholds for fuzzy matching
EXACT_MATCH_THRESHOLD = 100
CULTIVAR_MATCH_THRESHOLD = 80

MAX_MATCHES = 20


def normalize_cultivar(text: str) -> str:
    """
    Normalize a cultivar name for comparison.

    >>> normalize_cultivar('  Boro-gu!  ')
    'boro-gu'
    """
    text = (text or '').lower().strip()
    text = re.sub(r'\s+', ' ', text)
    text = re.sub(r'[^\w\s-]', '', text)
    return text


def find_matching_batches(
    *,
    request_id: str,
    threshold: int = CULTIVAR_MATCH_THRESHOLD
) -> List[Tuple[Batch, int]]:
    """
    Batches that could be offered on a request.

    A batch qualifies when its form is the requested form and it weighs at
    least the request minimum. If the request names a cultivar, batches are
    scored by cultivar similarity and those under ``threshold`` are dropped;
    otherwise every qualifying batch scores 100.

    Args:
        request_id: Buyer request to match
        threshold: Minimum cultivar similarity score (0-100)

    Returns:
        List of (batch, score) tuples, best match first

    Raises:
        RequestNotFoundError: If request doesn't exist
    """
    try:
        request = BuyerRequest.objects.get(id=request_id)
    except BuyerRequest.DoesNotExist:
        raise RequestNotFoundError(f"Request {request_id} not found")

    batches = (
        Batch.objects
        .filter(form=request.form, weight_kg__gte=request.min_kg)
        .select_related('farmer')
    )

    wanted = normalize_cultivar(request.cultivar)
    if not wanted:
        return [(batch, EXACT_MATCH_THRESHOLD) for batch in batches[:MAX_MATCHES]]

    candidates = []
    for batch in batches:
        score = fuzz.ratio(wanted, normalize_cultivar(batch.cultivar))
        if score >= threshold:
            candidates.append((batch, score))

    # Sort by similarity score (descending)
    candidates.sort(key=lambda x: x[1], reverse=True)

    return candidates[:MAX_MATCHES]
