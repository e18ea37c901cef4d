"""Server-rendered export readiness page."""

from django.http import Http404
from django.shortcuts import render

from apps.farmers.services import FarmerNotFoundError
from .requirements import Destination
from .services import build_farmer_readiness


def farmer_readiness(request, farmer_id):
    """Checklist of every batch of a farmer for the chosen destination."""
    try:
        report = build_farmer_readiness(
            farmer_id=farmer_id,
            destination=request.GET.get('dest'),
        )
    except FarmerNotFoundError as e:
        raise Http404(str(e))

    return render(request, 'readiness/farmer_readiness.html', {
        'report': report,
        'farmer': report['farmer'],
        'destinations': Destination.choices,
    })
