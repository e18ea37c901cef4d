"""Server-rendered pages for buyers, buyer requests and offers."""

from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from apps.farmers.services import FarmersServiceError
from .forms import BuyerForm, BuyerRequestForm, OfferForm
from .services import (
    MarketplaceServiceError,
    OfferNotFoundError,
    OfferNotPendingError,
    RequestClosedError,
    RequestNotFoundError,
    accept_offer,
    close_request,
    find_matching_batches,
    get_offer,
    get_request,
    list_offers,
    list_requests,
    make_offer,
    post_request,
    register_buyer,
)


def buyer_create(request):
    """Register buyer form; a new buyer goes straight on to posting a request."""
    form = BuyerForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        try:
            register_buyer(**form.cleaned_data)
        except MarketplaceServiceError as e:
            form.add_error(None, str(e))
        else:
            return redirect('request-create')

    return render(request, 'marketplace/buyer_form.html', {'form': form})


def request_list(request):
    return render(request, 'marketplace/request_list.html', {
        'requests': list_requests(),
    })


def request_create(request):
    form = BuyerRequestForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        data = form.cleaned_data
        try:
            post_request(
                buyer_id=data['buyer'].pk,
                destination=data['destination'],
                form=data['form'],
                cultivar=data['cultivar'],
                min_kg=data['min_kg'],
                max_kg=data['max_kg'],
            )
        except MarketplaceServiceError as e:
            form.add_error(None, str(e))
        else:
            return redirect('request-list')

    return render(request, 'marketplace/request_form.html', {'form': form})


def request_detail(request, request_id):
    """A request with its offers, the matching batches and the offer form."""
    try:
        buyer_request = get_request(request_id=request_id)
    except RequestNotFoundError as e:
        raise Http404(str(e))

    form = OfferForm(request.POST or None, buyer_request=buyer_request)

    if request.method == 'POST' and form.is_valid():
        data = form.cleaned_data
        try:
            make_offer(
                request_id=buyer_request.id,
                batch_id=data['batch'].pk,
                quantity_kg=data['quantity_kg'],
                price_per_kg=data['price_per_kg'],
                note=data['note'],
            )
        except (MarketplaceServiceError, FarmersServiceError) as e:
            form.add_error(None, str(e))
        else:
            return redirect('request-detail', request_id=buyer_request.id)

    return render(request, 'marketplace/request_detail.html', {
        'buyer_request': buyer_request,
        'offers': list_offers(request_id=buyer_request.id),
        'matches': find_matching_batches(request_id=buyer_request.id),
        'form': form,
    })


@require_POST
def request_close(request, request_id):
    try:
        close_request(request_id=request_id)
    except RequestNotFoundError as e:
        raise Http404(str(e))
    return redirect('request-detail', request_id=request_id)


@require_POST
def offer_accept(request, request_id, offer_id):
    try:
        offer = get_offer(offer_id=offer_id)
    except OfferNotFoundError as e:
        raise Http404(str(e))
    if offer.request_id != request_id:
        raise Http404(f"Offer {offer_id} is not on request {request_id}")

    try:
        accept_offer(offer_id=offer.id)
    except (OfferNotPendingError, RequestClosedError):
        # Already decided or closed; the detail page shows the current status
        pass
    return redirect('request-detail', request_id=request_id)
