"""Server-rendered pages for farmers, batches and batch documents."""

from django.http import Http404
from django.shortcuts import redirect, render

from .forms import BatchForm, DocumentUploadForm, FarmerForm
from .services import (
    BatchNotFoundError,
    FarmerNotFoundError,
    FarmersServiceError,
    attach_document,
    get_batch,
    get_farmer,
    list_batches,
    list_farmers,
    record_batch,
    register_farmer,
)


def farmer_list(request):
    return render(request, 'farmers/farmer_list.html', {
        'farmers': list_farmers(),
    })


def farmer_create(request):
    """Register farmer form; redirects to the farmer list once saved."""
    form = FarmerForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        try:
            register_farmer(**form.cleaned_data)
        except FarmersServiceError as e:
            form.add_error(None, str(e))
        else:
            return redirect('farmer-list')

    return render(request, 'farmers/farmer_form.html', {'form': form})


def farmer_batches(request, farmer_id):
    try:
        farmer = get_farmer(farmer_id=farmer_id)
    except FarmerNotFoundError as e:
        raise Http404(str(e))

    return render(request, 'farmers/batch_list.html', {
        'farmer': farmer,
        'batches': list_batches(farmer_id=farmer.id),
    })


def batch_create(request):
    """
    Add batch form for the farmer given in ``?farmer=``.

    On success the browser is sent to that farmer's batch list.
    """
    if request.method == 'POST':
        form = BatchForm(request.POST)
    else:
        form = BatchForm(initial={'farmer': request.GET.get('farmer', '')})

    if request.method == 'POST' and form.is_valid():
        data = form.cleaned_data
        try:
            batch = record_batch(
                farmer_id=data['farmer'],
                cultivar=data['cultivar'],
                form=data['form'],
                weight_kg=data['weight_kg'],
                harvest_date=data['harvest_date'],
                gi=data['gi'],
                lab=data['lab'],
            )
        except FarmersServiceError as e:
            form.add_error(None, str(e))
        else:
            return redirect('farmer-batches', farmer_id=batch.farmer_id)

    return render(request, 'farmers/batch_form.html', {
        'form': form,
        'farmer_id': form['farmer'].value(),
    })


def batch_documents(request, batch_id):
    """Documents of a batch, with the upload form."""
    try:
        batch = get_batch(batch_id=batch_id)
    except BatchNotFoundError as e:
        raise Http404(str(e))

    form = DocumentUploadForm(request.POST or None, request.FILES or None)

    if request.method == 'POST' and form.is_valid():
        try:
            attach_document(
                batch_id=batch.id,
                uploaded_file=form.cleaned_data['file'],
                doc_type=form.cleaned_data['doc_type'],
            )
        except FarmersServiceError as e:
            form.add_error(None, str(e))
        else:
            return redirect('batch-documents', batch_id=batch.id)

    return render(request, 'farmers/batch_documents.html', {
        'batch': batch,
        'documents': batch.documents.all(),
        'form': form,
    })
