from django.urls import path
from . import views

app_name = 'readiness'

urlpatterns = [
    # Per-farmer and per-batch readiness live on the farmer/batch routes:
    # GET    /api/farmers/{id}/readiness/?dest=   - Readiness of every batch
    # GET    /api/batches/{id}/readiness/?dest=   - Readiness of one batch

    # GET    /api/readiness/required-documents/?dest= - Required documents
    path('required-documents/', views.required_documents_view, name='required-documents'),
]
