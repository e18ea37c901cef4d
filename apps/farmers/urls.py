from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'farmers'

router = DefaultRouter()
router.register(r'farmers', views.FarmerViewSet, basename='farmer')
router.register(r'batches', views.BatchViewSet, basename='batch')

urlpatterns = [
    # Farmer ViewSet routes
    # GET    /api/farmers/                  - List farmers
    # POST   /api/farmers/                  - Register farmer
    # GET    /api/farmers/{id}/             - Get farmer
    # GET    /api/farmers/{id}/batches/     - Batches of a farmer
    # GET    /api/farmers/{id}/readiness/   - Readiness of every batch (?dest=)

    # Batch ViewSet routes
    # GET    /api/batches/                  - List batches (?farmer=, ?form=)
    # POST   /api/batches/                  - Record batch
    # GET    /api/batches/{id}/             - Get batch with documents
    # GET    /api/batches/{id}/readiness/   - Readiness of one batch (?dest=)
    # GET    /api/batches/{id}/documents/   - List documents
    # POST   /api/batches/{id}/documents/   - Upload document (multipart)

    # Include router URLs
    path('', include(router.urls)),
]
