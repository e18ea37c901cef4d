from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'marketplace'

router = DefaultRouter()
router.register(r'buyers', views.BuyerViewSet, basename='buyer')
router.register(r'requests', views.BuyerRequestViewSet, basename='request')
router.register(r'offers', views.OfferViewSet, basename='offer')

urlpatterns = [
    # Buyer routes
    # GET    /api/marketplace/buyers/                 - List buyers
    # POST   /api/marketplace/buyers/                 - Register buyer
    # GET    /api/marketplace/buyers/{id}/            - Get buyer

    # Request routes
    # GET    /api/marketplace/requests/               - List requests (?status=)
    # POST   /api/marketplace/requests/               - Post request
    # GET    /api/marketplace/requests/{id}/          - Get request
    # GET    /api/marketplace/requests/{id}/matches/  - Matching batches
    # POST   /api/marketplace/requests/{id}/close/    - Close request

    # Offer routes
    # GET    /api/marketplace/offers/                 - List offers (?request=, ?status=)
    # POST   /api/marketplace/offers/                 - Make offer
    # GET    /api/marketplace/offers/{id}/            - Get offer
    # POST   /api/marketplace/offers/{id}/accept/     - Accept offer

    # Include router URLs
    path('', include(router.urls)),
]
