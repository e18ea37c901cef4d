"""
URL configuration for config project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.farmers import pages as farmer_pages
from apps.marketplace import pages as marketplace_pages
from apps.readiness import pages as readiness_pages
from config.views import home, health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    path('api/readiness/', include('apps.readiness.urls')),
    path('api/marketplace/', include('apps.marketplace.urls')),
    path('api/', include('apps.farmers.urls')),

    # Pages
    path('', home, name='home'),
    path('farmers/', farmer_pages.farmer_list, name='farmer-list'),
    path('farmers/new/', farmer_pages.farmer_create, name='farmer-create'),
    path('farmers/<str:farmer_id>/batches/', farmer_pages.farmer_batches, name='farmer-batches'),
    path('batches/new/', farmer_pages.batch_create, name='batch-create'),
    path('batches/<str:batch_id>/docs/', farmer_pages.batch_documents, name='batch-documents'),
    path('readiness/<str:farmer_id>/', readiness_pages.farmer_readiness, name='farmer-readiness'),
    path('buyers/new/', marketplace_pages.buyer_create, name='buyer-create'),
    path('requests/', marketplace_pages.request_list, name='request-list'),
    path('requests/new/', marketplace_pages.request_create, name='request-create'),
    path('requests/<str:request_id>/', marketplace_pages.request_detail, name='request-detail'),
    path('requests/<str:request_id>/close/', marketplace_pages.request_close, name='request-close'),
    path(
        'requests/<str:request_id>/offers/<str:offer_id>/accept/',
        marketplace_pages.offer_accept,
        name='offer-accept'
    ),
]

# Media files (development only)
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
