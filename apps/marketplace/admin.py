# ==========================================
# apps/marketplace/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html

from .models import Buyer, BuyerRequest, Offer, OfferStatus, RequestStatus


STATUS_COLORS = {
    RequestStatus.OPEN: ('#b8e2c3', '#1d5e2c'),
    RequestStatus.CLOSED: ('#e6e8ef', '#555'),
    OfferStatus.PENDING: ('#ffe0a3', '#6b4a00'),
    OfferStatus.ACCEPTED: ('#b8e2c3', '#1d5e2c'),
    OfferStatus.DECLINED: ('#ffb3b3', '#7a1f1f'),
}


def _status_badge(obj):
    bg, fg = STATUS_COLORS.get(obj.status, ('#ccc', '#666'))
    return format_html(
        '<span style="background: {}; color: {}; padding: 3px 8px; '
        'border-radius: 10px; font-size: 11px;">{}</span>',
        bg, fg, obj.get_status_display()
    )


class OfferInline(admin.TabularInline):
    """Inline admin for offers within a request."""
    model = Offer
    extra = 0
    fields = ['batch', 'quantity_kg', 'price_per_kg', 'status_badge', 'created_at']
    readonly_fields = ['status_badge', 'created_at']

    def status_badge(self, obj):
        return _status_badge(obj)
    status_badge.short_description = 'Status'

    def has_add_permission(self, request, obj=None):
        """Offers are made through the marketplace, not the admin."""
        return False


@admin.register(Buyer)
class BuyerAdmin(admin.ModelAdmin):
    list_display = ['name', 'country', 'email', 'created_at']
    list_filter = ['country']
    search_fields = ['id', 'name', 'country', 'email']
    readonly_fields = ['id', 'created_at']


@admin.register(BuyerRequest)
class BuyerRequestAdmin(admin.ModelAdmin):
    list_display = [
        'id',
        'buyer',
        'destination',
        'form',
        'cultivar',
        'min_kg',
        'max_kg',
        'status_badge',
        'created_at',
    ]
    list_filter = ['status', 'form', 'destination']
    search_fields = ['id', 'buyer__name', 'destination', 'cultivar']
    readonly_fields = ['id', 'created_at']
    inlines = [OfferInline]

    def status_badge(self, obj):
        """Display request status as colored badge."""
        return _status_badge(obj)
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    actions = ['close_requests']

    @admin.action(description='Close selected requests')
    def close_requests(self, request, queryset):
        updated = queryset.filter(status=RequestStatus.OPEN).update(status=RequestStatus.CLOSED)
        self.message_user(request, f'Closed {updated} request(s).')

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('buyer')


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ['id', 'request', 'batch', 'quantity_kg', 'price_per_kg', 'status_badge', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['id', 'request__id', 'batch__id', 'batch__farmer__name']
    readonly_fields = ['id', 'created_at']

    def status_badge(self, obj):
        """Display offer status as colored badge."""
        return _status_badge(obj)
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('request', 'batch', 'batch__farmer')
