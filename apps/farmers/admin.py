# ==========================================
# apps/farmers/admin.py
# ==========================================

from django.contrib import admin
from django.db.models import Count
from django.utils.html import format_html

from apps.readiness.evaluator import evaluate_readiness
from .models import Farmer, Batch, BatchDocument


class BatchInline(admin.TabularInline):
    """Inline admin for batches within a farmer."""
    model = Batch
    extra = 0
    fields = ['id', 'cultivar', 'form', 'weight_kg', 'harvest_date', 'gi', 'lab']
    readonly_fields = ['id']
    show_change_link = True


class BatchDocumentInline(admin.TabularInline):
    """Inline admin for documents within a batch."""
    model = BatchDocument
    extra = 0
    fields = ['id', 'doc_type', 'name', 'file', 'uploaded_at']
    readonly_fields = ['id', 'uploaded_at']


@admin.register(Farmer)
class FarmerAdmin(admin.ModelAdmin):
    list_display = ['name', 'island', 'village', 'phone', 'get_batch_count', 'created_at']
    list_filter = ['island']
    search_fields = ['id', 'name', 'island', 'village', 'phone']
    readonly_fields = ['id', 'created_at']
    inlines = [BatchInline]

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.annotate(batch_count=Count('batches'))

    def get_batch_count(self, obj):
        return obj.batch_count
    get_batch_count.short_description = 'Batches'
    get_batch_count.admin_order_field = 'batch_count'


@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    """
    Admin interface for kava batches.

    Shows the export readiness verdict next to each batch so staff can spot
    batches that still need a lab test or paperwork.
    """

    list_display = [
        'id',
        'cultivar',
        'farmer',
        'form',
        'weight_kg',
        'harvest_date',
        'gi',
        'lab',
        'readiness_badge',
    ]
    list_filter = ['form', 'gi', 'lab', 'harvest_date']
    search_fields = ['id', 'cultivar', 'farmer__name', 'farmer__village']
    readonly_fields = ['id', 'created_at']
    date_hierarchy = 'harvest_date'
    inlines = [BatchDocumentInline]

    fieldsets = (
        ('Batch', {
            'fields': ('id', 'farmer', 'cultivar', 'form', 'weight_kg', 'harvest_date')
        }),
        ('Claims', {
            'fields': ('gi', 'lab')
        }),
        ('Metadata', {
            'fields': ('created_at',),
            'classes': ('collapse',),
        }),
    )

    def readiness_badge(self, obj):
        """Display export readiness as colored badge."""
        result = evaluate_readiness(obj)
        if result.overall:
            bg, fg, text = '#b8e2c3', '#1d5e2c', 'READY'
        else:
            bg, fg, text = '#ffe0a3', '#6b4a00', f'NOT READY ({len(result.failed)})'
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, text
        )
    readiness_badge.short_description = 'Readiness'

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('farmer')


@admin.register(BatchDocument)
class BatchDocumentAdmin(admin.ModelAdmin):
    list_display = ['name', 'doc_type', 'batch', 'uploaded_at']
    list_filter = ['doc_type', 'uploaded_at']
    search_fields = ['name', 'batch__id', 'batch__cultivar']
    readonly_fields = ['id', 'uploaded_at']
