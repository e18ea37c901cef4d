# ==========================================
# apps/farmers/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

from apps.records.ids import generate_record_id


# Largest kilogram value a max_digits=10, decimal_places=2 column holds
MAX_KG = Decimal('99999999.99')


class KavaForm(models.TextChoices):
    GREEN = 'green', 'Green'
    DRY = 'dry', 'Dry'
    POWDER = 'powder', 'Powder'


class YesNo(models.TextChoices):
    YES = 'yes', 'Yes'
    NO = 'no', 'No'


class DocumentType(models.TextChoices):
    LAB = 'lab', 'Lab Test'
    INVOICE = 'invoice', 'Invoice'
    PACKING = 'packing', 'Packing List'
    COO = 'coo', 'Certificate of Origin'
    OTHER = 'other', 'Other'


def batch_document_path(instance, filename):
    """Upload location for batch documents: uploads/<millis>_<safe name>."""
    from .services.document_management import stored_filename
    return f'uploads/{stored_filename(filename)}'


class Farmer(models.Model):
    """Registered kava farmer."""

    id = models.CharField(primary_key=True, max_length=16, default=generate_record_id, editable=False)
    name = models.CharField(max_length=200)
    island = models.CharField(max_length=100)
    village = models.CharField(max_length=100)
    phone = models.CharField(max_length=40, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'farmers'
        indexes = [
            models.Index(fields=['island', 'village'], name='farmers_island_village_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} ({self.village}, {self.island})"


class Batch(models.Model):
    """One harvested lot of kava submitted by a farmer."""

    id = models.CharField(primary_key=True, max_length=16, default=generate_record_id, editable=False)
    farmer = models.ForeignKey(Farmer, on_delete=models.PROTECT, related_name='batches')
    cultivar = models.CharField(max_length=100)
    form = models.CharField(max_length=10, choices=KavaForm.choices, default=KavaForm.GREEN)
    weight_kg = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    harvest_date = models.DateField()
    gi = models.CharField('GI claimed', max_length=3, choices=YesNo.choices, default=YesNo.YES)
    lab = models.CharField('Lab test available', max_length=3, choices=YesNo.choices, default=YesNo.NO)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'batches'
        verbose_name_plural = 'batches'
        indexes = [
            models.Index(fields=['farmer', 'created_at'], name='batches_farmer_created_idx'),
            models.Index(fields=['form'], name='batches_form_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.cultivar} {self.get_form_display()} {self.weight_kg}kg ({self.id})"


class BatchDocument(models.Model):
    """File uploaded against a batch (lab report, invoice, ...)."""

    id = models.CharField(primary_key=True, max_length=16, default=generate_record_id, editable=False)
    batch = models.ForeignKey(Batch, on_delete=models.CASCADE, related_name='documents')
    doc_type = models.CharField(max_length=10, choices=DocumentType.choices, default=DocumentType.OTHER)
    name = models.CharField(max_length=255)
    file = models.FileField(upload_to=batch_document_path, max_length=255)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'batch_documents'
        indexes = [
            models.Index(fields=['batch', 'uploaded_at'], name='batch_docs_batch_uploaded_idx'),
        ]
        ordering = ['uploaded_at']

    def __str__(self):
        return f"{self.name} ({self.doc_type})"

    @property
    def url(self):
        return self.file.url if self.file else ''
