from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

from apps.farmers.models import KavaForm
from apps.records.ids import generate_record_id


class RequestStatus(models.TextChoices):
    OPEN = 'open', 'Open'
    CLOSED = 'closed', 'Closed'


class OfferStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    DECLINED = 'declined', 'Declined'


class Buyer(models.Model):
    """Importer or company looking to buy kava."""

    id = models.CharField(primary_key=True, max_length=16, default=generate_record_id, editable=False)
    name = models.CharField(max_length=200)
    country = models.CharField(max_length=100)
    email = models.EmailField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'buyers'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.country})"


class BuyerRequest(models.Model):
    """A buyer's posted demand for a form/quantity of kava."""

    id = models.CharField(primary_key=True, max_length=16, default=generate_record_id, editable=False)
    buyer = models.ForeignKey(Buyer, on_delete=models.CASCADE, related_name='requests')
    destination = models.CharField(max_length=100)
    form = models.CharField(max_length=10, choices=KavaForm.choices)
    cultivar = models.CharField(max_length=100, blank=True)
    min_kg = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    max_kg = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    status = models.CharField(max_length=10, choices=RequestStatus.choices, default=RequestStatus.OPEN)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'buyer_requests'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='requests_status_created_idx'),
            models.Index(fields=['form'], name='requests_form_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Request {self.id} - {self.form} {self.min_kg}-{self.max_kg}kg ({self.status})"

    @property
    def is_open(self):
        return self.status == RequestStatus.OPEN


class Offer(models.Model):
    """A farmer's batch offered against a buyer request."""

    id = models.CharField(primary_key=True, max_length=16, default=generate_record_id, editable=False)
    request = models.ForeignKey(BuyerRequest, on_delete=models.CASCADE, related_name='offers')
    batch = models.ForeignKey('farmers.Batch', on_delete=models.CASCADE, related_name='offers')
    quantity_kg = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    price_per_kg = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    note = models.TextField(blank=True)
    status = models.CharField(max_length=10, choices=OfferStatus.choices, default=OfferStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'offers'
        indexes = [
            models.Index(fields=['request', 'status'], name='offers_request_status_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"Offer {self.id} - {self.quantity_kg}kg on {self.request_id} ({self.status})"
