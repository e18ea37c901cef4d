from decimal import Decimal

from django import forms

from apps.farmers.models import Batch, KavaForm
from .models import Buyer


class BuyerForm(forms.Form):
    name = forms.CharField(max_length=200, label='Buyer/Company Name')
    country = forms.CharField(max_length=100)
    email = forms.EmailField(required=False, label='Email (optional)')


class BuyerRequestForm(forms.Form):
    buyer = forms.ModelChoiceField(
        queryset=Buyer.objects.all(),
        empty_label='Select buyer...'
    )
    destination = forms.CharField(max_length=100, label='Destination Country')
    form = forms.ChoiceField(label='Form Needed', choices=KavaForm.choices, initial=KavaForm.GREEN)
    cultivar = forms.CharField(max_length=100, required=False, label='Cultivar (optional)')
    min_kg = forms.DecimalField(
        label='Min kg',
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        widget=forms.NumberInput(attrs={'step': '0.1'})
    )
    max_kg = forms.DecimalField(
        label='Max kg',
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        widget=forms.NumberInput(attrs={'step': '0.1'})
    )

    def clean(self):
        cleaned_data = super().clean()
        min_kg = cleaned_data.get('min_kg')
        max_kg = cleaned_data.get('max_kg')
        if min_kg is not None and max_kg is not None and min_kg > max_kg:
            self.add_error('max_kg', 'Max kg must not be less than min kg')
        return cleaned_data


class OfferForm(forms.Form):
    """Offer form limited to batches of the form the buyer asked for."""

    batch = forms.ModelChoiceField(queryset=Batch.objects.none(), empty_label='Select batch...')
    quantity_kg = forms.DecimalField(
        label='Quantity (kg)',
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        widget=forms.NumberInput(attrs={'step': '0.1'})
    )
    price_per_kg = forms.DecimalField(
        label='Price per kg (optional)',
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=False
    )
    note = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}))

    def __init__(self, *args, buyer_request, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['batch'].queryset = (
            Batch.objects
            .filter(form=buyer_request.form)
            .select_related('farmer')
        )
