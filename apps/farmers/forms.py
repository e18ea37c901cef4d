from decimal import Decimal

from django import forms

from .models import DocumentType, KavaForm, YesNo


class FarmerForm(forms.Form):
    name = forms.CharField(max_length=200)
    phone = forms.CharField(max_length=40, required=False, label='Phone (optional)')
    island = forms.CharField(max_length=100)
    village = forms.CharField(max_length=100)


class BatchForm(forms.Form):
    farmer = forms.CharField(max_length=16, widget=forms.HiddenInput)
    cultivar = forms.CharField(
        max_length=100,
        widget=forms.TextInput(attrs={'placeholder': 'e.g. Borogu'})
    )
    form = forms.ChoiceField(choices=KavaForm.choices, initial=KavaForm.GREEN)
    weight_kg = forms.DecimalField(
        label='Weight (kg)',
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        widget=forms.NumberInput(attrs={'step': '0.1'})
    )
    harvest_date = forms.DateField(widget=forms.DateInput(attrs={'type': 'date'}))
    gi = forms.ChoiceField(label='GI Claimed', choices=YesNo.choices, initial=YesNo.YES)
    lab = forms.ChoiceField(
        label='Lab Test Available?',
        choices=[(YesNo.NO, 'No'), (YesNo.YES, 'Yes')],
        initial=YesNo.NO
    )


class DocumentUploadForm(forms.Form):
    doc_type = forms.ChoiceField(
        label='Document Type',
        choices=DocumentType.choices,
        initial=DocumentType.LAB
    )
    file = forms.FileField(label='Choose File')
