# Generated manually for the farmers app

from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion

import apps.farmers.models
import apps.records.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Farmer',
            fields=[
                ('id', models.CharField(default=apps.records.ids.generate_record_id, editable=False, max_length=16, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('island', models.CharField(max_length=100)),
                ('village', models.CharField(max_length=100)),
                ('phone', models.CharField(blank=True, max_length=40)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'farmers',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['island', 'village'], name='farmers_island_village_idx')],
            },
        ),
        migrations.CreateModel(
            name='Batch',
            fields=[
                ('id', models.CharField(default=apps.records.ids.generate_record_id, editable=False, max_length=16, primary_key=True, serialize=False)),
                ('cultivar', models.CharField(max_length=100)),
                ('form', models.CharField(choices=[('green', 'Green'), ('dry', 'Dry'), ('powder', 'Powder')], default='green', max_length=10)),
                ('weight_kg', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.01'))])),
                ('harvest_date', models.DateField()),
                ('gi', models.CharField(choices=[('yes', 'Yes'), ('no', 'No')], default='yes', max_length=3, verbose_name='GI claimed')),
                ('lab', models.CharField(choices=[('yes', 'Yes'), ('no', 'No')], default='no', max_length=3, verbose_name='Lab test available')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('farmer', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='batches', to='farmers.farmer')),
            ],
            options={
                'db_table': 'batches',
                'verbose_name_plural': 'batches',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['farmer', 'created_at'], name='batches_farmer_created_idx'),
                    models.Index(fields=['form'], name='batches_form_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BatchDocument',
            fields=[
                ('id', models.CharField(default=apps.records.ids.generate_record_id, editable=False, max_length=16, primary_key=True, serialize=False)),
                ('doc_type', models.CharField(choices=[('lab', 'Lab Test'), ('invoice', 'Invoice'), ('packing', 'Packing List'), ('coo', 'Certificate of Origin'), ('other', 'Other')], default='other', max_length=10)),
                ('name', models.CharField(max_length=255)),
                ('file', models.FileField(max_length=255, upload_to=apps.farmers.models.batch_document_path)),
                ('uploaded_at', models.DateTimeField(auto_now_add=True)),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='farmers.batch')),
            ],
            options={
                'db_table': 'batch_documents',
                'ordering': ['uploaded_at'],
                'indexes': [models.Index(fields=['batch', 'uploaded_at'], name='batch_docs_batch_uploaded_idx')],
            },
        ),
    ]
