# Generated manually for the marketplace app

from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion

import apps.records.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('farmers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Buyer',
            fields=[
                ('id', models.CharField(default=apps.records.ids.generate_record_id, editable=False, max_length=16, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('country', models.CharField(max_length=100)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'buyers',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='BuyerRequest',
            fields=[
                ('id', models.CharField(default=apps.records.ids.generate_record_id, editable=False, max_length=16, primary_key=True, serialize=False)),
                ('destination', models.CharField(max_length=100)),
                ('form', models.CharField(choices=[('green', 'Green'), ('dry', 'Dry'), ('powder', 'Powder')], max_length=10)),
                ('cultivar', models.CharField(blank=True, max_length=100)),
                ('min_kg', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.01'))])),
                ('max_kg', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.01'))])),
                ('status', models.CharField(choices=[('open', 'Open'), ('closed', 'Closed')], default='open', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('buyer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='requests', to='marketplace.buyer')),
            ],
            options={
                'db_table': 'buyer_requests',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'created_at'], name='requests_status_created_idx'),
                    models.Index(fields=['form'], name='requests_form_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Offer',
            fields=[
                ('id', models.CharField(default=apps.records.ids.generate_record_id, editable=False, max_length=16, primary_key=True, serialize=False)),
                ('quantity_kg', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.01'))])),
                ('price_per_kg', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('note', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('declined', 'Declined')], default='pending', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='offers', to='farmers.batch')),
                ('request', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='offers', to='marketplace.buyerrequest')),
            ],
            options={
                'db_table': 'offers',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['request', 'status'], name='offers_request_status_idx')],
            },
        ),
    ]
