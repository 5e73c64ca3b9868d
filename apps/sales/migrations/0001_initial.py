import uuid
from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=60)),
                ('description', models.TextField(blank=True, default='')),
                ('category', models.CharField(choices=[
                    ('FASHION', 'Fashion'),
                    ('BEAUTY', 'Beauty'),
                    ('SPORTS', 'Sports'),
                    ('ELECTRONICS', 'Electronics'),
                    ('HOME_INTERIOR', 'Home interior'),
                    ('HOUSEHOLD_SUPPLIES', 'Household supplies'),
                    ('KITCHENWARE', 'Kitchenware'),
                ], max_length=50)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10, validators=[
                    django.core.validators.MinValueValidator(Decimal('0')),
                ])),
                ('stock', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'sales_product',
            },
        ),
    ]
