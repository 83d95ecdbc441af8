from decimal import Decimal
import backend.catalog.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('product_id', models.CharField(default=backend.catalog.models.generate_product_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('product_name', models.CharField(db_index=True, max_length=200)),
                ('product_type', models.CharField(choices=[('feed', 'Feed'), ('chemical', 'Chemical'), ('medicine', 'Medicine'), ('equipment', 'Equipment'), ('shrimp', 'Shrimp'), ('other', 'Other')], db_index=True, max_length=20)),
                ('product_unit', models.CharField(max_length=50)),
                ('product_quantity', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('threshold', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('product_image', models.CharField(blank=True, max_length=255, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'products',
            },
        ),
    ]
