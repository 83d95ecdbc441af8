from decimal import Decimal
import backend.inventory.models
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProductLot',
            fields=[
                ('lot_id', models.CharField(default=backend.inventory.models.generate_lot_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('lot_date', models.DateField(default=django.utils.timezone.localdate)),
                ('lot_exp', models.DateField(blank=True, null=True)),
                ('lot_quantity', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('product', models.ForeignKey(db_column='product_id', db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='lots', to='catalog.product')),
            ],
            options={
                'db_table': 'product_lots',
            },
        ),
    ]
