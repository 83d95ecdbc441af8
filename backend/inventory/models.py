import uuid
from decimal import Decimal

from django.db import models
from django.utils import timezone
from backend.catalog.models import Product


def generate_lot_id():
    return f"LOT-{uuid.uuid4()}"


class ProductLot(models.Model):
    """Dated batch of a product with its own quantity and expiry.

    The product reference carries no database constraint: a lot may point at a
    product id that does not exist, in which case lot-detail lookups miss it.
    """
    lot_id = models.CharField(max_length=64, primary_key=True, default=generate_lot_id, editable=False)
    product = models.ForeignKey(
        Product,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        db_column='product_id',
        related_name='lots',
    )
    lot_date = models.DateField(default=timezone.localdate)
    lot_exp = models.DateField(null=True, blank=True)
    lot_quantity = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.lot_id

    class Meta:
        db_table = 'product_lots'
