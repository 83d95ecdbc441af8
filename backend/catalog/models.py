import uuid
from decimal import Decimal

from django.db import models


def generate_product_id():
    return f"PROD-{uuid.uuid4()}"


class Product(models.Model):
    """Product master. `product_image` holds the stored filename of the uploaded photo."""
    PRODUCT_TYPE_CHOICES = [
        ('feed', 'Feed'),
        ('chemical', 'Chemical'),
        ('medicine', 'Medicine'),
        ('equipment', 'Equipment'),
        ('shrimp', 'Shrimp'),
        ('other', 'Other'),
    ]

    product_id = models.CharField(max_length=64, primary_key=True, default=generate_product_id, editable=False)
    product_name = models.CharField(max_length=200, db_index=True)
    product_type = models.CharField(max_length=20, choices=PRODUCT_TYPE_CHOICES, db_index=True)
    product_unit = models.CharField(max_length=50)
    product_quantity = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    threshold = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    product_image = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.product_name} ({self.product_id})"

    @property
    def is_low_stock(self):
        return self.threshold > 0 and self.product_quantity <= self.threshold

    class Meta:
        db_table = 'products'
