import uuid
from decimal import Decimal

from django.db import models
from django.utils import timezone
from backend.catalog.models import Product
from backend.employees.models import Employee


def generate_order_id():
    return f"ORD-{uuid.uuid4()}"


class Order(models.Model):
    """Purchase order raised by an employee"""
    STATUS_WAITING = 'waiting'
    STATUS_ACCEPT = 'accept'
    STATUS_REJECT = 'reject'
    STATUS_CHOICES = [
        (STATUS_WAITING, 'Waiting'),
        (STATUS_ACCEPT, 'Accepted'),
        (STATUS_REJECT, 'Rejected'),
    ]

    order_id = models.CharField(max_length=64, primary_key=True, default=generate_order_id, editable=False)
    order_date = models.DateField(default=timezone.localdate)
    order_status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_WAITING, db_index=True)
    employee = models.ForeignKey(
        Employee,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column='employee_id',
        related_name='orders',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.order_id

    @classmethod
    def normalize_status(cls, value):
        """Lower-cased status if it is a known one, else None"""
        if not isinstance(value, str):
            return None
        value = value.strip().lower()
        return value if value in dict(cls.STATUS_CHOICES) else None

    class Meta:
        db_table = 'orders'
        ordering = ['-order_date', '-created_at']


class OrderItem(models.Model):
    """Requested product line of an order"""
    order = models.ForeignKey(Order, on_delete=models.CASCADE, db_column='order_id', related_name='items')
    product = models.ForeignKey(Product, on_delete=models.CASCADE, db_column='product_id', related_name='order_items')
    request_quantity = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('1.00'))

    def __str__(self):
        return f"{self.order_id} - {self.product_id}"

    class Meta:
        db_table = 'order_items'
