"""
Test utilities and factories for creating test data
"""
import random
import shutil
import string
import tempfile
from decimal import Decimal
from pathlib import Path

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.utils import timezone
from rest_framework.test import APIClient

from backend.catalog.models import Product
from backend.employees.models import Employee
from backend.inventory.models import ProductLot
from backend.orders.models import Order, OrderItem

# Smallest valid GIF, enough to stand in for a product photo
TINY_GIF = (
    b'GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00'
    b',\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;'
)


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=10):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def image_upload(name='photo.gif', content=TINY_GIF, content_type='image/gif'):
        """An in-memory uploaded file"""
        return SimpleUploadedFile(name, content, content_type=content_type)

    @staticmethod
    def create_product(name=None, product_type='feed', unit='kg', quantity=None, threshold=None, image=None):
        """Create a test product"""
        if not name:
            name = f'Product_{TestDataFactory.random_string(6)}'
        return Product.objects.create(
            product_name=name,
            product_type=product_type,
            product_unit=unit,
            product_quantity=Decimal('100.00') if quantity is None else quantity,
            threshold=Decimal('10.00') if threshold is None else threshold,
            product_image=image,
        )

    @staticmethod
    def create_lot(product=None, product_id=None, quantity=None, lot_date=None, lot_exp=None):
        """Create a test lot. Pass `product_id` alone to point the lot at a product that may not exist."""
        if product is None and product_id is None:
            product = TestDataFactory.create_product()
        if lot_date is None:
            lot_date = timezone.localdate()
        return ProductLot.objects.create(
            product_id=product.product_id if product is not None else product_id,
            lot_date=lot_date,
            lot_exp=lot_exp,
            lot_quantity=Decimal('25.00') if quantity is None else quantity,
        )

    @staticmethod
    def create_employee(fname=None, lname=None, role='clerical', image=None):
        """Create a test employee"""
        return Employee.objects.create(
            employee_fname=fname or f'First_{TestDataFactory.random_string(4)}',
            employee_lname=lname or f'Last_{TestDataFactory.random_string(4)}',
            employee_role=role,
            employee_image=image,
        )

    @staticmethod
    def create_order(employee=None, status='waiting', order_date=None):
        """Create a test order"""
        return Order.objects.create(
            employee=employee,
            order_status=status,
            order_date=order_date or timezone.localdate(),
        )

    @staticmethod
    def create_order_item(order, product=None, quantity=None):
        """Create a test order line"""
        if product is None:
            product = TestDataFactory.create_product()
        return OrderItem.objects.create(
            order=order,
            product=product,
            request_quantity=Decimal('5.00') if quantity is None else quantity,
        )


class TemporaryUploadDirsMixin:
    """Point the product and avatar upload directories at a throwaway folder for each test"""

    def setUp(self):
        super().setUp()
        self.upload_root = Path(tempfile.mkdtemp(prefix='shrimp-uploads-'))
        self.product_dir = self.upload_root / 'product'
        self.avatar_dir = self.upload_root / 'avatar'
        self._upload_settings = override_settings(
            PRODUCT_IMAGE_DIR=self.product_dir,
            AVATAR_IMAGE_DIR=self.avatar_dir,
        )
        self._upload_settings.enable()
        self.addCleanup(self._upload_settings.disable)
        self.addCleanup(shutil.rmtree, self.upload_root, ignore_errors=True)


class InventoryAPIClient(APIClient):
    """APIClient that can send the acting employee id along with each request"""

    def act_as(self, employee):
        self.credentials(HTTP_X_EMPLOYEE_ID=employee.employee_id)
        return self

    def clear_employee(self):
        self.credentials()
