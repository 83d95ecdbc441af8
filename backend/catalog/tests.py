"""
Test suite for the catalog module
Tests: product listing and filtering, product detail, add-product with image upload
"""
import re
from decimal import Decimal
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.db import DatabaseError
from django.test import TestCase
from rest_framework import status

from backend.catalog.models import Product
from backend.catalog.serializers import ProductCreateSerializer
from backend.core.models import AuditLog
from backend.core.test_utils import InventoryAPIClient, TemporaryUploadDirsMixin, TestDataFactory

PRODUCT_ID = re.compile(r'^PROD-[0-9a-f-]{36}$')


class ProductListTests(TestCase):
    """Test GET /api/products"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_empty_catalog_is_not_found(self):
        response = self.client.get('/api/products')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'No products found'})

    def test_list_all_products(self):
        TestDataFactory.create_product(product_type='feed', image='1-feed.gif')
        TestDataFactory.create_product(product_type='chemical')
        response = self.client.get('/api/products')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        self.assertEqual(
            set(response.data[0].keys()),
            {'product_id', 'product_name', 'product_image', 'product_type'},
        )

    def test_filter_by_type(self):
        feed = TestDataFactory.create_product(product_type='feed')
        TestDataFactory.create_product(product_type='chemical')
        TestDataFactory.create_product(product_type='chemical')
        response = self.client.get('/api/products', {'product_type': 'feed'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['product_id'] for row in response.data], [feed.product_id])

        response = self.client.get('/api/products', {'product_type': 'chemical'})
        self.assertEqual(len(response.data), 2)
        self.assertTrue(all(row['product_type'] == 'chemical' for row in response.data))

    def test_filter_by_type_without_matches(self):
        TestDataFactory.create_product(product_type='feed')
        response = self.client.get('/api/products', {'product_type': 'equipment'})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'No products found'})

    def test_search_by_name(self):
        TestDataFactory.create_product(name='Grower Feed 35%')
        TestDataFactory.create_product(name='Probiotic')
        response = self.client.get('/api/products', {'search': 'grower feed'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['product_name'] for row in response.data], ['Grower Feed 35%'])

    def test_database_failure(self):
        TestDataFactory.create_product()
        with mock.patch('backend.catalog.views.ProductFilter.qs',
                        new_callable=mock.PropertyMock, side_effect=DatabaseError('gone away')):
            with self.assertLogs('backend.core', level='ERROR'):
                response = self.client.get('/api/products')
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Database query error'})


class ProductDetailTests(TestCase):
    """Test GET /api/product-detail/<product_id>"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_detail(self):
        product = TestDataFactory.create_product(
            name='Lime', product_type='chemical', unit='bag',
            quantity=Decimal('12.50'), threshold=Decimal('5.00'), image='1700000000000-lime.gif',
        )
        response = self.client.get(f'/api/product-detail/{product.product_id}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['product_id'], product.product_id)
        self.assertEqual(response.data['product_name'], 'Lime')
        self.assertEqual(response.data['product_type'], 'chemical')
        self.assertEqual(response.data['product_unit'], 'bag')
        self.assertEqual(Decimal(response.data['product_quantity']), Decimal('12.50'))
        self.assertEqual(Decimal(response.data['threshold']), Decimal('5.00'))
        self.assertEqual(response.data['product_image'], '1700000000000-lime.gif')

    def test_missing_product(self):
        response = self.client.get('/api/product-detail/PROD-does-not-exist')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Product not found'})


class LowStockTests(TestCase):
    """Test GET /api/products/low-stock"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_low_stock(self):
        low = TestDataFactory.create_product(quantity=Decimal('3'), threshold=Decimal('5'))
        TestDataFactory.create_product(quantity=Decimal('50'), threshold=Decimal('5'))
        TestDataFactory.create_product(quantity=Decimal('0'), threshold=Decimal('0'))
        response = self.client.get('/api/products/low-stock')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['product_id'] for row in response.data], [low.product_id])

    def test_no_low_stock(self):
        TestDataFactory.create_product(quantity=Decimal('50'), threshold=Decimal('5'))
        response = self.client.get('/api/products/low-stock')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class AddProductTests(TemporaryUploadDirsMixin, TestCase):
    """Test POST /api/add-product"""

    def setUp(self):
        super().setUp()
        self.client = InventoryAPIClient()

    def form(self, **overrides):
        data = {
            'product_name': 'Starter Feed',
            'product_type': 'feed',
            'product_unit': 'kg',
            'product_quantity': '40',
            'threshold': '10',
            'product_image': TestDataFactory.image_upload('A B@C.JPG'),
        }
        data.update(overrides)
        return {key: value for key, value in data.items() if value is not None}

    def test_add_product(self):
        response = self.client.post('/api/add-product', self.form(), format='multipart')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['message'], 'Product added successfully')
        self.assertRegex(response.data['product_id'], PRODUCT_ID)

        detail = self.client.get(f"/api/product-detail/{response.data['product_id']}")
        self.assertEqual(detail.status_code, status.HTTP_200_OK)
        self.assertEqual(detail.data['product_name'], 'Starter Feed')
        self.assertEqual(detail.data['product_type'], 'feed')
        self.assertEqual(detail.data['product_unit'], 'kg')
        self.assertEqual(Decimal(detail.data['product_quantity']), Decimal('40'))
        self.assertEqual(Decimal(detail.data['threshold']), Decimal('10'))

        stored_name = detail.data['product_image']
        self.assertRegex(stored_name, r'^\d+-a_b_c\.jpg$')
        self.assertTrue((self.product_dir / stored_name).exists())

    def test_uploaded_image_is_served_at_product_mount(self):
        response = self.client.post('/api/add-product', self.form(), format='multipart')
        stored_name = Product.objects.get(pk=response.data['product_id']).product_image
        image = self.client.get(f'/product/{stored_name}')
        self.assertEqual(image.status_code, status.HTTP_200_OK)
        self.assertEqual(b''.join(image.streaming_content), TestDataFactory.image_upload().read())

    def test_omitted_quantity_and_threshold_default_to_zero(self):
        response = self.client.post(
            '/api/add-product', self.form(product_quantity=None, threshold=None), format='multipart',
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        product = Product.objects.get(pk=response.data['product_id'])
        self.assertEqual(product.product_quantity, Decimal('0'))
        self.assertEqual(product.threshold, Decimal('0'))

    def test_add_product_without_file(self):
        response = self.client.post('/api/add-product', self.form(product_image=None), format='multipart')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': 'No file uploaded'})
        self.assertEqual(Product.objects.count(), 0)
        self.assertFalse(self.product_dir.exists() and any(self.product_dir.iterdir()))

    def test_add_product_with_invalid_fields(self):
        response = self.client.post(
            '/api/add-product',
            self.form(product_type='spaceship', product_quantity='lots'),
            format='multipart',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Invalid product data')
        self.assertIn('product_type', response.data['details'])
        self.assertIn('product_quantity', response.data['details'])
        self.assertEqual(Product.objects.count(), 0)
        self.assertFalse(self.product_dir.exists() and any(self.product_dir.iterdir()))

    def test_database_failure_removes_stored_image(self):
        with mock.patch.object(ProductCreateSerializer, 'create', side_effect=DatabaseError('duplicate key')):
            with self.assertLogs('backend.core', level='ERROR') as logs:
                response = self.client.post('/api/add-product', self.form(), format='multipart')
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Failed to add product'})
        self.assertNotIn('duplicate key', str(response.data))
        self.assertIn('duplicate key', '\n'.join(logs.output))
        self.assertEqual(Product.objects.count(), 0)
        self.assertEqual(list(self.product_dir.iterdir()), [])

    def test_add_product_is_audited(self):
        employee = TestDataFactory.create_employee()
        self.client.act_as(employee)
        response = self.client.post('/api/add-product', self.form(), format='multipart')
        entry = AuditLog.objects.get(object_id=response.data['product_id'])
        self.assertEqual(entry.action, 'create')
        self.assertEqual(entry.model_name, 'Product')
        self.assertEqual(entry.employee_id, employee.employee_id)


class CleanupOrphanedImagesTests(TemporaryUploadDirsMixin, TestCase):
    """Test the cleanup_orphaned_images management command"""

    def setUp(self):
        super().setUp()
        self.product_dir.mkdir(parents=True)
        (self.product_dir / '1-kept.gif').write_bytes(b'kept')
        (self.product_dir / '2-orphan.gif').write_bytes(b'orphan')
        TestDataFactory.create_product(image='1-kept.gif')

    def test_lists_orphans_without_deleting(self):
        out = StringIO()
        call_command('cleanup_orphaned_images', stdout=out)
        self.assertIn('Orphaned: 2-orphan.gif', out.getvalue())
        self.assertNotIn('1-kept.gif', out.getvalue())
        self.assertTrue((self.product_dir / '2-orphan.gif').exists())

    def test_delete_orphans(self):
        out = StringIO()
        call_command('cleanup_orphaned_images', '--delete', stdout=out)
        self.assertFalse((self.product_dir / '2-orphan.gif').exists())
        self.assertTrue((self.product_dir / '1-kept.gif').exists())
