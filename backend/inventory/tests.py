"""
Test suite for the inventory module
Tests: lots of a product, lot detail joined with its product, receiving lots
"""
import datetime
from decimal import Decimal

from django.test import TestCase
from rest_framework import status

from backend.core.test_utils import InventoryAPIClient, TestDataFactory
from backend.inventory.models import ProductLot


class ProductLotsTests(TestCase):
    """Test GET /api/product/<product_id>/lots"""

    def setUp(self):
        self.client = InventoryAPIClient()
        self.product = TestDataFactory.create_product()

    def test_lots_of_product(self):
        TestDataFactory.create_lot(product=self.product, quantity=Decimal('10'))
        TestDataFactory.create_lot(product=self.product, quantity=Decimal('20'))
        TestDataFactory.create_lot()  # another product
        response = self.client.get(f'/api/product/{self.product.product_id}/lots')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        self.assertEqual(
            set(response.data[0].keys()),
            {'lot_id', 'product_id', 'lot_date', 'lot_exp', 'lot_quantity'},
        )
        self.assertTrue(all(row['product_id'] == self.product.product_id for row in response.data))

    def test_product_without_lots(self):
        response = self.client.get(f'/api/product/{self.product.product_id}/lots')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'No lots found for this product'})


class LotDetailTests(TestCase):
    """Test GET /api/lot-detail/<lot_id>"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_lot_detail_merges_product_fields(self):
        product = TestDataFactory.create_product(name='Zeolite', product_type='chemical', unit='bag',
                                                 image='1700000000000-zeolite.gif')
        lot = TestDataFactory.create_lot(
            product=product,
            quantity=Decimal('8.00'),
            lot_date=datetime.date(2024, 5, 1),
            lot_exp=datetime.date(2025, 5, 1),
        )
        response = self.client.get(f'/api/lot-detail/{lot.lot_id}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['lot_id'], lot.lot_id)
        self.assertEqual(response.data['product_id'], product.product_id)
        self.assertEqual(response.data['lot_date'], '2024-05-01')
        self.assertEqual(response.data['lot_exp'], '2025-05-01')
        self.assertEqual(Decimal(response.data['lot_quantity']), Decimal('8.00'))
        self.assertEqual(response.data['product_name'], 'Zeolite')
        self.assertEqual(response.data['product_unit'], 'bag')
        self.assertEqual(response.data['product_type'], 'chemical')
        self.assertEqual(response.data['product_image'], '1700000000000-zeolite.gif')

    def test_missing_lot(self):
        response = self.client.get('/api/lot-detail/LOT-missing')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Lot not found'})

    def test_lot_with_dangling_product_reference(self):
        lot = TestDataFactory.create_lot(product_id='PROD-gone')
        self.assertTrue(ProductLot.objects.filter(pk=lot.lot_id).exists())
        response = self.client.get(f'/api/lot-detail/{lot.lot_id}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Lot not found'})

    def test_dangling_lot_still_listed_by_product_id(self):
        TestDataFactory.create_lot(product_id='PROD-gone')
        response = self.client.get('/api/product/PROD-gone/lots')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)


class AddLotTests(TestCase):
    """Test POST /api/add-lot"""

    def setUp(self):
        self.client = InventoryAPIClient()
        self.product = TestDataFactory.create_product(quantity=Decimal('100'))

    def test_add_lot(self):
        response = self.client.post('/api/add-lot', {
            'product_id': self.product.product_id,
            'lot_date': '2024-06-01',
            'lot_exp': '2024-12-01',
            'lot_quantity': '30',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['lot_id'].startswith('LOT-'))
        lot = ProductLot.objects.get(pk=response.data['lot_id'])
        self.assertEqual(lot.product_id, self.product.product_id)
        self.assertEqual(lot.lot_quantity, Decimal('30'))
        # receiving a lot does not touch the product's aggregate quantity
        self.product.refresh_from_db()
        self.assertEqual(self.product.product_quantity, Decimal('100'))

    def test_add_lot_for_unknown_product(self):
        response = self.client.post('/api/add-lot', {
            'product_id': 'PROD-unknown',
            'lot_quantity': '5',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Product not found'})
        self.assertEqual(ProductLot.objects.count(), 0)

    def test_add_lot_without_product_id(self):
        response = self.client.post('/api/add-lot', {'lot_quantity': '5'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': 'product_id is required'})

    def test_expiry_before_received_date(self):
        response = self.client.post('/api/add-lot', {
            'product_id': self.product.product_id,
            'lot_date': '2024-06-01',
            'lot_exp': '2024-01-01',
            'lot_quantity': '5',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('lot_exp', response.data['details'])

    def test_body_that_is_not_an_object(self):
        response = self.client.post('/api/add-lot', [], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': 'Invalid lot data'})
        self.assertEqual(ProductLot.objects.count(), 0)
