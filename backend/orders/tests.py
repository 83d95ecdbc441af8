"""
Test suite for the orders module
Tests: order listing, order lines, status updates
"""
import datetime
from decimal import Decimal

from django.test import TestCase
from rest_framework import status

from backend.core.models import AuditLog
from backend.core.test_utils import InventoryAPIClient, TestDataFactory
from backend.orders.models import Order


class OrderListTests(TestCase):
    """Test GET /api/orders"""

    def setUp(self):
        self.client = InventoryAPIClient()
        self.employee = TestDataFactory.create_employee(fname='Niran', image='1-niran.gif')

    def test_no_orders(self):
        response = self.client.get('/api/orders')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'No orders found'})

    def test_list_orders_newest_first(self):
        older = TestDataFactory.create_order(self.employee, order_date=datetime.date(2024, 1, 1))
        newer = TestDataFactory.create_order(self.employee, order_date=datetime.date(2024, 2, 1))
        response = self.client.get('/api/orders')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['order_id'] for row in response.data], [newer.order_id, older.order_id])
        self.assertEqual(response.data[0]['employee_fname'], 'Niran')
        self.assertEqual(response.data[0]['employee_image'], '1-niran.gif')

    def test_filter_by_status_is_case_insensitive(self):
        accepted = TestDataFactory.create_order(self.employee, status='accept')
        TestDataFactory.create_order(self.employee, status='waiting')
        response = self.client.get('/api/orders', {'order_status': 'ACCEPT'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['order_id'] for row in response.data], [accepted.order_id])

    def test_order_without_employee(self):
        TestDataFactory.create_order(employee=None)
        response = self.client.get('/api/orders')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data[0]['employee_id'])
        self.assertIsNone(response.data[0]['employee_fname'])


class OrderDetailTests(TestCase):
    """Test GET /api/orders/<order_id>"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_order_lines(self):
        employee = TestDataFactory.create_employee()
        order = TestDataFactory.create_order(employee)
        feed = TestDataFactory.create_product(name='Feed', unit='kg', image='1-feed.gif')
        lime = TestDataFactory.create_product(name='Lime', unit='bag')
        TestDataFactory.create_order_item(order, feed, Decimal('20'))
        TestDataFactory.create_order_item(order, lime, Decimal('3'))

        response = self.client.get(f'/api/orders/{order.order_id}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        first, second = response.data
        self.assertEqual(first['order_id'], order.order_id)
        self.assertEqual(first['employee_id'], employee.employee_id)
        self.assertEqual(first['product_name'], 'Feed')
        self.assertEqual(first['product_image'], '1-feed.gif')
        self.assertEqual(first['unit_name'], 'kg')
        self.assertEqual(Decimal(first['request_quantity']), Decimal('20'))
        self.assertEqual(second['unit_name'], 'bag')
        self.assertIsNone(second['product_image'])

    def test_missing_order(self):
        response = self.client.get('/api/orders/ORD-missing')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Order not found'})


class UpdateOrderStatusTests(TestCase):
    """Test PUT /api/update-order-status/<order_id>"""

    def setUp(self):
        self.client = InventoryAPIClient()
        self.manager = TestDataFactory.create_employee(role='manager')
        self.order = TestDataFactory.create_order(TestDataFactory.create_employee())

    def test_accept_order(self):
        self.client.act_as(self.manager)
        response = self.client.put(f'/api/update-order-status/{self.order.order_id}',
                                   {'status': 'ACCEPT'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {
            'message': 'Order status updated',
            'order_id': self.order.order_id,
            'order_status': 'accept',
        })
        self.order.refresh_from_db()
        self.assertEqual(self.order.order_status, Order.STATUS_ACCEPT)

        entry = AuditLog.objects.get(object_id=self.order.order_id)
        self.assertEqual(entry.action, 'status_change')
        self.assertEqual(entry.employee_id, self.manager.employee_id)
        self.assertEqual(entry.changes, {'order_status': 'accept'})

    def test_patch_is_accepted(self):
        response = self.client.patch(f'/api/update-order-status/{self.order.order_id}',
                                     {'status': 'reject'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.order.refresh_from_db()
        self.assertEqual(self.order.order_status, Order.STATUS_REJECT)

    def test_invalid_status(self):
        response = self.client.put(f'/api/update-order-status/{self.order.order_id}',
                                   {'status': 'shipped'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Invalid order status')
        self.order.refresh_from_db()
        self.assertEqual(self.order.order_status, Order.STATUS_WAITING)

    def test_missing_order(self):
        response = self.client.put('/api/update-order-status/ORD-missing', {'status': 'accept'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Order not found'})
        self.assertEqual(AuditLog.objects.count(), 0)

    def test_normalize_status(self):
        self.assertEqual(Order.normalize_status(' Waiting '), 'waiting')
        self.assertIsNone(Order.normalize_status('done'))
        self.assertIsNone(Order.normalize_status(None))
