"""
Test suite for the employees module
"""
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from rest_framework import status

from backend.core.models import AuditLog
from backend.core.test_utils import InventoryAPIClient, TemporaryUploadDirsMixin, TestDataFactory
from backend.employees.models import Employee
from backend.employees.serializers import EmployeeCreateSerializer


class EmployeeListTests(TestCase):
    """Test GET /api/employees"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_no_employees(self):
        response = self.client.get('/api/employees')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'No employees found'})

    def test_filter_by_role(self):
        manager = TestDataFactory.create_employee(role='manager')
        TestDataFactory.create_employee(role='farmer')
        response = self.client.get('/api/employees', {'employee_role': 'manager'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['employee_id'] for row in response.data], [manager.employee_id])

        response = self.client.get('/api/employees')
        self.assertEqual(len(response.data), 2)


class EmployeeDetailTests(TestCase):
    """Test GET /api/employee-detail/<employee_id>"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_detail(self):
        employee = TestDataFactory.create_employee(fname='Somchai', lname='Dee', role='farmer',
                                                   image='1700000000000-somchai.gif')
        response = self.client.get(f'/api/employee-detail/{employee.employee_id}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['employee_fname'], 'Somchai')
        self.assertEqual(response.data['employee_role'], 'farmer')
        self.assertEqual(response.data['employee_image'], '1700000000000-somchai.gif')

    def test_missing(self):
        response = self.client.get('/api/employee-detail/EMP-nobody')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Employee not found'})


class AddEmployeeTests(TemporaryUploadDirsMixin, TestCase):
    """Test POST /api/add-employee"""

    def setUp(self):
        super().setUp()
        self.client = InventoryAPIClient()

    def test_add_employee_with_avatar(self):
        response = self.client.post('/api/add-employee', {
            'employee_fname': 'Malee',
            'employee_lname': 'Suk',
            'employee_role': 'clerical',
            'employee_image': TestDataFactory.image_upload('Malee Face.GIF'),
        }, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['employee_id'].startswith('EMP-'))

        employee = Employee.objects.get(pk=response.data['employee_id'])
        self.assertRegex(employee.employee_image, r'^\d+-malee_face\.gif$')
        self.assertTrue((self.avatar_dir / employee.employee_image).exists())
        self.assertFalse(self.product_dir.exists() and any(self.product_dir.iterdir()))

        avatar = self.client.get(f'/avatar/{employee.employee_image}')
        self.assertEqual(avatar.status_code, status.HTTP_200_OK)

        entry = AuditLog.objects.get(object_id=employee.employee_id)
        self.assertEqual(entry.model_name, 'Employee')

    def test_add_employee_without_avatar(self):
        response = self.client.post('/api/add-employee', {
            'employee_fname': 'Anan',
            'employee_lname': 'Chai',
            'employee_role': 'farmer',
        }, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        employee = Employee.objects.get(pk=response.data['employee_id'])
        self.assertIsNone(employee.employee_image)

    def test_invalid_role(self):
        response = self.client.post('/api/add-employee', {
            'employee_fname': 'Anan',
            'employee_lname': 'Chai',
            'employee_role': 'captain',
            'employee_image': TestDataFactory.image_upload(),
        }, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Invalid employee data')
        self.assertIn('employee_role', response.data['details'])
        self.assertEqual(Employee.objects.count(), 0)
        self.assertFalse(self.avatar_dir.exists() and any(self.avatar_dir.iterdir()))

    def test_unknown_avatar_path_is_not_found(self):
        response = self.client.get('/avatar/1-nobody.gif')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_database_failure_removes_stored_avatar(self):
        with mock.patch.object(EmployeeCreateSerializer, 'create', side_effect=DatabaseError('disk full')):
            with self.assertLogs('backend.core', level='ERROR') as logs:
                response = self.client.post('/api/add-employee', {
                    'employee_fname': 'Malee',
                    'employee_lname': 'Suk',
                    'employee_role': 'clerical',
                    'employee_image': TestDataFactory.image_upload('malee.gif'),
                }, format='multipart')
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Failed to add employee'})
        self.assertIn('disk full', '\n'.join(logs.output))
        self.assertEqual(Employee.objects.count(), 0)
        self.assertEqual(list(self.avatar_dir.iterdir()), [])
