"""
Test suite for the core module
Tests: filename sanitizing, upload storage, error mapping, audit logging
"""
import random
import re
import shutil
import tempfile
from pathlib import Path

from django.db import DatabaseError
from django.http import Http404
from django.test import SimpleTestCase, TestCase
from rest_framework import status

from backend.core.exceptions import (
    BackingStoreError, ErrorKind, NotFound, ValidationFailed,
    error_response, inventory_exception_handler,
)
from backend.core.models import AuditLog
from backend.core.test_utils import InventoryAPIClient, TestDataFactory
from backend.core.uploads import ImageStore, build_stored_name, ensure_upload_dir, sanitize_filename
from backend.core.utils import create_audit_log

SAFE_NAME = re.compile(r'^[a-z0-9_\-.]*$')


class SanitizeFilenameTests(SimpleTestCase):
    """Test the filename sanitizer"""

    def test_case_folds(self):
        self.assertEqual(sanitize_filename('IMG.PNG'), 'img.png')

    def test_replaces_each_unsafe_character_with_underscore(self):
        self.assertEqual(sanitize_filename('A B@C.JPG'), 'a_b_c.jpg')
        self.assertEqual(sanitize_filename('../etc/passwd'), '.._etc_passwd')
        self.assertEqual(sanitize_filename('กุ้ง.jpg'), '____.jpg')

    def test_keeps_safe_characters(self):
        self.assertEqual(sanitize_filename('shrimp_feed-01.v2.png'), 'shrimp_feed-01.v2.png')

    def test_output_only_contains_safe_characters(self):
        rng = random.Random(1234)
        alphabet = 'aZ09_-. /\\@#$%&*()[]{}:;\'"<>?|~`!éüกุ้ง\tſK'
        for _ in range(200):
            name = ''.join(rng.choice(alphabet) for _ in range(rng.randint(0, 30)))
            result = sanitize_filename(name)
            self.assertRegex(result, SAFE_NAME)
            self.assertEqual(len(result), len(name))

    def test_idempotent_on_safe_names(self):
        for name in ['img.png', 'a_b_c.jpg', '1700000000000-photo.gif', '']:
            self.assertEqual(sanitize_filename(name), name)
            self.assertEqual(sanitize_filename(sanitize_filename(name.upper())), sanitize_filename(name.upper()))

    def test_none_is_treated_as_empty(self):
        self.assertEqual(sanitize_filename(None), '')


class ImageStoreTests(SimpleTestCase):
    """Test the upload store"""

    def setUp(self):
        self.root = Path(tempfile.mkdtemp(prefix='shrimp-store-'))
        self.addCleanup(shutil.rmtree, self.root, ignore_errors=True)
        self.location = self.root / 'product'
        self.store = ImageStore(self.location)

    def test_build_stored_name(self):
        self.assertEqual(build_stored_name('A B@C.JPG', 1700000000123), '1700000000123-a_b_c.jpg')
        self.assertRegex(build_stored_name('photo.gif'), r'^\d{13,}-photo\.gif$')

    def test_save_writes_file_under_location(self):
        upload = TestDataFactory.image_upload('Pond 3.GIF')
        stored_name = self.store.save(upload, timestamp_ms=1700000000123)
        self.assertEqual(stored_name, '1700000000123-pond_3.gif')
        stored_path = self.location / stored_name
        self.assertTrue(stored_path.exists())
        self.assertEqual(stored_path.read_bytes(), upload_content(upload))

    def test_same_name_same_millisecond_overwrites(self):
        first = TestDataFactory.image_upload('photo.gif', content=b'first')
        second = TestDataFactory.image_upload('photo.gif', content=b'second')
        name_one = self.store.save(first, timestamp_ms=42)
        name_two = self.store.save(second, timestamp_ms=42)
        self.assertEqual(name_one, name_two)
        self.assertEqual(self.store.listdir(), ['42-photo.gif'])
        self.assertEqual((self.location / name_two).read_bytes(), b'second')

    def test_delete(self):
        stored_name = self.store.save(TestDataFactory.image_upload(), timestamp_ms=7)
        self.store.delete(stored_name)
        self.assertFalse(self.store.exists(stored_name))
        # deleting a missing file is a no-op
        self.store.delete(stored_name)
        self.store.delete(None)

    def test_listdir_of_missing_directory(self):
        self.assertEqual(ImageStore(self.root / 'missing').listdir(), [])

    def test_ensure_upload_dir_is_idempotent(self):
        target = self.root / 'nested' / 'avatar'
        ensure_upload_dir(target)
        ensure_upload_dir(target)
        self.assertTrue(target.is_dir())


def upload_content(upload):
    upload.seek(0)
    return upload.read()


class ErrorMappingTests(SimpleTestCase):
    """Test mapping of error kinds to responses"""

    def test_kinds(self):
        self.assertIs(ValidationFailed('x').kind, ErrorKind.VALIDATION)
        self.assertIs(NotFound('x').kind, ErrorKind.NOT_FOUND)
        self.assertIs(BackingStoreError('x').kind, ErrorKind.BACKING_STORE)

    def test_validation_error_response(self):
        response = error_response(ValidationFailed('No file uploaded'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': 'No file uploaded'})

    def test_validation_error_with_details(self):
        response = error_response(ValidationFailed('Invalid product data', details={'product_name': ['required']}))
        self.assertEqual(response.data['details'], {'product_name': ['required']})

    def test_not_found_response_uses_message(self):
        response = error_response(NotFound('Lot not found'))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'Lot not found'})

    def test_backing_store_response_is_generic(self):
        try:
            try:
                raise DatabaseError('connection refused to db-host:3306')
            except DatabaseError as e:
                raise BackingStoreError('Failed to add product') from e
        except BackingStoreError as exc:
            with self.assertLogs('backend.core', level='ERROR') as logs:
                response = inventory_exception_handler(exc, {})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Failed to add product'})
        self.assertIn('connection refused', logs.output[0])

    def test_uncaught_database_error(self):
        with self.assertLogs('backend.core', level='ERROR'):
            response = inventory_exception_handler(DatabaseError('boom'), {})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Database query error'})

    def test_other_exceptions_fall_through(self):
        self.assertIsNone(inventory_exception_handler(ValueError('not ours'), {}))


class AuditLogTests(TestCase):
    """Test audit logging helpers and endpoint"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_create_audit_log(self):
        entry = create_audit_log(action='create', model_name='Product', object_id='PROD-1',
                                 object_name='Shrimp feed', changes={'a': 1}, employee_id='EMP-1')
        self.assertIsNotNone(entry)
        self.assertEqual(entry.employee_id, 'EMP-1')
        self.assertEqual(entry.changes, {'a': 1})

    def test_missing_fields_skips_entry(self):
        self.assertIsNone(create_audit_log(action='create', model_name='Product'))
        self.assertEqual(AuditLog.objects.count(), 0)

    def test_audit_log_list_empty(self):
        response = self.client.get('/api/audit-logs')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'message': 'No audit logs found'})

    def test_audit_log_list_filtered_by_model(self):
        create_audit_log(action='create', model_name='Product', object_id='PROD-1')
        create_audit_log(action='status_change', model_name='Order', object_id='ORD-1')
        response = self.client.get('/api/audit-logs?model_name=order')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['object_id'], 'ORD-1')
        self.assertEqual(response.data[0]['action_display'], 'Status Change')


class FrameworkErrorShapeTests(TestCase):
    """Errors raised by DRF itself use the same body shapes as the API's own errors"""

    def setUp(self):
        self.client = InventoryAPIClient()

    def test_malformed_json(self):
        response = self.client.put('/api/update-order-status/ORD-1', data='{bad',
                                   content_type='application/json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(set(response.data), {'error'})
        self.assertIn('JSON parse error', response.data['error'])

    def test_method_not_allowed(self):
        response = self.client.get('/api/add-product')
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data, {'error': 'Method "GET" not allowed.'})

    def test_framework_not_found_uses_message(self):
        response = inventory_exception_handler(Http404(), {})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(set(response.data), {'message'})
