import logging

from django.conf import settings
from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from backend.core.exceptions import BackingStoreError, NotFound, ValidationFailed
from backend.core.uploads import ImageStore
from backend.core.utils import create_audit_log
from .models import Employee
from .serializers import EmployeeCreateSerializer, EmployeeSerializer

logger = logging.getLogger('backend.employees')


@api_view(['GET'])
@permission_classes([AllowAny])
def employee_list(request):
    """List employees, optionally filtered by ?employee_role="""
    employees = Employee.objects.all()
    role = request.query_params.get('employee_role')
    if role:
        employees = employees.filter(employee_role=role)

    try:
        data = EmployeeSerializer(employees, many=True).data
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch employees') from e

    if not data:
        raise NotFound('No employees found')
    return Response(data)


@api_view(['GET'])
@permission_classes([AllowAny])
def employee_detail(request, employee_id):
    try:
        employee = Employee.objects.filter(pk=employee_id).first()
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch employee details') from e

    if employee is None:
        raise NotFound('Employee not found')
    return Response(EmployeeSerializer(employee).data)


@api_view(['POST'])
@permission_classes([AllowAny])
def add_employee(request):
    """Create an employee; the avatar under `employee_image` is optional"""
    serializer = EmployeeCreateSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Add employee validation failed: {serializer.errors}")
        raise ValidationFailed('Invalid employee data', details=serializer.errors)

    avatar = request.FILES.get(settings.AVATAR_IMAGE_FIELD)
    store = ImageStore(settings.AVATAR_IMAGE_DIR)
    stored_name = None
    if avatar is not None:
        try:
            stored_name = store.save(avatar)
        except OSError as e:
            raise BackingStoreError('Failed to add employee') from e

    try:
        employee = serializer.save(employee_image=stored_name)
    except DatabaseError as e:
        store.delete(stored_name)
        raise BackingStoreError('Failed to add employee') from e

    logger.info(f"Employee {employee} added as {employee.employee_id}")
    create_audit_log(
        request=request,
        action='create',
        model_name='Employee',
        object_id=employee.employee_id,
        object_name=str(employee),
        changes={'employee_role': employee.employee_role},
    )
    return Response(
        {'message': 'Employee added successfully', 'employee_id': employee.employee_id},
        status=status.HTTP_201_CREATED,
    )
