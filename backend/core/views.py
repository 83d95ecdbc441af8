import logging

from django.conf import settings
from django.db import DatabaseError
from django.views.static import serve
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .exceptions import BackingStoreError, NotFound
from .models import AuditLog
from .serializers import AuditLogSerializer

logger = logging.getLogger('backend.core')


def uploaded_image(request, path, directory_setting):
    """Serve a stored upload from the directory named by `directory_setting`"""
    return serve(request, path, document_root=getattr(settings, directory_setting))


@api_view(['GET'])
@permission_classes([AllowAny])
def audit_log_list(request):
    """List audit log entries, newest first, optionally for one model"""
    queryset = AuditLog.objects.all()
    model_name = request.query_params.get('model_name')
    object_id = request.query_params.get('object_id')
    if model_name:
        queryset = queryset.filter(model_name__iexact=model_name)
    if object_id:
        queryset = queryset.filter(object_id=object_id)

    try:
        data = AuditLogSerializer(queryset, many=True).data
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch audit logs') from e

    if not data:
        raise NotFound('No audit logs found')
    return Response(data)
