"""Utility functions for audit logging"""
import logging

from .models import AuditLog

logger = logging.getLogger(__name__)


def get_client_ip(request):
    """Extract client IP address from request"""
    if not request or not hasattr(request, 'META'):
        return None
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip or None


def get_acting_employee_id(request):
    """Employee id the client sent along with the request (header or body), if any"""
    if not request:
        return None
    employee_id = request.META.get('HTTP_X_EMPLOYEE_ID')
    if not employee_id and hasattr(request, 'data'):
        try:
            employee_id = request.data.get('employee_id')
        except AttributeError:
            employee_id = None
    return employee_id or None


def create_audit_log(request=None, action=None, model_name=None, object_id=None,
                     changes=None, object_name=None, employee_id=None):
    """
    Create an audit log entry

    Args:
        request: Request object (for client IP and acting employee) - optional
        action: Action type (create, update, status_change)
        model_name: Name of the model being acted upon
        object_id: ID of the object (as string)
        changes: Dictionary of changes made
        object_name: Human-readable name of the object
        employee_id: Optional employee override (defaults to the id sent with the request)
    """
    if not action or not model_name or not object_id:
        logger.warning(f"Audit log creation skipped: missing required fields (action={action}, model_name={model_name}, object_id={object_id})")
        return None

    try:
        return AuditLog.objects.create(
            action=action,
            model_name=model_name,
            object_id=str(object_id),
            object_name=object_name,
            employee_id=employee_id or get_acting_employee_id(request),
            changes=changes or {},
            ip_address=get_client_ip(request),
        )
    except Exception as e:
        # Don't fail the main operation if audit logging fails
        logger.error(f"Failed to create audit log: {str(e)}")
        return None
