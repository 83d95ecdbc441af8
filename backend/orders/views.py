import logging

from django.db import DatabaseError
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from backend.core.exceptions import BackingStoreError, NotFound, ValidationFailed
from backend.core.utils import create_audit_log
from .models import Order, OrderItem
from .serializers import OrderLineSerializer, OrderSerializer, OrderStatusSerializer

logger = logging.getLogger('backend.orders')


@api_view(['GET'])
@permission_classes([AllowAny])
def order_list(request):
    """List order headers, optionally filtered by ?order_status= (case-insensitive)"""
    orders = Order.objects.select_related('employee')
    order_status = request.query_params.get('order_status')
    if order_status:
        orders = orders.filter(order_status__iexact=order_status.strip())

    try:
        data = OrderSerializer(orders, many=True).data
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch orders') from e

    if not data:
        raise NotFound('No orders found')
    return Response(data)


@api_view(['GET'])
@permission_classes([AllowAny])
def order_detail(request, order_id):
    """Requested products of one order, one row per line"""
    lines = OrderItem.objects.filter(order_id=order_id).select_related(
        'order', 'order__employee', 'product'
    ).order_by('id')
    try:
        data = OrderLineSerializer(lines, many=True).data
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch order details') from e

    if not data:
        raise NotFound('Order not found')
    return Response(data)


@api_view(['PUT', 'PATCH'])
@permission_classes([AllowAny])
def update_order_status(request, order_id):
    """Set an order's status to waiting, accept or reject"""
    serializer = OrderStatusSerializer(data=request.data)
    if not serializer.is_valid():
        raise ValidationFailed('Invalid order status', details=serializer.errors)
    new_status = serializer.validated_data['status']

    try:
        updated = Order.objects.filter(pk=order_id).update(order_status=new_status, updated_at=timezone.now())
    except DatabaseError as e:
        raise BackingStoreError('Failed to update order status') from e

    if not updated:
        raise NotFound('Order not found')

    logger.info(f"Order {order_id} status set to {new_status}")
    create_audit_log(
        request=request,
        action='status_change',
        model_name='Order',
        object_id=order_id,
        object_name=order_id,
        changes={'order_status': new_status},
    )
    return Response({'message': 'Order status updated', 'order_id': order_id, 'order_status': new_status})
