import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from backend.catalog.models import Product
from backend.core.exceptions import BackingStoreError, NotFound, ValidationFailed
from backend.core.utils import create_audit_log
from .models import ProductLot
from .serializers import ProductLotCreateSerializer, ProductLotDetailSerializer, ProductLotSerializer

logger = logging.getLogger('backend.inventory')


@api_view(['GET'])
@permission_classes([AllowAny])
def product_lots(request, product_id):
    """All lots of one product"""
    lots = ProductLot.objects.filter(product_id=product_id)
    try:
        data = ProductLotSerializer(lots, many=True).data
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch lot details') from e

    if not data:
        raise NotFound('No lots found for this product')
    return Response(data)


@api_view(['GET'])
@permission_classes([AllowAny])
def lot_detail(request, lot_id):
    """One lot joined with its product.

    select_related() joins the non-null product reference with an INNER JOIN,
    so a lot whose product is missing is reported exactly like a missing lot.
    """
    try:
        lot = ProductLot.objects.select_related('product').filter(pk=lot_id).first()
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch lot detail') from e

    if lot is None:
        raise NotFound('Lot not found')
    return Response(ProductLotDetailSerializer(lot).data)


@api_view(['POST'])
@permission_classes([AllowAny])
def add_lot(request):
    """Record a received lot for an existing product"""
    if not isinstance(request.data, dict):
        raise ValidationFailed('Invalid lot data')
    product_id = request.data.get('product_id')
    if not product_id:
        raise ValidationFailed('product_id is required')

    serializer = ProductLotCreateSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Add lot validation failed: {serializer.errors}")
        raise ValidationFailed('Invalid lot data', details=serializer.errors)

    try:
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise NotFound('Product not found')
        lot = serializer.save(product=product)
    except DatabaseError as e:
        raise BackingStoreError('Failed to add lot') from e

    logger.info(f"Lot {lot.lot_id} of {lot.lot_quantity} {product.product_unit} added to {product.product_id}")
    create_audit_log(
        request=request,
        action='create',
        model_name='ProductLot',
        object_id=lot.lot_id,
        object_name=product.product_name,
        changes={'product_id': product.product_id, 'lot_quantity': str(lot.lot_quantity)},
    )
    return Response(
        {'message': 'Lot added successfully', 'lot_id': lot.lot_id},
        status=status.HTTP_201_CREATED,
    )
