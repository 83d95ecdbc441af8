import logging

from django.conf import settings
from django.db import DatabaseError
from django.db.models import F
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from backend.core.exceptions import BackingStoreError, NotFound, ValidationFailed
from backend.core.uploads import ImageStore
from backend.core.utils import create_audit_log
from .filters import ProductFilter
from .models import Product
from .serializers import ProductCreateSerializer, ProductListSerializer, ProductSerializer

logger = logging.getLogger('backend.catalog')


@api_view(['GET'])
@permission_classes([AllowAny])
def product_list(request):
    """List products, optionally filtered by ?product_type= and ?search="""
    filterset = ProductFilter(request.query_params, queryset=Product.objects.all())
    try:
        data = ProductListSerializer(filterset.qs, many=True).data
    except DatabaseError as e:
        raise BackingStoreError('Database query error') from e

    if not data:
        raise NotFound('No products found')
    return Response(data)


@api_view(['GET'])
@permission_classes([AllowAny])
def product_low_stock(request):
    """Products at or below their reorder threshold"""
    products = Product.objects.filter(threshold__gt=0, product_quantity__lte=F('threshold'))
    try:
        data = ProductSerializer(products, many=True).data
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch low stock products') from e

    if not data:
        raise NotFound('No low stock products')
    return Response(data)


@api_view(['GET'])
@permission_classes([AllowAny])
def product_detail(request, product_id):
    """Retrieve one product with all of its fields"""
    try:
        product = Product.objects.filter(pk=product_id).first()
    except DatabaseError as e:
        raise BackingStoreError('Failed to fetch product details') from e

    if product is None:
        raise NotFound('Product not found')
    return Response(ProductSerializer(product).data)


@api_view(['POST'])
@permission_classes([AllowAny])
def add_product(request):
    """Create a product from a multipart form with exactly one image under `product_image`

    Nothing is written unless the image is present and the form fields are valid.
    `product_quantity` and `threshold` may be omitted and then default to 0.
    If the insert fails, the image that was just stored is removed again.
    """
    image = request.FILES.get(settings.PRODUCT_IMAGE_FIELD)
    if image is None:
        raise ValidationFailed('No file uploaded')

    serializer = ProductCreateSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Add product validation failed: {serializer.errors}")
        raise ValidationFailed('Invalid product data', details=serializer.errors)

    store = ImageStore(settings.PRODUCT_IMAGE_DIR)
    try:
        stored_name = store.save(image)
    except OSError as e:
        raise BackingStoreError('Failed to add product') from e

    try:
        product = serializer.save(product_image=stored_name)
    except DatabaseError as e:
        store.delete(stored_name)
        raise BackingStoreError('Failed to add product') from e

    logger.info(f"Product '{product.product_name}' added as {product.product_id} with image {stored_name}")
    create_audit_log(
        request=request,
        action='create',
        model_name='Product',
        object_id=product.product_id,
        object_name=product.product_name,
        changes={'product_type': product.product_type, 'product_image': stored_name},
    )
    return Response(
        {'message': 'Product added successfully', 'product_id': product.product_id},
        status=status.HTTP_201_CREATED,
    )
