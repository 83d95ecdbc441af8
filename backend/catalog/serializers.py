from rest_framework import serializers
from .models import Product


class ProductListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ['product_id', 'product_name', 'product_image', 'product_type']


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ['product_id', 'product_name', 'product_type', 'product_unit',
                  'product_quantity', 'threshold', 'product_image']


class ProductCreateSerializer(serializers.ModelSerializer):
    """Form fields of add-product. The image filename is supplied by the view after upload."""
    product_quantity = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    threshold = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)

    class Meta:
        model = Product
        fields = ['product_name', 'product_type', 'product_unit', 'product_quantity', 'threshold']
