from rest_framework import serializers
from .models import ProductLot


class ProductLotSerializer(serializers.ModelSerializer):
    product_id = serializers.CharField(read_only=True)

    class Meta:
        model = ProductLot
        fields = ['lot_id', 'product_id', 'lot_date', 'lot_exp', 'lot_quantity']


class ProductLotDetailSerializer(serializers.ModelSerializer):
    """Lot fields merged with the owning product's name, unit, type and image"""
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(source='product.product_name', read_only=True)
    product_unit = serializers.CharField(source='product.product_unit', read_only=True)
    product_type = serializers.CharField(source='product.product_type', read_only=True)
    product_image = serializers.CharField(source='product.product_image', read_only=True, allow_null=True)

    class Meta:
        model = ProductLot
        fields = ['lot_id', 'product_id', 'lot_date', 'lot_exp', 'lot_quantity',
                  'product_name', 'product_unit', 'product_type', 'product_image']


class ProductLotCreateSerializer(serializers.ModelSerializer):
    lot_quantity = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)

    class Meta:
        model = ProductLot
        fields = ['lot_date', 'lot_exp', 'lot_quantity']

    def validate(self, attrs):
        lot_date = attrs.get('lot_date')
        lot_exp = attrs.get('lot_exp')
        if lot_date and lot_exp and lot_exp < lot_date:
            raise serializers.ValidationError({'lot_exp': 'Expiry date cannot be before the received date'})
        return attrs
