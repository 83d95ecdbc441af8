from rest_framework import serializers
from .models import Order, OrderItem


class OrderSerializer(serializers.ModelSerializer):
    employee_id = serializers.CharField(read_only=True, allow_null=True)
    employee_fname = serializers.CharField(source='employee.employee_fname', read_only=True, default=None)
    employee_lname = serializers.CharField(source='employee.employee_lname', read_only=True, default=None)
    employee_image = serializers.CharField(source='employee.employee_image', read_only=True, default=None)

    class Meta:
        model = Order
        fields = ['order_id', 'order_date', 'order_status', 'employee_id',
                  'employee_fname', 'employee_lname', 'employee_image']


class OrderLineSerializer(serializers.ModelSerializer):
    """One row per requested product, repeating the order header and requester"""
    order_id = serializers.CharField(read_only=True)
    order_date = serializers.DateField(source='order.order_date', read_only=True)
    order_status = serializers.CharField(source='order.order_status', read_only=True)
    employee_id = serializers.CharField(source='order.employee_id', read_only=True, default=None)
    employee_fname = serializers.CharField(source='order.employee.employee_fname', read_only=True, default=None)
    employee_lname = serializers.CharField(source='order.employee.employee_lname', read_only=True, default=None)
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(source='product.product_name', read_only=True)
    product_image = serializers.CharField(source='product.product_image', read_only=True, default=None)
    unit_name = serializers.CharField(source='product.product_unit', read_only=True)

    class Meta:
        model = OrderItem
        fields = ['order_id', 'order_date', 'order_status', 'employee_id', 'employee_fname', 'employee_lname',
                  'product_id', 'product_name', 'product_image', 'request_quantity', 'unit_name']


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.CharField()

    def validate_status(self, value):
        normalized = Order.normalize_status(value)
        if normalized is None:
            raise serializers.ValidationError(f"Unknown status '{value}'")
        return normalized
