from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 1
    autocomplete_fields = ['product']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['order_id', 'order_date', 'order_status', 'employee', 'created_at']
    list_filter = ['order_status', 'order_date']
    search_fields = ['order_id', 'employee__employee_fname', 'employee__employee_lname']
    ordering = ['-order_date']
    readonly_fields = ['order_id', 'created_at', 'updated_at']
    inlines = [OrderItemInline]
