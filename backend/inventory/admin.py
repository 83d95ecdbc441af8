from django.contrib import admin
from .models import ProductLot


@admin.register(ProductLot)
class ProductLotAdmin(admin.ModelAdmin):
    list_display = ['lot_id', 'product_id', 'lot_date', 'lot_exp', 'lot_quantity', 'created_at']
    list_filter = ['lot_date', 'lot_exp']
    search_fields = ['lot_id', 'product__product_name', 'product__product_id']
    ordering = ['-lot_date']
    readonly_fields = ['lot_id', 'created_at']
