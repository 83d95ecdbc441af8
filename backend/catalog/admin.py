from django.contrib import admin
from django.utils.html import format_html
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['product_name', 'product_id', 'product_type', 'product_unit', 'product_quantity', 'threshold', 'image_preview', 'created_at']
    list_filter = ['product_type', 'created_at']
    search_fields = ['product_name', 'product_id']
    ordering = ['product_name']
    readonly_fields = ['product_id', 'product_image', 'created_at', 'updated_at']

    def image_preview(self, obj):
        if not obj.product_image:
            return '-'
        return format_html('<img src="/product/{}" style="height: 40px;" />', obj.product_image)
    image_preview.short_description = 'Image'
