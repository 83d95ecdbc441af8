from django.urls import path
from .views import product_list, product_low_stock, product_detail, add_product

urlpatterns = [
    path('products', product_list, name='product-list'),
    path('products/low-stock', product_low_stock, name='product-low-stock'),
    path('product-detail/<str:product_id>', product_detail, name='product-detail'),
    path('add-product', add_product, name='add-product'),
]
