from django.urls import path
from .views import product_lots, lot_detail, add_lot

urlpatterns = [
    path('product/<str:product_id>/lots', product_lots, name='product-lots'),
    path('lot-detail/<str:lot_id>', lot_detail, name='lot-detail'),
    path('add-lot', add_lot, name='add-lot'),
]
