from django.urls import path
from .views import order_list, order_detail, update_order_status

urlpatterns = [
    path('orders', order_list, name='order-list'),
    path('orders/<str:order_id>', order_detail, name='order-detail'),
    path('update-order-status/<str:order_id>', update_order_status, name='update-order-status'),
]
