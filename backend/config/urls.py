"""
URL configuration for backend project.

JSON routes live under /api/. Uploaded images are served from their upload
directories at /product/<filename> and /avatar/<filename>.
"""
from django.contrib import admin
from django.urls import path, include, re_path
from backend.core.views import uploaded_image

admin.site.site_header = "Shrimp Farm Inventory Admin"
admin.site.site_title = "Shrimp Farm Inventory Admin Portal"
admin.site.index_title = "Welcome to the Shrimp Farm Inventory Admin Portal"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('backend.core.urls')),
    path('api/', include('backend.catalog.urls')),
    path('api/', include('backend.inventory.urls')),
    path('api/', include('backend.employees.urls')),
    path('api/', include('backend.orders.urls')),
    re_path(r'^product/(?P<path>.*)$', uploaded_image, {'directory_setting': 'PRODUCT_IMAGE_DIR'}),
    re_path(r'^avatar/(?P<path>.*)$', uploaded_image, {'directory_setting': 'AVATAR_IMAGE_DIR'}),
]
