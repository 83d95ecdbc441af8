import django_filters
from django.db.models import Q
from .models import Product


class ProductFilter(django_filters.FilterSet):
    """Filter for the product list"""

    product_type = django_filters.CharFilter(field_name='product_type', lookup_expr='exact')
    search = django_filters.CharFilter(method='filter_search', label='Search')

    class Meta:
        model = Product
        fields = ['product_type', 'search']

    def filter_search(self, queryset, name, value):
        """Match every word of the search string against the product name or id"""
        if not value:
            return queryset
        for word in value.split():
            queryset = queryset.filter(Q(product_name__icontains=word) | Q(product_id__icontains=word))
        return queryset
