from django.urls import path
from .views import employee_list, employee_detail, add_employee

urlpatterns = [
    path('employees', employee_list, name='employee-list'),
    path('employee-detail/<str:employee_id>', employee_detail, name='employee-detail'),
    path('add-employee', add_employee, name='add-employee'),
]
