from django.contrib import admin
from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['employee_id', 'employee_fname', 'employee_lname', 'employee_role', 'is_active', 'created_at']
    list_filter = ['employee_role', 'is_active']
    search_fields = ['employee_id', 'employee_fname', 'employee_lname']
    ordering = ['employee_fname', 'employee_lname']
    readonly_fields = ['employee_id', 'employee_image', 'created_at']
