from django.contrib import admin
from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ['action', 'model_name', 'object_id', 'object_name', 'employee_id', 'ip_address', 'created_at']
    list_filter = ['action', 'model_name', 'created_at']
    search_fields = ['object_id', 'object_name', 'employee_id']
    ordering = ['-created_at']
    readonly_fields = ['action', 'model_name', 'object_id', 'object_name', 'employee_id', 'changes', 'ip_address', 'created_at']
