from django.db import models


class AuditLog(models.Model):
    """Audit log for inventory changes"""
    ACTION_CHOICES = [
        ('create', 'Create'),
        ('update', 'Update'),
        ('status_change', 'Status Change'),
    ]

    action = models.CharField(max_length=50, choices=ACTION_CHOICES)
    model_name = models.CharField(max_length=100)
    object_id = models.CharField(max_length=100)
    object_name = models.CharField(max_length=255, blank=True, null=True, help_text="Human-readable name of the object (e.g., product name, order id)")
    employee_id = models.CharField(max_length=64, blank=True, null=True, help_text="Employee identifier passed along by the client, if any")
    changes = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.action} {self.model_name} {self.object_id}"

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['-created_at'], name='audit_logs_created_5b0e1a_idx'),
            models.Index(fields=['action'], name='audit_logs_action_8f2c4d_idx'),
            models.Index(fields=['model_name'], name='audit_logs_model_n_3a9e7b_idx'),
        ]
