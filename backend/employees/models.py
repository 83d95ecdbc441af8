import uuid

from django.db import models


def generate_employee_id():
    return f"EMP-{uuid.uuid4()}"


class Employee(models.Model):
    """Farm staff. `employee_image` holds the stored avatar filename."""
    ROLE_CHOICES = [
        ('clerical', 'Clerical'),
        ('manager', 'Manager'),
        ('farmer', 'Farmer'),
    ]

    employee_id = models.CharField(max_length=64, primary_key=True, default=generate_employee_id, editable=False)
    employee_fname = models.CharField(max_length=100)
    employee_lname = models.CharField(max_length=100)
    employee_role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='clerical')
    employee_image = models.CharField(max_length=255, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.employee_fname} {self.employee_lname}"

    class Meta:
        db_table = 'employees'
