import backend.employees.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Employee',
            fields=[
                ('employee_id', models.CharField(default=backend.employees.models.generate_employee_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('employee_fname', models.CharField(max_length=100)),
                ('employee_lname', models.CharField(max_length=100)),
                ('employee_role', models.CharField(choices=[('clerical', 'Clerical'), ('manager', 'Manager'), ('farmer', 'Farmer')], default='clerical', max_length=20)),
                ('employee_image', models.CharField(blank=True, max_length=255, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'employees',
            },
        ),
    ]
