import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('work_structures', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='EmployeeJobAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='job_assignments', to=settings.AUTH_USER_MODEL)),
                ('job', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='employee_assignments', to='work_structures.job')),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='job_assignments', to='work_structures.organization')),
            ],
            options={
                'verbose_name': 'Employee Job Assignment',
                'verbose_name_plural': 'Employee Job Assignments',
                'db_table': 'hr_employee_job_assignment',
                'ordering': ['employee', '-created_at'],
                'constraints': [models.UniqueConstraint(fields=('organization', 'employee', 'job'), name='unique_employee_job_assignment')],
            },
        ),
    ]
