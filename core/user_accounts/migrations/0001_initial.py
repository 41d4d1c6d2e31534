import core.user_accounts.models
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('work_structures', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CustomUser',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('email', models.EmailField(db_index=True, max_length=254, unique=True)),
                ('name', models.CharField(max_length=255)),
                ('role', models.CharField(choices=[('EMPLOYEE', 'Employee'), ('ASSESSOR', 'Assessor'), ('HR', 'HR')], db_index=True, default='EMPLOYEE', help_text='Platform role (EMPLOYEE, ASSESSOR or HR)', max_length=10)),
                ('is_active', models.BooleanField(default=True)),
                ('date_joined', models.DateTimeField(auto_now_add=True)),
                ('organization', models.ForeignKey(help_text='Tenant this user belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='users', to='work_structures.organization')),
            ],
            options={
                'verbose_name': 'User',
                'verbose_name_plural': 'Users',
                'db_table': 'custom_users',
                'indexes': [models.Index(fields=['organization', 'role'], name='user_org_role_idx')],
            },
            managers=[
                ('objects', core.user_accounts.models.CustomUserManager()),
            ],
        ),
    ]
