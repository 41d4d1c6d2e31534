import django.core.validators
import django.db.models.deletion
import HR.evaluation.evaluation_config
import HR.evaluation.managers
from django.conf import settings
from django.db import migrations, models


def _audit_fields():
    return [
        ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
        ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
        ('created_by', models.ForeignKey(blank=True, help_text='User who created this record', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(app_label)s_%(class)s_created', to=settings.AUTH_USER_MODEL)),
        ('updated_by', models.ForeignKey(blank=True, help_text='User who last updated this record', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='%(app_label)s_%(class)s_updated', to=settings.AUTH_USER_MODEL)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('work_structures', '0002_employeejobassignment'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Competency',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *_audit_fields(),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='competencies', to='work_structures.organization')),
            ],
            options={
                'verbose_name': 'Competency',
                'verbose_name_plural': 'Competencies',
                'db_table': 'hr_evaluation_competency',
                'ordering': ['id'],
                'constraints': [models.UniqueConstraint(fields=('organization', 'name'), name='unique_competency_name_per_org')],
            },
        ),
        migrations.CreateModel(
            name='AppraisalQuestion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('key', models.CharField(max_length=100)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('how_to_measure', models.TextField(blank=True, default='')),
                ('good_indicator', models.TextField(blank=True, default='')),
                ('red_flag', models.TextField(blank=True, default='')),
                ('rating_criteria', models.TextField(blank=True, default='')),
                ('order', models.PositiveIntegerField(default=0)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='appraisal_questions', to='work_structures.organization')),
            ],
            options={
                'verbose_name': 'Appraisal Question',
                'verbose_name_plural': 'Appraisal Questions',
                'db_table': 'hr_evaluation_appraisal_question',
                'ordering': ['order', 'id'],
                'constraints': [models.UniqueConstraint(fields=('organization', 'key'), name='unique_question_key_per_org')],
            },
        ),
        migrations.CreateModel(
            name='EvaluationInstance',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *_audit_fields(),
                ('type', models.CharField(choices=[('SELF', 'Self'), ('ASSESSOR', 'Assessor')], max_length=10)),
                ('kind', models.CharField(choices=[('COMPETENCY', 'Competency Assessment'), ('APPRAISAL', 'Performance Appraisal')], max_length=12)),
                ('cycle', models.CharField(default=HR.evaluation.evaluation_config.default_cycle, help_text='Evaluation period label', max_length=32)),
                ('status', models.CharField(choices=[('PENDING', 'Pending'), ('IN_PROGRESS', 'In Progress'), ('COMPLETED', 'Completed'), ('REVIEWED', 'Reviewed')], db_index=True, default='PENDING', max_length=12)),
                ('started_at', models.DateTimeField(blank=True, null=True)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('reviewed_at', models.DateTimeField(blank=True, null=True)),
                ('assessor', models.ForeignKey(blank=True, help_text='Set only for ASSESSOR evaluations', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='assessor_evaluations', to=settings.AUTH_USER_MODEL)),
                ('employee', models.ForeignKey(help_text='Employee being evaluated', on_delete=django.db.models.deletion.CASCADE, related_name='evaluations', to=settings.AUTH_USER_MODEL)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='evaluations', to='work_structures.organization')),
            ],
            options={
                'verbose_name': 'Evaluation',
                'verbose_name_plural': 'Evaluations',
                'db_table': 'hr_evaluation_instance',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['organization', 'kind', 'status'], name='eval_org_kind_status_idx'),
                    models.Index(fields=['organization', 'employee'], name='eval_org_employee_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(models.Q(('assessor__isnull', True), ('type', 'SELF')), models.Q(('assessor__isnull', False), ('type', 'ASSESSOR')), _connector='OR'), name='evaluation_assessor_matches_type'),
                    models.UniqueConstraint(condition=models.Q(('type', 'SELF')), fields=('organization', 'employee', 'kind', 'cycle'), name='unique_self_evaluation_per_cycle'),
                    models.UniqueConstraint(condition=models.Q(('type', 'ASSESSOR')), fields=('organization', 'employee', 'assessor', 'kind', 'cycle'), name='unique_assessor_evaluation_per_cycle'),
                ],
            },
            managers=[
                ('objects', HR.evaluation.managers.EvaluationInstanceManager()),
            ],
        ),
        migrations.CreateModel(
            name='RatingEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('rating', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('comment', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('competency', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ratings', to='evaluation.competency')),
                ('evaluation', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ratings', to='evaluation.evaluationinstance')),
            ],
            options={
                'verbose_name': 'Rating Entry',
                'verbose_name_plural': 'Rating Entries',
                'db_table': 'hr_evaluation_rating_entry',
                'ordering': ['evaluation', 'competency', '-created_at', '-id'],
                'constraints': [models.CheckConstraint(condition=models.Q(('rating__gte', 1), ('rating__lte', 5)), name='rating_entry_in_range')],
            },
        ),
        migrations.CreateModel(
            name='QuestionResponse',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('employee_rating', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('employee_comment', models.TextField(blank=True, default='')),
                ('assessor_rating', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('assessor_comment', models.TextField(blank=True, default='')),
                ('evaluation', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='responses', to='evaluation.evaluationinstance')),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='appraisal_responses', to='work_structures.organization')),
                ('question', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='responses', to='evaluation.appraisalquestion')),
            ],
            options={
                'verbose_name': 'Question Response',
                'verbose_name_plural': 'Question Responses',
                'db_table': 'hr_evaluation_question_response',
                'ordering': ['question__order', 'question_id'],
                'constraints': [
                    models.UniqueConstraint(fields=('evaluation', 'question'), name='unique_response_per_question'),
                    models.CheckConstraint(condition=models.Q(('employee_rating__isnull', True), models.Q(('employee_rating__gte', 1), ('employee_rating__lte', 5)), _connector='OR'), name='response_employee_rating_in_range'),
                    models.CheckConstraint(condition=models.Q(('assessor_rating__isnull', True), models.Q(('assessor_rating__gte', 1), ('assessor_rating__lte', 5)), _connector='OR'), name='response_assessor_rating_in_range'),
                ],
            },
        ),
        migrations.CreateModel(
            name='AssessorAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *_audit_fields(),
                ('assessor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assessee_assignments', to=settings.AUTH_USER_MODEL)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assessor_assignments', to=settings.AUTH_USER_MODEL)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assessor_assignments', to='work_structures.organization')),
            ],
            options={
                'verbose_name': 'Assessor Assignment',
                'verbose_name_plural': 'Assessor Assignments',
                'db_table': 'hr_evaluation_assessor_assignment',
                'ordering': ['employee', 'assessor'],
                'constraints': [models.UniqueConstraint(fields=('organization', 'assessor', 'employee'), name='unique_assessor_assignment')],
            },
        ),
    ]
