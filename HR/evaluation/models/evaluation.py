from django.conf import settings
from django.db import models
from django.db.models import Q

from core.base.models import AuditMixin
from HR.evaluation.evaluation_config import default_cycle
from HR.evaluation.managers import EvaluationInstanceManager


class EvaluationType(models.TextChoices):
    SELF = 'SELF', 'Self'
    ASSESSOR = 'ASSESSOR', 'Assessor'


class EvaluationKind(models.TextChoices):
    COMPETENCY = 'COMPETENCY', 'Competency Assessment'
    APPRAISAL = 'APPRAISAL', 'Performance Appraisal'


class EvaluationStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    COMPLETED = 'COMPLETED', 'Completed'
    REVIEWED = 'REVIEWED', 'Reviewed'


FINISHED_STATUSES = (EvaluationStatus.COMPLETED, EvaluationStatus.REVIEWED)


class EvaluationInstance(AuditMixin):
    """
    One evaluation of one employee, either by the employee (SELF) or by an
    assessor (ASSESSOR), for a competency assessment or a performance appraisal.

    Status only moves forward through
    PENDING -> IN_PROGRESS -> COMPLETED -> REVIEWED and is changed exclusively
    by EvaluationLifecycleService.

    Uniqueness per cycle:
    - one SELF instance per (organization, employee, kind, cycle)
    - one ASSESSOR instance per (organization, employee, assessor, kind, cycle)
    """
    organization = models.ForeignKey(
        'work_structures.Organization',
        on_delete=models.CASCADE,
        related_name='evaluations'
    )
    type = models.CharField(max_length=10, choices=EvaluationType.choices)
    kind = models.CharField(max_length=12, choices=EvaluationKind.choices)
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='evaluations',
        help_text="Employee being evaluated"
    )
    assessor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='assessor_evaluations',
        help_text="Set only for ASSESSOR evaluations"
    )
    cycle = models.CharField(
        max_length=32,
        default=default_cycle,
        help_text="Evaluation period label"
    )
    status = models.CharField(
        max_length=12,
        choices=EvaluationStatus.choices,
        default=EvaluationStatus.PENDING,
        db_index=True
    )
    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)

    objects = EvaluationInstanceManager()

    class Meta:
        db_table = 'hr_evaluation_instance'
        verbose_name = 'Evaluation'
        verbose_name_plural = 'Evaluations'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['organization', 'kind', 'status'], name='eval_org_kind_status_idx'),
            models.Index(fields=['organization', 'employee'], name='eval_org_employee_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(type=EvaluationType.SELF, assessor__isnull=True) |
                    Q(type=EvaluationType.ASSESSOR, assessor__isnull=False)
                ),
                name='evaluation_assessor_matches_type'
            ),
            models.UniqueConstraint(
                fields=['organization', 'employee', 'kind', 'cycle'],
                condition=Q(type=EvaluationType.SELF),
                name='unique_self_evaluation_per_cycle'
            ),
            models.UniqueConstraint(
                fields=['organization', 'employee', 'assessor', 'kind', 'cycle'],
                condition=Q(type=EvaluationType.ASSESSOR),
                name='unique_assessor_evaluation_per_cycle'
            ),
        ]

    def __str__(self):
        if self.type == EvaluationType.SELF:
            return f"{self.get_kind_display()} (self) - {self.employee} [{self.cycle}]"
        return f"{self.get_kind_display()} by {self.assessor} - {self.employee} [{self.cycle}]"

    def is_self(self):
        return self.type == EvaluationType.SELF

    def is_finished(self):
        return self.status in FINISHED_STATUSES
