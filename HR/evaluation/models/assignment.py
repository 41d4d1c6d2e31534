from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from core.base.models import AuditMixin
from core.base.managers import OrganizationScopedQuerySet


class AssessorAssignmentQuerySet(OrganizationScopedQuerySet):
    search_fields = ('assessor__name', 'employee__name')

    def for_assessor(self, assessor):
        return self.filter(assessor=assessor)

    def for_employee(self, employee):
        return self.filter(employee=employee)


class AssessorAssignment(AuditMixin):
    """
    Assessor responsible for an employee.

    Scopes appraisal fan-out and which SELF evaluations an assessor may view
    and review.
    """
    organization = models.ForeignKey(
        'work_structures.Organization',
        on_delete=models.CASCADE,
        related_name='assessor_assignments'
    )
    assessor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='assessee_assignments'
    )
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='assessor_assignments'
    )

    objects = models.Manager.from_queryset(AssessorAssignmentQuerySet)()

    class Meta:
        db_table = 'hr_evaluation_assessor_assignment'
        verbose_name = 'Assessor Assignment'
        verbose_name_plural = 'Assessor Assignments'
        ordering = ['employee', 'assessor']
        constraints = [
            models.UniqueConstraint(
                fields=['organization', 'assessor', 'employee'],
                name='unique_assessor_assignment'
            ),
        ]

    def __str__(self):
        return f"{self.assessor} assesses {self.employee}"

    def clean(self):
        super().clean()
        if self.assessor_id and self.assessor_id == self.employee_id:
            raise ValidationError('An employee cannot be their own assessor')
