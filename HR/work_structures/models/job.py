from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from core.base.models import TimeStampedMixin
from .organization import Organization, Department


class Job(TimeStampedMixin, models.Model):
    """
    Job role within an organization, optionally attached to a department.

    Gap analysis groups employees by job role and, through the job, by
    department.
    """
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name='jobs'
    )
    department = models.ForeignKey(
        Department,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='jobs'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'hr_job'
        verbose_name = 'Job'
        verbose_name_plural = 'Jobs'
        ordering = ['organization', 'title']

    def __str__(self):
        return self.title

    def clean(self):
        super().clean()
        if self.department_id and self.department.organization_id != self.organization_id:
            raise ValidationError({'department': 'Department belongs to a different organization'})


class EmployeeJobAssignment(models.Model):
    """
    Links an employee to a job. The most recently created assignment is the
    employee's current job.
    """
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name='job_assignments'
    )
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='job_assignments'
    )
    job = models.ForeignKey(
        Job,
        on_delete=models.CASCADE,
        related_name='employee_assignments'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'hr_employee_job_assignment'
        verbose_name = 'Employee Job Assignment'
        verbose_name_plural = 'Employee Job Assignments'
        ordering = ['employee', '-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['organization', 'employee', 'job'],
                name='unique_employee_job_assignment'
            ),
        ]

    def __str__(self):
        return f"{self.employee} -> {self.job}"
