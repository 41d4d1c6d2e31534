from django.db import models

from core.base.models import TimeStampedMixin


class Organization(TimeStampedMixin, models.Model):
    """
    Tenant root. Every user, job and evaluation belongs to exactly one
    organization and all reads are scoped by it.

    Fields:
    - name: Display name
    - slug: Unique URL-safe identifier
    """
    name = models.CharField(max_length=255)
    slug = models.SlugField(
        max_length=100,
        unique=True,
        help_text="Unique organization identifier"
    )

    class Meta:
        db_table = 'hr_organization'
        verbose_name = 'Organization'
        verbose_name_plural = 'Organizations'
        ordering = ['name']

    def __str__(self):
        return self.name


class Department(TimeStampedMixin, models.Model):
    """Department inside an organization; jobs hang off departments."""
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name='departments'
    )
    name = models.CharField(max_length=255)

    class Meta:
        db_table = 'hr_department'
        verbose_name = 'Department'
        verbose_name_plural = 'Departments'
        ordering = ['organization', 'name']
        indexes = [
            models.Index(fields=['organization', 'name'], name='hr_dept_org_name_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.organization})"
