from django.db import models
from django.conf import settings


class TimeStampedMixin(models.Model):
    """
    Adds creation and modification timestamps.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True


class AuditMixin(TimeStampedMixin):
    """
    Adds audit fields to track creation and modification metadata.

    Fields:
        - created_at / updated_at: From TimeStampedMixin
        - created_by: User who created the record (optional)
        - updated_by: User who last modified the record (optional)

    Usage:
        class EvaluationInstance(AuditMixin):
            status = models.CharField(max_length=20)

    Note: created_by and updated_by are set explicitly by the service layer.
    """
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_created',
        help_text="User who created this record"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_updated',
        help_text="User who last updated this record"
    )

    class Meta:
        abstract = True
