from django.db import models

from core.base.models import AuditMixin
from core.base.managers import OrganizationScopedQuerySet


class CompetencyQuerySet(OrganizationScopedQuerySet):
    search_fields = ('name', 'description')


class Competency(AuditMixin):
    """
    Competency rated in COMPETENCY evaluations.
    Catalogue order is creation order; gap analysis ties fall back to it.
    """
    organization = models.ForeignKey(
        'work_structures.Organization',
        on_delete=models.CASCADE,
        related_name='competencies'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')

    objects = models.Manager.from_queryset(CompetencyQuerySet)()

    class Meta:
        db_table = 'hr_evaluation_competency'
        verbose_name = 'Competency'
        verbose_name_plural = 'Competencies'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['organization', 'name'],
                name='unique_competency_name_per_org'
            ),
        ]

    def __str__(self):
        return self.name


class AppraisalQuestionQuerySet(OrganizationScopedQuerySet):
    search_fields = ('title', 'description')


class AppraisalQuestion(models.Model):
    """Performance appraisal question with its measurement guidance."""
    organization = models.ForeignKey(
        'work_structures.Organization',
        on_delete=models.CASCADE,
        related_name='appraisal_questions'
    )
    key = models.CharField(max_length=100)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    how_to_measure = models.TextField(blank=True, default='')
    good_indicator = models.TextField(blank=True, default='')
    red_flag = models.TextField(blank=True, default='')
    rating_criteria = models.TextField(blank=True, default='')
    order = models.PositiveIntegerField(default=0)

    objects = models.Manager.from_queryset(AppraisalQuestionQuerySet)()

    class Meta:
        db_table = 'hr_evaluation_appraisal_question'
        verbose_name = 'Appraisal Question'
        verbose_name_plural = 'Appraisal Questions'
        ordering = ['order', 'id']
        constraints = [
            models.UniqueConstraint(
                fields=['organization', 'key'],
                name='unique_question_key_per_org'
            ),
        ]

    def __str__(self):
        return self.title
