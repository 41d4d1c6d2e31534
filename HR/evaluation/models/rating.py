from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q

from core.base.models import TimeStampedMixin

MIN_RATING = 1
MAX_RATING = 5

RATING_VALIDATORS = [MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)]


class RatingEntry(models.Model):
    """
    A single competency rating inside a COMPETENCY evaluation.

    Append-only: corrections are new rows and readers take the latest row per
    (evaluation, competency).
    """
    evaluation = models.ForeignKey(
        'evaluation.EvaluationInstance',
        on_delete=models.CASCADE,
        related_name='ratings'
    )
    competency = models.ForeignKey(
        'evaluation.Competency',
        on_delete=models.CASCADE,
        related_name='ratings'
    )
    rating = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    comment = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'hr_evaluation_rating_entry'
        verbose_name = 'Rating Entry'
        verbose_name_plural = 'Rating Entries'
        ordering = ['evaluation', 'competency', '-created_at', '-id']
        constraints = [
            models.CheckConstraint(
                condition=Q(rating__gte=MIN_RATING, rating__lte=MAX_RATING),
                name='rating_entry_in_range'
            ),
        ]

    def __str__(self):
        return f"{self.competency}: {self.rating}"


class QuestionResponse(TimeStampedMixin):
    """
    Shared employee/assessor answer to one appraisal question.

    Always attached to the employee's SELF appraisal for the cycle. The
    employee side and the assessor side are written independently.
    """
    organization = models.ForeignKey(
        'work_structures.Organization',
        on_delete=models.CASCADE,
        related_name='appraisal_responses'
    )
    evaluation = models.ForeignKey(
        'evaluation.EvaluationInstance',
        on_delete=models.CASCADE,
        related_name='responses'
    )
    question = models.ForeignKey(
        'evaluation.AppraisalQuestion',
        on_delete=models.CASCADE,
        related_name='responses'
    )
    employee_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    employee_comment = models.TextField(blank=True, default='')
    assessor_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    assessor_comment = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'hr_evaluation_question_response'
        verbose_name = 'Question Response'
        verbose_name_plural = 'Question Responses'
        ordering = ['question__order', 'question_id']
        constraints = [
            models.UniqueConstraint(
                fields=['evaluation', 'question'],
                name='unique_response_per_question'
            ),
            models.CheckConstraint(
                condition=Q(employee_rating__isnull=True) | Q(employee_rating__gte=MIN_RATING, employee_rating__lte=MAX_RATING),
                name='response_employee_rating_in_range'
            ),
            models.CheckConstraint(
                condition=Q(assessor_rating__isnull=True) | Q(assessor_rating__gte=MIN_RATING, assessor_rating__lte=MAX_RATING),
                name='response_assessor_rating_in_range'
            ),
        ]

    def __str__(self):
        return f"{self.question} ({self.employee_rating}/{self.assessor_rating})"
