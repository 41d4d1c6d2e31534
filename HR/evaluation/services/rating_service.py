from typing import Dict, Iterable, Tuple, Union

from django.core.exceptions import ValidationError
from django.db import transaction

from HR.evaluation import access
from HR.evaluation.dtos import RatingSubmitDTO
from HR.evaluation.exceptions import EvaluationForbidden, InvalidTransition
from HR.evaluation.models import (
    AppraisalQuestion,
    Competency,
    EvaluationInstance,
    EvaluationKind,
    EvaluationType,
    QuestionResponse,
    RatingEntry,
)
from HR.evaluation.models.rating import MIN_RATING, MAX_RATING
from .lifecycle_service import EvaluationLifecycleService

EMPLOYEE = 'EMPLOYEE'
ASSESSOR = 'ASSESSOR'


def validate_rating(rating, field='rating'):
    """Reject anything that is not an integer between 1 and 5."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError({field: 'Rating must be an integer'})
    if rating < MIN_RATING or rating > MAX_RATING:
        raise ValidationError({field: f'Rating must be between {MIN_RATING} and {MAX_RATING}'})


class CompetencyRatingStore:
    """Persistence of competency ratings. No authorization here."""

    @staticmethod
    def record_rating(evaluation: EvaluationInstance, competency: Competency, rating, comment='') -> RatingEntry:
        """Append a rating row; earlier rows for the same competency are kept."""
        if evaluation.kind != EvaluationKind.COMPETENCY:
            raise ValidationError({'evaluation': 'Competency ratings require a competency evaluation'})
        if competency.organization_id != evaluation.organization_id:
            raise ValidationError({'competency_id': 'Competency not found'})
        validate_rating(rating)

        return RatingEntry.objects.create(
            evaluation=evaluation,
            competency=competency,
            rating=rating,
            comment=comment or '',
        )

    @staticmethod
    def latest_ratings(evaluation_ids: Iterable[int]) -> Dict[Tuple[int, int], int]:
        """
        Latest rating per (evaluation id, competency id).
        """
        entries = RatingEntry.objects.filter(
            evaluation_id__in=list(evaluation_ids)
        ).order_by('evaluation_id', 'competency_id', '-created_at', '-id').values_list(
            'evaluation_id', 'competency_id', 'rating'
        )

        latest = {}
        for evaluation_id, competency_id, rating in entries:
            latest.setdefault((evaluation_id, competency_id), rating)
        return latest

    @classmethod
    def latest_entries_for(cls, evaluation: EvaluationInstance):
        """Current RatingEntry per competency of one evaluation, catalogue order."""
        entries = {}
        for entry in evaluation.ratings.select_related('competency').order_by('competency_id', '-created_at', '-id'):
            entries.setdefault(entry.competency_id, entry)
        return [entries[key] for key in sorted(entries)]


class AppraisalResponseStore:
    """Persistence of appraisal question responses. No authorization here."""

    @staticmethod
    def resolve_anchor(evaluation: EvaluationInstance) -> EvaluationInstance:
        """
        SELF appraisal holding the shared responses for ``evaluation``.

        Raises:
            ValidationError: an ASSESSOR appraisal whose employee has no SELF
                appraisal for the cycle
        """
        if evaluation.type == EvaluationType.SELF:
            return evaluation
        try:
            return EvaluationInstance.objects.self_evaluations().get(
                organization_id=evaluation.organization_id,
                kind=EvaluationKind.APPRAISAL,
                employee_id=evaluation.employee_id,
                cycle=evaluation.cycle,
            )
        except EvaluationInstance.DoesNotExist:
            raise ValidationError(
                {'evaluation': 'The employee has not started a self appraisal for this cycle'}
            )

    @classmethod
    def upsert_response(cls, evaluation: EvaluationInstance, question: AppraisalQuestion,
                        role: str, rating, comment='') -> Tuple[QuestionResponse, bool]:
        """
        Write one side of the shared response row.

        Args:
            role: EMPLOYEE writes employee_rating/employee_comment, ASSESSOR
                writes assessor_rating/assessor_comment. The other side is
                never touched.

        Returns:
            (response, created)
        """
        if evaluation.kind != EvaluationKind.APPRAISAL:
            raise ValidationError({'evaluation': 'Question responses require an appraisal evaluation'})
        if question.organization_id != evaluation.organization_id:
            raise ValidationError({'question_id': 'Question not found'})
        if role not in (EMPLOYEE, ASSESSOR):
            raise ValueError(f"Unknown response role: {role}")
        validate_rating(rating)

        anchor = cls.resolve_anchor(evaluation)
        with transaction.atomic():
            response, created = QuestionResponse.objects.select_for_update().get_or_create(
                evaluation=anchor,
                question=question,
                defaults={'organization_id': anchor.organization_id},
            )
            if role == EMPLOYEE:
                response.employee_rating = rating
                response.employee_comment = comment or ''
                update_fields = ['employee_rating', 'employee_comment', 'updated_at']
            else:
                response.assessor_rating = rating
                response.assessor_comment = comment or ''
                update_fields = ['assessor_rating', 'assessor_comment', 'updated_at']
            response.save(update_fields=update_fields)

        return response, created

    @staticmethod
    def responses_for(evaluation: EvaluationInstance):
        """Shared responses for an appraisal; empty while no SELF appraisal exists."""
        try:
            anchor = AppraisalResponseStore.resolve_anchor(evaluation)
        except ValidationError:
            return QuestionResponse.objects.none()
        return QuestionResponse.objects.filter(evaluation=anchor).select_related('question')


class RatingService:
    """Authorized rating submission and listing for both evaluation kinds"""

    @staticmethod
    @transaction.atomic
    def submit(user, dto: RatingSubmitDTO) -> Tuple[Union[RatingEntry, QuestionResponse], bool]:
        """
        Record a rating on an evaluation.

        Validates:
        - Evaluation exists in the caller's organization (EvaluationNotFound)
        - Caller may rate it, on the side matching the evaluation type (EvaluationForbidden)
        - Evaluation is not COMPLETED or REVIEWED (InvalidTransition)
        - Rating is an integer in [1, 5] and the competency/question belongs
          to the organization (ValidationError)

        Returns:
            (RatingEntry or QuestionResponse, created)
        """
        evaluation = EvaluationLifecycleService.fetch_in_organization(user, dto.evaluation_id, lock=True)

        side = access.EMPLOYEE_SIDE if evaluation.is_self() else access.ASSESSOR_SIDE
        if not (access.can_mutate(user, evaluation, access.RATING) and access.can_mutate(user, evaluation, side)):
            raise EvaluationForbidden()

        if evaluation.is_finished():
            raise InvalidTransition(f"Cannot rate an evaluation that is {evaluation.status}")

        validate_rating(dto.rating)

        if evaluation.kind == EvaluationKind.COMPETENCY:
            if dto.competency_id is None:
                raise ValidationError({'competency_id': 'This field is required for competency evaluations.'})
            try:
                competency = Competency.objects.in_organization(evaluation.organization_id).get(pk=dto.competency_id)
            except Competency.DoesNotExist:
                raise ValidationError({'competency_id': 'Competency not found'})
            entry = CompetencyRatingStore.record_rating(evaluation, competency, dto.rating, dto.comment)
            return entry, True

        if dto.question_id is None:
            raise ValidationError({'question_id': 'This field is required for appraisal evaluations.'})
        try:
            question = AppraisalQuestion.objects.in_organization(evaluation.organization_id).get(pk=dto.question_id)
        except AppraisalQuestion.DoesNotExist:
            raise ValidationError({'question_id': 'Question not found'})
        role = EMPLOYEE if evaluation.is_self() else ASSESSOR
        return AppraisalResponseStore.upsert_response(evaluation, question, role, dto.rating, dto.comment)

    @staticmethod
    def list_ratings(user, evaluation_id):
        """
        Ratings of a COMPETENCY evaluation (latest per competency), or the
        shared responses of an APPRAISAL evaluation.
        """
        evaluation = EvaluationLifecycleService.get_for_user(user, evaluation_id)
        if evaluation.kind == EvaluationKind.COMPETENCY:
            return evaluation, CompetencyRatingStore.latest_entries_for(evaluation)
        return evaluation, list(AppraisalResponseStore.responses_for(evaluation))

    @staticmethod
    def list_responses(user, evaluation_id):
        """Appraisal responses with question data."""
        evaluation = EvaluationLifecycleService.get_for_user(user, evaluation_id)
        if evaluation.kind != EvaluationKind.APPRAISAL:
            raise ValidationError({'evaluation': 'Only appraisal evaluations have question responses'})
        return list(AppraisalResponseStore.responses_for(evaluation))
