import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from HR.evaluation.default_questions import DEFAULT_APPRAISAL_QUESTIONS, question_key
from HR.evaluation.dtos import CompetencyCreateDTO
from HR.evaluation.models import AppraisalQuestion, Competency

logger = logging.getLogger(__name__)


class CompetencyService:
    """Service for the per-organization competency catalogue"""

    @staticmethod
    def list_competencies(organization, query_params=None):
        queryset = Competency.objects.in_organization(organization)
        if query_params:
            queryset = queryset.filter_by_search_params(query_params)
        return queryset.order_by('id')

    @staticmethod
    @transaction.atomic
    def create(user, dto: CompetencyCreateDTO) -> Competency:
        """
        Add a competency to the caller's organization.

        Validates:
        - Name is unique within the organization
        """
        name = dto.name.strip()
        if Competency.objects.in_organization(user.organization_id).filter(name__iexact=name).exists():
            raise ValidationError({'name': f'Competency "{name}" already exists'})

        competency = Competency(
            organization_id=user.organization_id,
            name=name,
            description=dto.description or '',
            created_by=user,
            updated_by=user,
        )
        competency.full_clean()
        competency.save()
        return competency


class AppraisalQuestionService:
    """Service for the appraisal questionnaire"""

    @staticmethod
    @transaction.atomic
    def ensure_default_questions(organization) -> int:
        """
        Seed the default questionnaire when the organization has no questions.

        Returns:
            Number of questions created
        """
        organization_id = getattr(organization, 'pk', organization)
        if AppraisalQuestion.objects.in_organization(organization_id).exists():
            return 0

        questions = [
            AppraisalQuestion(
                organization_id=organization_id,
                key=question_key(question['title']),
                order=index,
                **question
            )
            for index, question in enumerate(DEFAULT_APPRAISAL_QUESTIONS, start=1)
        ]
        AppraisalQuestion.objects.bulk_create(questions, ignore_conflicts=True)
        logger.info(f"Seeded {len(questions)} appraisal questions for organization {organization_id}")
        return len(questions)

    @staticmethod
    def list_questions(organization):
        return AppraisalQuestion.objects.in_organization(organization).order_by('order', 'id')
