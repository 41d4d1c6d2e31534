import logging
from typing import List, Tuple

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from core.user_accounts.models import UserRole
from HR.evaluation import access
from HR.evaluation.dtos import (
    SelfEvaluationCreateDTO,
    AssessorEvaluationCreateDTO,
    EvaluationFilterDTO,
)
from HR.evaluation.evaluation_config import default_cycle
from HR.evaluation.exceptions import EvaluationNotFound, EvaluationForbidden, InvalidTransition
from HR.evaluation.models import (
    EvaluationInstance,
    EvaluationKind,
    EvaluationStatus,
    EvaluationType,
    FINISHED_STATUSES,
)
from .directory_service import DirectoryService
from .fan_out_service import FanOutService

logger = logging.getLogger(__name__)


class EvaluationLifecycleService:
    """
    Owns the evaluation status machine.

        PENDING --start--> IN_PROGRESS --complete--> COMPLETED --review--> REVIEWED

    Every transition locks the evaluation row and runs in one transaction.
    Completing a SELF evaluation fans out assessor evaluations inside that
    same transaction.
    """

    # ----------------------
    # Lookup
    # ----------------------

    @staticmethod
    def fetch_in_organization(user, evaluation_id, lock=False) -> EvaluationInstance:
        queryset = EvaluationInstance.objects.in_organization(user.organization_id)
        if lock:
            queryset = queryset.select_for_update()
        try:
            return queryset.get(pk=evaluation_id)
        except EvaluationInstance.DoesNotExist:
            raise EvaluationNotFound()

    @classmethod
    def get_for_user(cls, user, evaluation_id) -> EvaluationInstance:
        """
        Load an evaluation the caller may see.

        Raises:
            EvaluationNotFound: missing or in another organization
            EvaluationForbidden: exists but is not visible to the caller
        """
        evaluation = cls.fetch_in_organization(user, evaluation_id)
        if not access.can_see(user, evaluation):
            raise EvaluationForbidden()
        return evaluation

    @classmethod
    def _lock_for(cls, user, evaluation_id, target) -> EvaluationInstance:
        evaluation = cls.fetch_in_organization(user, evaluation_id, lock=True)
        if not access.can_mutate(user, evaluation, target):
            raise EvaluationForbidden()
        return evaluation

    @staticmethod
    def list_for_user(user, filters: EvaluationFilterDTO):
        """Evaluations visible to ``user``, newest first."""
        queryset = EvaluationInstance.objects.visible_to(user).with_people()

        if filters.kind:
            queryset = queryset.filter(kind=filters.kind)
        if filters.type:
            queryset = queryset.filter(type=filters.type)
        if filters.status:
            queryset = queryset.filter(status=filters.status)
        if filters.employee_id:
            queryset = queryset.filter(employee_id=filters.employee_id)
        if filters.cycle:
            queryset = queryset.filter(cycle=filters.cycle)
        if filters.search:
            queryset = queryset.filter_by_search_params({'search': filters.search})

        return queryset.order_by('-created_at', '-id')

    # ----------------------
    # Creation
    # ----------------------

    @staticmethod
    @transaction.atomic
    def create_self(user, dto: SelfEvaluationCreateDTO) -> Tuple[EvaluationInstance, bool]:
        """
        Create the SELF evaluation for an employee and cycle, or return the
        existing one.

        Employees create their own; HR may create one for any member of the
        organization. Assessors cannot create SELF evaluations.

        Returns:
            (evaluation, created)
        """
        if user.role == UserRole.ASSESSOR:
            raise EvaluationForbidden('Assessors cannot create self evaluations')

        if dto.employee_id is None or dto.employee_id == user.pk:
            employee = user
        elif user.role == UserRole.HR:
            employee = DirectoryService.get_member(user.organization_id, dto.employee_id, 'employee_id')
        else:
            raise EvaluationForbidden('Employees can only create their own self evaluation')

        evaluation, created = EvaluationInstance.objects.get_or_create(
            organization_id=user.organization_id,
            type=EvaluationType.SELF,
            kind=dto.kind,
            employee=employee,
            cycle=dto.cycle or default_cycle(),
            defaults={'created_by': user, 'updated_by': user},
        )
        if created:
            logger.info(f"Created self evaluation {evaluation.pk} for employee {employee.pk}")
        return evaluation, created

    @staticmethod
    @transaction.atomic
    def create_assessor(user, dto: AssessorEvaluationCreateDTO) -> Tuple[EvaluationInstance, bool]:
        """
        Create an ASSESSOR evaluation, or return the existing one.

        Assessors create their own (assessor_id defaults to the caller); for
        appraisals they must be assigned to the employee. HR names the
        assessor explicitly.

        Returns:
            (evaluation, created)
        """
        if user.role == UserRole.EMPLOYEE:
            raise EvaluationForbidden('Employees cannot create assessor evaluations')

        employee = DirectoryService.get_member(user.organization_id, dto.employee_id, 'employee_id')

        if user.role == UserRole.ASSESSOR:
            if dto.assessor_id is not None and dto.assessor_id != user.pk:
                raise EvaluationForbidden('Assessors can only create their own evaluations')
            assessor = user
            if dto.kind == EvaluationKind.APPRAISAL and not access.is_assigned(user, employee.pk):
                raise EvaluationForbidden('You are not assigned to this employee')
        else:
            if dto.assessor_id is None:
                raise ValidationError({'assessor_id': 'This field is required.'})
            assessor = DirectoryService.get_member(
                user.organization_id, dto.assessor_id, 'assessor_id', role=UserRole.ASSESSOR
            )

        if assessor.pk == employee.pk:
            raise ValidationError({'employee_id': 'An employee cannot assess themselves'})

        evaluation, created = EvaluationInstance.objects.get_or_create(
            organization_id=user.organization_id,
            type=EvaluationType.ASSESSOR,
            kind=dto.kind,
            employee=employee,
            assessor=assessor,
            cycle=dto.cycle or default_cycle(),
            defaults={'created_by': user, 'updated_by': user},
        )
        if created:
            logger.info(
                f"Created assessor evaluation {evaluation.pk} for employee {employee.pk} "
                f"by assessor {assessor.pk}"
            )
        return evaluation, created

    # ----------------------
    # Transitions
    # ----------------------

    @classmethod
    def start(cls, user, evaluation_id) -> EvaluationInstance:
        """
        PENDING -> IN_PROGRESS. Starting an IN_PROGRESS evaluation is a no-op.

        Raises:
            InvalidTransition: evaluation already COMPLETED or REVIEWED
        """
        with transaction.atomic():
            evaluation = cls._lock_for(user, evaluation_id, access.START)

            if evaluation.status == EvaluationStatus.IN_PROGRESS:
                return evaluation
            if evaluation.status != EvaluationStatus.PENDING:
                raise InvalidTransition(f"Cannot start an evaluation that is {evaluation.status}")

            evaluation.status = EvaluationStatus.IN_PROGRESS
            if evaluation.started_at is None:
                evaluation.started_at = timezone.now()
            evaluation.updated_by = user
            evaluation.save(update_fields=['status', 'started_at', 'updated_by', 'updated_at'])

        return evaluation

    @classmethod
    def complete(cls, user, evaluation_id) -> Tuple[EvaluationInstance, List[EvaluationInstance]]:
        """
        Move an evaluation to COMPLETED from any earlier status.

        A REVIEWED evaluation is left untouched. When a SELF evaluation enters
        COMPLETED for the first time, assessor evaluations are fanned out in
        the same transaction.

        Returns:
            (evaluation, newly created assessor evaluations)
        """
        with transaction.atomic():
            evaluation = cls._lock_for(user, evaluation_id, access.COMPLETE)

            if evaluation.status == EvaluationStatus.REVIEWED:
                return evaluation, []

            previous_status = evaluation.status
            now = timezone.now()
            evaluation.status = EvaluationStatus.COMPLETED
            if evaluation.started_at is None:
                evaluation.started_at = now
            if evaluation.completed_at is None:
                evaluation.completed_at = now
            evaluation.updated_by = user
            evaluation.save(update_fields=['status', 'started_at', 'completed_at', 'updated_by', 'updated_at'])

            created_instances = []
            if evaluation.is_self() and previous_status not in FINISHED_STATUSES:
                created_instances = FanOutService.fan_out(evaluation)

        logger.info(f"Evaluation {evaluation.pk} completed by user {user.pk}")
        return evaluation, created_instances

    @classmethod
    def review(cls, user, evaluation_id) -> EvaluationInstance:
        """
        COMPLETED -> REVIEWED. Reviewing a REVIEWED evaluation is a no-op.

        Raises:
            InvalidTransition: evaluation not yet COMPLETED
        """
        with transaction.atomic():
            evaluation = cls._lock_for(user, evaluation_id, access.REVIEW)

            if evaluation.status == EvaluationStatus.REVIEWED:
                return evaluation
            if evaluation.status != EvaluationStatus.COMPLETED:
                raise InvalidTransition(f"Cannot review an evaluation that is {evaluation.status}")

            evaluation.status = EvaluationStatus.REVIEWED
            evaluation.reviewed_at = timezone.now()
            evaluation.updated_by = user
            evaluation.save(update_fields=['status', 'reviewed_at', 'updated_by', 'updated_at'])

        return evaluation

    @classmethod
    def transition(cls, user, evaluation_id, target_status) -> Tuple[EvaluationInstance, List[EvaluationInstance]]:
        """
        Apply the transition leading to ``target_status``.

        Returns:
            (evaluation, newly created assessor evaluations)
        """
        if target_status == EvaluationStatus.IN_PROGRESS:
            return cls.start(user, evaluation_id), []
        if target_status == EvaluationStatus.COMPLETED:
            return cls.complete(user, evaluation_id)
        if target_status == EvaluationStatus.REVIEWED:
            return cls.review(user, evaluation_id), []
        cls.get_for_user(user, evaluation_id)
        raise InvalidTransition(f"Cannot move an evaluation to {target_status}")
