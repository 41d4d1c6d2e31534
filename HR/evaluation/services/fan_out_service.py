import logging
from typing import List

from django.db import transaction

from HR.evaluation.models import (
    EvaluationInstance,
    EvaluationKind,
    EvaluationStatus,
    EvaluationType,
)
from .directory_service import DirectoryService

logger = logging.getLogger(__name__)


class FanOutService:
    """
    Creates assessor work when an employee completes a SELF evaluation.

    - COMPETENCY: one ASSESSOR evaluation per active assessor in the organization
    - APPRAISAL: one ASSESSOR evaluation per assessor assigned to the employee

    The per-cycle unique constraint on ASSESSOR evaluations is the dedup key,
    so repeated or concurrent fan-outs never create duplicates.
    """

    @staticmethod
    def resolve_assessors(evaluation: EvaluationInstance) -> List:
        if evaluation.kind == EvaluationKind.COMPETENCY:
            assessors = DirectoryService.assessors_in(evaluation.organization_id)
        else:
            assessors = DirectoryService.assessors_assigned_to(evaluation.employee)
        return [assessor for assessor in assessors if assessor.pk != evaluation.employee_id]

    @classmethod
    def fan_out(cls, evaluation: EvaluationInstance) -> List[EvaluationInstance]:
        """
        Create the PENDING ASSESSOR evaluations for a completed SELF evaluation.

        Must run inside the transaction that completed ``evaluation``. Each
        create is isolated in its own savepoint and an existing row counts as
        already done.

        Returns:
            Newly created evaluations only
        """
        if evaluation.type != EvaluationType.SELF:
            raise ValueError("Fan-out only applies to SELF evaluations")

        created_instances = []
        with transaction.atomic():
            for assessor in cls.resolve_assessors(evaluation):
                instance, created = EvaluationInstance.objects.get_or_create(
                    organization_id=evaluation.organization_id,
                    type=EvaluationType.ASSESSOR,
                    kind=evaluation.kind,
                    employee_id=evaluation.employee_id,
                    assessor=assessor,
                    cycle=evaluation.cycle,
                    defaults={'status': EvaluationStatus.PENDING},
                )
                if created:
                    created_instances.append(instance)

        logger.info(
            f"Fan-out for evaluation {evaluation.pk} created "
            f"{len(created_instances)} assessor evaluation(s)"
        )
        return created_instances
