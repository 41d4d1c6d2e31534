"""
Evaluation access rules.

Every read and write of an EvaluationInstance goes through these checks.
``can_see`` and ``visible_q`` express the same visibility rule, once for a
loaded instance and once as a queryset filter.

Rules (always within the caller's organization):
- HR: sees and mutates everything.
- EMPLOYEE: sees instances where they are the employee; mutates only their
  SELF instances.
- ASSESSOR: sees, mutates and reviews ASSESSOR instances assigned to them;
  sees SELF instances of employees assigned to them once COMPLETED or
  REVIEWED, and may review those.
"""
from django.db.models import Q

from core.user_accounts.models import UserRole
from HR.evaluation.models import (
    AssessorAssignment,
    EvaluationType,
    FINISHED_STATUSES,
)

START = 'start'
COMPLETE = 'complete'
REVIEW = 'review'
RATING = 'rating'
EMPLOYEE_SIDE = 'employee_side'
ASSESSOR_SIDE = 'assessor_side'

TARGETS = (START, COMPLETE, REVIEW, RATING, EMPLOYEE_SIDE, ASSESSOR_SIDE)

_EMPLOYEE_TARGETS = {START, COMPLETE, RATING, EMPLOYEE_SIDE}
_ASSESSOR_TARGETS = {START, COMPLETE, REVIEW, RATING, ASSESSOR_SIDE}


def is_assigned(assessor, employee_id):
    return AssessorAssignment.objects.filter(
        organization_id=assessor.organization_id,
        assessor=assessor,
        employee_id=employee_id,
    ).exists()


def visible_q(user):
    """Q object selecting the evaluations ``user`` may see."""
    in_org = Q(organization_id=user.organization_id)

    if user.role == UserRole.HR:
        return in_org

    if user.role == UserRole.EMPLOYEE:
        return in_org & Q(employee=user)

    if user.role == UserRole.ASSESSOR:
        assigned_employees = AssessorAssignment.objects.filter(
            organization_id=user.organization_id,
            assessor=user,
        ).values('employee_id')
        return in_org & (
            Q(type=EvaluationType.ASSESSOR, assessor=user) |
            Q(
                type=EvaluationType.SELF,
                employee_id__in=assigned_employees,
                status__in=FINISHED_STATUSES,
            )
        )

    return Q(pk__in=[])


def can_see(user, evaluation):
    if evaluation.organization_id != user.organization_id:
        return False

    if user.role == UserRole.HR:
        return True

    if user.role == UserRole.EMPLOYEE:
        return evaluation.employee_id == user.pk

    if user.role == UserRole.ASSESSOR:
        if evaluation.type == EvaluationType.ASSESSOR:
            return evaluation.assessor_id == user.pk
        return evaluation.is_finished() and is_assigned(user, evaluation.employee_id)

    return False


def _side_allowed(evaluation, target):
    # Each side of a response belongs to exactly one instance type
    if target == EMPLOYEE_SIDE:
        return evaluation.type == EvaluationType.SELF
    if target == ASSESSOR_SIDE:
        return evaluation.type == EvaluationType.ASSESSOR
    return True


def can_mutate(user, evaluation, target):
    """
    Whether ``user`` may apply ``target`` to ``evaluation``.

    Args:
        user: Caller
        evaluation: EvaluationInstance
        target: One of TARGETS
    """
    if target not in TARGETS:
        raise ValueError(f"Unknown access target: {target}")

    if evaluation.organization_id != user.organization_id:
        return False

    if not _side_allowed(evaluation, target):
        return False

    if user.role == UserRole.HR:
        return True

    if user.role == UserRole.EMPLOYEE:
        return (
            evaluation.type == EvaluationType.SELF and
            evaluation.employee_id == user.pk and
            target in _EMPLOYEE_TARGETS
        )

    if user.role == UserRole.ASSESSOR:
        if evaluation.type == EvaluationType.ASSESSOR:
            return evaluation.assessor_id == user.pk and target in _ASSESSOR_TARGETS
        return target == REVIEW and is_assigned(user, evaluation.employee_id)

    return False
