from typing import Dict, Iterable, List, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError

from core.user_accounts.models import UserRole
from HR.evaluation.models import AssessorAssignment
from HR.work_structures.models import EmployeeJobAssignment, Job

User = get_user_model()


class DirectoryService:
    """
    Read access to the people and structure records the evaluation workflow
    depends on: users and roles, assessor assignments, and job placement.
    """

    @staticmethod
    def get_member(organization_id: int, user_id: int, field: str, role: Optional[str] = None):
        """
        Resolve an active user of an organization.

        Args:
            organization_id: Tenant the user must belong to
            user_id: User primary key
            field: Request field name used in the error message
            role: Optional UserRole the user must hold

        Raises:
            ValidationError: keyed by ``field`` when no such member exists
        """
        try:
            user = User.objects.get(pk=user_id, organization_id=organization_id, is_active=True)
        except User.DoesNotExist:
            raise ValidationError({field: 'User not found in this organization'})

        if role is not None and user.role != role:
            raise ValidationError({field: f'User does not hold the {role} role'})
        return user

    @staticmethod
    def assessors_in(organization) -> List:
        """Every active ASSESSOR of the organization."""
        return list(User.objects.assessors_in(organization))

    @staticmethod
    def assessors_assigned_to(employee) -> List:
        """Active assessors linked to ``employee`` through AssessorAssignment."""
        assessor_ids = AssessorAssignment.objects.in_organization(
            employee.organization_id
        ).for_employee(employee).values('assessor_id')
        return list(
            User.objects.filter(
                pk__in=assessor_ids,
                role=UserRole.ASSESSOR,
                is_active=True,
            ).order_by('id')
        )

    @staticmethod
    def current_jobs(employee_ids: Iterable[int]) -> Dict[int, Job]:
        """
        Map employee id to the job of their most recent job assignment.
        Employees without an assignment are absent from the result.
        """
        assignments = EmployeeJobAssignment.objects.filter(
            employee_id__in=set(employee_ids)
        ).select_related('job', 'job__department').order_by('employee_id', '-created_at', '-id')

        jobs = {}
        for assignment in assignments:
            jobs.setdefault(assignment.employee_id, assignment.job)
        return jobs
