from django.core.exceptions import ValidationError
from django.db import transaction

from core.user_accounts.models import UserRole
from HR.evaluation.dtos import AssessorAssignmentCreateDTO, AssessorAssignmentUpdateDTO
from HR.evaluation.models import AssessorAssignment
from .directory_service import DirectoryService


class AssessorAssignmentService:
    """Service for the assessor assignment directory"""

    @staticmethod
    def list_for_user(user, query_params=None):
        """
        HR sees every assignment of the organization, assessors see their own
        assessees and employees see who assesses them.

        Args:
            query_params: Validated filters (assessor_id, employee_id, search)
        """
        queryset = AssessorAssignment.objects.in_organization(user.organization_id).select_related(
            'assessor', 'employee'
        )
        if user.role == UserRole.ASSESSOR:
            queryset = queryset.for_assessor(user)
        elif user.role == UserRole.EMPLOYEE:
            queryset = queryset.for_employee(user)

        if query_params:
            queryset = queryset.filter_by_search_params(query_params)
            assessor_id = query_params.get('assessor_id')
            if assessor_id:
                queryset = queryset.filter(assessor_id=assessor_id)
            employee_id = query_params.get('employee_id')
            if employee_id:
                queryset = queryset.filter(employee_id=employee_id)

        return queryset.order_by('employee__name', 'assessor__name')

    @staticmethod
    def get(user, assignment_id) -> AssessorAssignment:
        try:
            return AssessorAssignment.objects.in_organization(user.organization_id).get(pk=assignment_id)
        except AssessorAssignment.DoesNotExist:
            raise ValidationError(f"Assessor assignment with ID {assignment_id} not found")

    @staticmethod
    def _validate_pair(organization_id, assessor_id, employee_id, exclude_id=None):
        assessor = DirectoryService.get_member(organization_id, assessor_id, 'assessor_id', role=UserRole.ASSESSOR)
        employee = DirectoryService.get_member(organization_id, employee_id, 'employee_id')
        if assessor.pk == employee.pk:
            raise ValidationError({'employee_id': 'An employee cannot be their own assessor'})

        duplicates = AssessorAssignment.objects.in_organization(organization_id).filter(
            assessor=assessor, employee=employee
        )
        if exclude_id is not None:
            duplicates = duplicates.exclude(pk=exclude_id)
        if duplicates.exists():
            raise ValidationError({'employee_id': 'This assessor is already assigned to the employee'})
        return assessor, employee

    @classmethod
    @transaction.atomic
    def create(cls, user, dto: AssessorAssignmentCreateDTO) -> AssessorAssignment:
        """
        Assign an assessor to an employee.

        Validates:
        - Both users are active members of the caller's organization
        - The assessor holds the ASSESSOR role
        - The pair is not already assigned
        """
        assessor, employee = cls._validate_pair(user.organization_id, dto.assessor_id, dto.employee_id)
        return AssessorAssignment.objects.create(
            organization_id=user.organization_id,
            assessor=assessor,
            employee=employee,
            created_by=user,
            updated_by=user,
        )

    @classmethod
    @transaction.atomic
    def update(cls, user, dto: AssessorAssignmentUpdateDTO) -> AssessorAssignment:
        """Re-point either side of an assignment. Existing evaluations are unaffected."""
        assignment = cls.get(user, dto.assignment_id)
        assessor, employee = cls._validate_pair(
            user.organization_id,
            dto.assessor_id if dto.assessor_id is not None else assignment.assessor_id,
            dto.employee_id if dto.employee_id is not None else assignment.employee_id,
            exclude_id=assignment.pk,
        )
        assignment.assessor = assessor
        assignment.employee = employee
        assignment.updated_by = user
        assignment.save()
        return assignment

    @classmethod
    @transaction.atomic
    def delete(cls, user, assignment_id):
        assignment = cls.get(user, assignment_id)
        assignment.delete()
