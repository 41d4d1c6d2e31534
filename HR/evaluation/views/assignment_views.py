from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.db import transaction
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404

from core.user_accounts.decorators import require_role, require_role_for_methods
from core.user_accounts.models import UserRole
from HR.evaluation.models import AssessorAssignment
from HR.evaluation.services import AssessorAssignmentService
from HR.evaluation.serializers import (
    AssessorAssignmentSerializer,
    AssessorAssignmentCreateSerializer,
    AssessorAssignmentUpdateSerializer,
    AssessorAssignmentFilterSerializer,
)
from hr_platform.pagination import auto_paginate


@api_view(['GET', 'POST'])
@require_role_for_methods({'POST': (UserRole.HR,)})
@auto_paginate
def assignment_list(request):
    """
    List assessor assignments or create a new one.

    GET /hr/evaluation/assignments/
    - Filters: assessor_id, employee_id, search
    - HR sees all, assessors their assessees, employees their assessors

    POST /hr/evaluation/assignments/  (HR only)
    """
    if request.method == 'GET':
        filter_serializer = AssessorAssignmentFilterSerializer(data=request.query_params)
        if not filter_serializer.is_valid():
            return Response(filter_serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        assignments = AssessorAssignmentService.list_for_user(request.user, filter_serializer.validated_data)
        serializer = AssessorAssignmentSerializer(assignments, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = AssessorAssignmentCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            dto = serializer.to_dto()
            with transaction.atomic():
                assignment = AssessorAssignmentService.create(request.user, dto)
            read_serializer = AssessorAssignmentSerializer(assignment)
            return Response(read_serializer.data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_role(UserRole.HR)
def assignment_detail(request, pk):
    """
    Retrieve, update or delete an assessor assignment (HR only).

    Changing assignments does not touch evaluations that already exist.
    """
    assignment = get_object_or_404(
        AssessorAssignment.objects.in_organization(request.user.organization_id), pk=pk
    )

    if request.method == 'GET':
        serializer = AssessorAssignmentSerializer(assignment)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['assignment_id'] = assignment.pk

        serializer = AssessorAssignmentUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                dto = serializer.to_dto()
                with transaction.atomic():
                    updated_assignment = AssessorAssignmentService.update(request.user, dto)
                read_serializer = AssessorAssignmentSerializer(updated_assignment)
                return Response(read_serializer.data, status=status.HTTP_200_OK)
            except ValidationError as e:
                error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
                return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    elif request.method == 'DELETE':
        try:
            with transaction.atomic():
                AssessorAssignmentService.delete(request.user, assignment.pk)
            return Response(status=status.HTTP_204_NO_CONTENT)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
