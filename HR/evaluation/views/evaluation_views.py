from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.db import transaction
from django.core.exceptions import ValidationError

from HR.evaluation.notifications import notify_assessors
from HR.evaluation.services import EvaluationLifecycleService
from HR.evaluation.serializers import (
    EvaluationInstanceSerializer,
    SelfEvaluationCreateSerializer,
    AssessorEvaluationCreateSerializer,
    EvaluationStatusSerializer,
    EvaluationFilterSerializer,
)
from hr_platform.pagination import auto_paginate


def _transition_response(evaluation, created_instances=()):
    data = EvaluationInstanceSerializer(evaluation).data
    data['assessor_evaluations_created'] = len(created_instances)
    return Response(data, status=status.HTTP_200_OK)


# =================================================================================================
# EVALUATION VIEWS
# =================================================================================================

@api_view(['GET'])
@auto_paginate
def evaluation_list(request):
    """
    List evaluations visible to the caller.

    GET /hr/evaluation/evaluations/
    - Filters: kind, type, status, employee_id, cycle, search
    - Employees see their own, assessors see their assigned work, HR sees
      the whole organization
    """
    filter_serializer = EvaluationFilterSerializer(data=request.query_params)
    if not filter_serializer.is_valid():
        return Response(filter_serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    evaluations = EvaluationLifecycleService.list_for_user(request.user, filter_serializer.to_dto())
    serializer = EvaluationInstanceSerializer(evaluations, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['POST'])
def self_evaluation_create(request):
    """
    Create the caller's SELF evaluation for a cycle, or return the existing one.

    POST /hr/evaluation/evaluations/self/
    - Body: kind, cycle (optional), employee_id (HR only)
    - 201 when created, 200 when it already existed
    """
    serializer = SelfEvaluationCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            dto = serializer.to_dto()
            with transaction.atomic():
                evaluation, created = EvaluationLifecycleService.create_self(request.user, dto)
            read_serializer = EvaluationInstanceSerializer(evaluation)
            return Response(
                read_serializer.data,
                status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
            )
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
def assessor_evaluation_create(request):
    """
    Create an ASSESSOR evaluation, or return the existing one.

    POST /hr/evaluation/evaluations/assessor/
    - Body: employee_id, kind, cycle (optional), assessor_id (required for HR)
    """
    serializer = AssessorEvaluationCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            dto = serializer.to_dto()
            with transaction.atomic():
                evaluation, created = EvaluationLifecycleService.create_assessor(request.user, dto)
            read_serializer = EvaluationInstanceSerializer(evaluation)
            return Response(
                read_serializer.data,
                status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
            )
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def evaluation_detail(request, pk):
    """
    GET /hr/evaluation/evaluations/<pk>/
    """
    evaluation = EvaluationLifecycleService.get_for_user(request.user, pk)
    serializer = EvaluationInstanceSerializer(evaluation)
    return Response(serializer.data, status=status.HTTP_200_OK)


# =================================================================================================
# TRANSITION VIEWS
# =================================================================================================

@api_view(['POST'])
def evaluation_start(request, pk):
    """POST /hr/evaluation/evaluations/<pk>/start/"""
    evaluation = EvaluationLifecycleService.start(request.user, pk)
    return _transition_response(evaluation)


@api_view(['POST'])
def evaluation_complete(request, pk):
    """
    POST /hr/evaluation/evaluations/<pk>/complete/

    Completing a SELF evaluation creates the assessor evaluations and emails
    the assessors once the transaction has committed.
    """
    evaluation, created_instances = EvaluationLifecycleService.complete(request.user, pk)
    if created_instances:
        notify_assessors(created_instances)
    return _transition_response(evaluation, created_instances)


@api_view(['POST'])
def evaluation_review(request, pk):
    """POST /hr/evaluation/evaluations/<pk>/review/"""
    evaluation = EvaluationLifecycleService.review(request.user, pk)
    return _transition_response(evaluation)


@api_view(['PUT'])
def evaluation_status(request, pk):
    """
    Status-driven transition.

    PUT /hr/evaluation/evaluations/<pk>/status/
    - Body: {"status": "IN_PROGRESS" | "COMPLETED" | "REVIEWED"}
    """
    serializer = EvaluationStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    evaluation, created_instances = EvaluationLifecycleService.transition(
        request.user, pk, serializer.validated_data['status']
    )
    if created_instances:
        notify_assessors(created_instances)
    return _transition_response(evaluation, created_instances)
