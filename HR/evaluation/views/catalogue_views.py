from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.db import transaction
from django.core.exceptions import ValidationError

from core.user_accounts.decorators import require_role_for_methods
from core.user_accounts.models import UserRole
from HR.evaluation.services import CompetencyService, AppraisalQuestionService
from HR.evaluation.serializers import (
    CompetencySerializer,
    CompetencyCreateSerializer,
    AppraisalQuestionSerializer,
)
from hr_platform.pagination import auto_paginate


@api_view(['GET', 'POST'])
@require_role_for_methods({'POST': (UserRole.HR,)})
@auto_paginate
def competency_list(request):
    """
    List the organization's competencies or add one.

    GET /hr/evaluation/competencies/
    - Filters: search (name, description)

    POST /hr/evaluation/competencies/  (HR only)
    """
    if request.method == 'GET':
        competencies = CompetencyService.list_competencies(request.user.organization_id, request.query_params)
        serializer = CompetencySerializer(competencies, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = CompetencyCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            dto = serializer.to_dto()
            with transaction.atomic():
                competency = CompetencyService.create(request.user, dto)
            read_serializer = CompetencySerializer(competency)
            return Response(read_serializer.data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def question_list(request):
    """
    GET /hr/evaluation/questions/

    The appraisal questionnaire; the default set is created on first access.
    """
    AppraisalQuestionService.ensure_default_questions(request.user.organization_id)
    questions = AppraisalQuestionService.list_questions(request.user.organization_id)
    serializer = AppraisalQuestionSerializer(questions, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)
