from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError

from HR.evaluation.models import RatingEntry
from HR.evaluation.services import RatingService
from HR.evaluation.serializers import (
    RatingEntrySerializer,
    QuestionResponseSerializer,
    RatingSubmitSerializer,
)


def _serialize_rating(obj):
    if isinstance(obj, RatingEntry):
        return RatingEntrySerializer(obj).data
    return QuestionResponseSerializer(obj).data


@api_view(['GET', 'POST'])
def evaluation_ratings(request, pk):
    """
    List or submit ratings of an evaluation.

    GET /hr/evaluation/evaluations/<pk>/ratings/
    - Competency evaluations: latest rating per competency
    - Appraisal evaluations: shared question responses

    POST /hr/evaluation/evaluations/<pk>/ratings/
    - Body: rating, comment, competency_id (competency) or question_id (appraisal)
    """
    if request.method == 'GET':
        evaluation, items = RatingService.list_ratings(request.user, pk)
        return Response([_serialize_rating(item) for item in items], status=status.HTTP_200_OK)

    data = request.data.copy()
    data['evaluation_id'] = pk

    serializer = RatingSubmitSerializer(data=data)
    if serializer.is_valid():
        try:
            dto = serializer.to_dto()
            obj, created = RatingService.submit(request.user, dto)
            return Response(
                _serialize_rating(obj),
                status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
            )
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def evaluation_responses(request, pk):
    """
    GET /hr/evaluation/evaluations/<pk>/responses/

    Appraisal responses with their question, as shared between the employee
    and the assessors.
    """
    try:
        responses = RatingService.list_responses(request.user, pk)
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    serializer = QuestionResponseSerializer(responses, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)
