from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError

from HR.evaluation.services import GapAnalysisService
from HR.evaluation.serializers import GapAnalysisQuerySerializer


@api_view(['GET'])
def gap_analysis(request):
    """
    Self vs. assessor rating gaps over finished evaluations.

    GET /hr/evaluation/analytics/gap/
    - kind: COMPETENCY (default) or APPRAISAL
    - granularity: organization (default), department, job, employee, instance
    - Filters: employee_id, department_id, job_id, cycle, evaluation_id
    """
    serializer = GapAnalysisQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        report = GapAnalysisService.compute(request.user, serializer.to_dto())
    except ValidationError as e:
        error_detail = e.message_dict if hasattr(e, 'message_dict') else str(e)
        return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(report, status=status.HTTP_200_OK)
