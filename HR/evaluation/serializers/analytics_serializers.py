"""
Serializers for gap analytics
"""
from rest_framework import serializers

from HR.evaluation.dtos import GapAnalysisQueryDTO
from HR.evaluation.models import EvaluationKind
from HR.evaluation.services.gap_analysis_service import GRANULARITIES, ORGANIZATION


class GapAnalysisQuerySerializer(serializers.Serializer):
    """Query parameters of GET analytics/gap/"""
    kind = serializers.ChoiceField(choices=EvaluationKind.choices, default=EvaluationKind.COMPETENCY)
    granularity = serializers.ChoiceField(choices=GRANULARITIES, default=ORGANIZATION)
    employee_id = serializers.IntegerField(required=False)
    department_id = serializers.IntegerField(required=False)
    job_id = serializers.IntegerField(required=False)
    cycle = serializers.CharField(max_length=32, required=False)
    evaluation_id = serializers.IntegerField(required=False)

    def to_dto(self) -> GapAnalysisQueryDTO:
        return GapAnalysisQueryDTO(**self.validated_data)
