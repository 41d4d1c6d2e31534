"""
Serializers for the competency catalogue and appraisal questionnaire
"""
from rest_framework import serializers

from HR.evaluation.dtos import CompetencyCreateDTO
from HR.evaluation.models import Competency, AppraisalQuestion


class CompetencySerializer(serializers.ModelSerializer):
    """Read serializer for Competency"""

    class Meta:
        model = Competency
        fields = ['id', 'name', 'description', 'created_at', 'updated_at']
        read_only_fields = fields


class CompetencyCreateSerializer(serializers.Serializer):
    """Write serializer for creating a competency"""
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def to_dto(self) -> CompetencyCreateDTO:
        return CompetencyCreateDTO(**self.validated_data)


class AppraisalQuestionSerializer(serializers.ModelSerializer):
    """Read serializer for AppraisalQuestion"""

    class Meta:
        model = AppraisalQuestion
        fields = [
            'id', 'key', 'title', 'description', 'how_to_measure',
            'good_indicator', 'red_flag', 'rating_criteria', 'order',
        ]
        read_only_fields = fields
