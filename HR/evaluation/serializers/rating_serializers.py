"""
Serializers for competency ratings and appraisal responses
"""
from rest_framework import serializers

from HR.evaluation.dtos import RatingSubmitDTO
from HR.evaluation.models import RatingEntry, QuestionResponse
from .catalogue_serializers import AppraisalQuestionSerializer


class RatingEntrySerializer(serializers.ModelSerializer):
    """Read serializer for RatingEntry"""
    evaluation_id = serializers.IntegerField(read_only=True)
    competency_id = serializers.IntegerField(read_only=True)
    competency_name = serializers.CharField(source='competency.name', read_only=True)

    class Meta:
        model = RatingEntry
        fields = ['id', 'evaluation_id', 'competency_id', 'competency_name', 'rating', 'comment', 'created_at']
        read_only_fields = fields


class QuestionResponseSerializer(serializers.ModelSerializer):
    """Read serializer for QuestionResponse, with the question embedded"""
    evaluation_id = serializers.IntegerField(read_only=True)
    question_id = serializers.IntegerField(read_only=True)
    question = AppraisalQuestionSerializer(read_only=True)

    class Meta:
        model = QuestionResponse
        fields = [
            'id', 'evaluation_id', 'question_id', 'question',
            'employee_rating', 'employee_comment',
            'assessor_rating', 'assessor_comment',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class RatingSubmitSerializer(serializers.Serializer):
    """
    Write serializer for POST evaluations/<id>/ratings/

    The rating range itself is enforced by the rating store so that every
    entry point rejects out-of-range values the same way.
    """
    evaluation_id = serializers.IntegerField()
    rating = serializers.IntegerField()
    competency_id = serializers.IntegerField(required=False, allow_null=True)
    question_id = serializers.IntegerField(required=False, allow_null=True)
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def validate(self, attrs):
        if attrs.get('competency_id') is None and attrs.get('question_id') is None:
            raise serializers.ValidationError("Either competency_id or question_id is required")
        return attrs

    def to_dto(self) -> RatingSubmitDTO:
        return RatingSubmitDTO(**self.validated_data)
