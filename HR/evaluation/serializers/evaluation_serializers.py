"""
Serializers for EvaluationInstance
"""
from rest_framework import serializers

from HR.evaluation.dtos import (
    SelfEvaluationCreateDTO,
    AssessorEvaluationCreateDTO,
    EvaluationFilterDTO,
)
from HR.evaluation.models import (
    EvaluationInstance,
    EvaluationKind,
    EvaluationStatus,
    EvaluationType,
)


class EvaluationInstanceSerializer(serializers.ModelSerializer):
    """Read serializer for EvaluationInstance"""
    organization_id = serializers.IntegerField(read_only=True)
    employee_id = serializers.IntegerField(read_only=True)
    employee_name = serializers.CharField(source='employee.name', read_only=True)
    employee_email = serializers.EmailField(source='employee.email', read_only=True)
    assessor_id = serializers.IntegerField(read_only=True, allow_null=True)
    assessor_name = serializers.CharField(source='assessor.name', read_only=True, default=None)

    class Meta:
        model = EvaluationInstance
        fields = [
            'id', 'organization_id', 'type', 'kind', 'cycle', 'status',
            'employee_id', 'employee_name', 'employee_email',
            'assessor_id', 'assessor_name',
            'created_at', 'started_at', 'completed_at', 'reviewed_at',
        ]
        read_only_fields = fields


class SelfEvaluationCreateSerializer(serializers.Serializer):
    """Write serializer for POST evaluations/self/"""
    kind = serializers.ChoiceField(choices=EvaluationKind.choices)
    employee_id = serializers.IntegerField(required=False, allow_null=True)
    cycle = serializers.CharField(max_length=32, required=False, allow_blank=True, allow_null=True)

    def to_dto(self) -> SelfEvaluationCreateDTO:
        return SelfEvaluationCreateDTO(**self.validated_data)


class AssessorEvaluationCreateSerializer(serializers.Serializer):
    """Write serializer for POST evaluations/assessor/"""
    employee_id = serializers.IntegerField()
    kind = serializers.ChoiceField(choices=EvaluationKind.choices)
    assessor_id = serializers.IntegerField(required=False, allow_null=True)
    cycle = serializers.CharField(max_length=32, required=False, allow_blank=True, allow_null=True)

    def to_dto(self) -> AssessorEvaluationCreateDTO:
        return AssessorEvaluationCreateDTO(**self.validated_data)


class EvaluationStatusSerializer(serializers.Serializer):
    """Body of PUT evaluations/<id>/status/"""
    status = serializers.ChoiceField(choices=EvaluationStatus.choices)


class EvaluationFilterSerializer(serializers.Serializer):
    """Query parameters of GET evaluations/"""
    kind = serializers.ChoiceField(choices=EvaluationKind.choices, required=False)
    type = serializers.ChoiceField(choices=EvaluationType.choices, required=False)
    status = serializers.ChoiceField(choices=EvaluationStatus.choices, required=False)
    employee_id = serializers.IntegerField(required=False)
    cycle = serializers.CharField(max_length=32, required=False)
    search = serializers.CharField(required=False)

    def to_dto(self) -> EvaluationFilterDTO:
        return EvaluationFilterDTO(**self.validated_data)
