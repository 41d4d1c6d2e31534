"""
Serializers for AssessorAssignment
"""
from rest_framework import serializers

from HR.evaluation.dtos import AssessorAssignmentCreateDTO, AssessorAssignmentUpdateDTO
from HR.evaluation.models import AssessorAssignment


class AssessorAssignmentSerializer(serializers.ModelSerializer):
    """Read serializer for AssessorAssignment"""
    assessor_id = serializers.IntegerField(read_only=True)
    assessor_name = serializers.CharField(source='assessor.name', read_only=True)
    employee_id = serializers.IntegerField(read_only=True)
    employee_name = serializers.CharField(source='employee.name', read_only=True)

    class Meta:
        model = AssessorAssignment
        fields = ['id', 'assessor_id', 'assessor_name', 'employee_id', 'employee_name', 'created_at', 'updated_at']
        read_only_fields = fields


class AssessorAssignmentCreateSerializer(serializers.Serializer):
    """Write serializer for creating an assessor assignment"""
    assessor_id = serializers.IntegerField()
    employee_id = serializers.IntegerField()

    def to_dto(self) -> AssessorAssignmentCreateDTO:
        return AssessorAssignmentCreateDTO(**self.validated_data)


class AssessorAssignmentUpdateSerializer(serializers.Serializer):
    """Write serializer for updating an assessor assignment"""
    assignment_id = serializers.IntegerField()
    assessor_id = serializers.IntegerField(required=False)
    employee_id = serializers.IntegerField(required=False)

    def to_dto(self) -> AssessorAssignmentUpdateDTO:
        return AssessorAssignmentUpdateDTO(**self.validated_data)


class AssessorAssignmentFilterSerializer(serializers.Serializer):
    """Query parameters of GET assignments/"""
    assessor_id = serializers.IntegerField(required=False)
    employee_id = serializers.IntegerField(required=False)
    search = serializers.CharField(required=False)
