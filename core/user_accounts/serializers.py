from rest_framework import serializers

from .models import CustomUser


class LoginSerializer(serializers.Serializer):
    """Credentials for POST /auth/login/"""
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class UserProfileSerializer(serializers.ModelSerializer):
    """Read-only view of the caller: identity, tenant and role"""
    organization_id = serializers.IntegerField(read_only=True)
    organization_name = serializers.CharField(source='organization.name', read_only=True)

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'role', 'organization_id', 'organization_name', 'date_joined']
        read_only_fields = fields
