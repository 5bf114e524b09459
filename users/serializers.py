from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    isAdmin = serializers.BooleanField(source='is_admin', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'first_name', 'last_name', 'role', 'isAdmin']
        read_only_fields = fields
