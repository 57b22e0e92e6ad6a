"""User DRF serializers for API output. The password is never rendered."""

from __future__ import annotations

from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Output serializer for the User resource."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
    role = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
