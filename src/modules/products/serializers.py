"""Product DRF serializers for API output.

Read-only: request bodies are validated by the Pydantic DTOs in
``dtos.py`` and responses render the domain ``Product`` record.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Output serializer for the Product resource."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    code = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
