"""Stock DRF serializers for API output.

The Stock resource renders its product, creator, updater and provider
as nested objects.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.serializers import ProductSerializer
from modules.providers.serializers import ProviderSerializer
from modules.users.serializers import UserSerializer


class StockSerializer(serializers.Serializer):
    """Output serializer for a hydrated Stock aggregate."""

    id = serializers.IntegerField(read_only=True)
    product = ProductSerializer(read_only=True)
    serial = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    created_by_user = UserSerializer(read_only=True)
    updated_by_user = UserSerializer(read_only=True)
    batch = serializers.CharField(read_only=True)
    purchase_date = serializers.DateField(read_only=True)
    provider = ProviderSerializer(read_only=True)
