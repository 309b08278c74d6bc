"""
Response serializers for the COELSA endpoints.

Field names are camelCase to match what COELSA and the operator tooling
already consume.
"""

from rest_framework import serializers

from transactions.models import Transaction


class CoelsaOperationSerializer(serializers.ModelSerializer):
    """Transaction as seen through GET /coelsa/operations/{id}/."""

    coelsaId = serializers.CharField(source="coelsa_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Transaction
        fields = ["id", "coelsaId", "status", "amount", "type", "createdAt", "updatedAt"]
        read_only_fields = fields


class MerchantSerializer(serializers.Serializer):
    cuit = serializers.CharField()
    name = serializers.CharField()
    cbu = serializers.CharField()
    alias = serializers.CharField()
    bank = serializers.CharField()
    validated = serializers.BooleanField()


class WebhookResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    transactionId = serializers.UUIDField(required=False)
    processed = serializers.BooleanField(required=False)


class EchoSerializer(serializers.Serializer):
    api = serializers.CharField()
    type = serializers.CharField()
    timestamp = serializers.CharField()
    message = serializers.CharField()
