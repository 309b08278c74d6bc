"""
Views for the COELSA integration.

Endpoints:
    POST /api/v1/coelsa/webhook/{action}      - Rail callbacks (public, optionally signed)
    GET  /api/v1/coelsa/operations/{id}/      - Operation status by COELSA id
    GET  /api/v1/coelsa/merchants/{cuit}/     - Merchant lookup by CUIT
    POST /api/v1/coelsa/proxy/{api}/          - Proxy to a COELSA API
    GET  /api/v1/coelsa/{api}/[{type}/]       - Echo

The webhook answers 200 for every business outcome so COELSA does not
retry; see coelsa.services for the response bodies.
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import AuthenticationError

from coelsa.serializers import (
    CoelsaOperationSerializer,
    EchoSerializer,
    MerchantSerializer,
    WebhookResponseSerializer,
)
from coelsa.services import CoelsaService
from coelsa.signatures import verify_webhook_signature
from coelsa.webhooks import CoelsaWebhookConfig

logger = logging.getLogger(__name__)


class CoelsaWebhookView(APIView):
    """
    Receive a COELSA webhook.

    No user authentication. When COELSA_WEBHOOK_SECRET is set the raw body
    must carry a valid HMAC signature, otherwise the request gets 401.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = []

    service = CoelsaService()
    webhook_config: CoelsaWebhookConfig | None = None

    def get_webhook_config(self) -> CoelsaWebhookConfig:
        return self.webhook_config or CoelsaWebhookConfig.from_settings()

    def verify_signature(self, request: Request) -> None:
        config = self.get_webhook_config()
        if not config.verifies_signatures:
            return

        # Raw bytes must be read before request.data consumes the stream.
        signature = request.headers.get(config.signature_header)
        if not verify_webhook_signature(request.body, signature, config.secret, config.algorithm):
            logger.warning(
                "Rejected COELSA webhook with invalid signature",
                extra={"path": request.path, "has_signature": bool(signature)},
            )
            raise AuthenticationError("Invalid webhook signature", error_code="INVALID_SIGNATURE")

    @extend_schema(
        operation_id="coelsa_webhook",
        summary="Receive COELSA webhook",
        request=None,
        responses={
            200: WebhookResponseSerializer,
            401: OpenApiResponse(description="Invalid webhook signature"),
        },
        tags=["COELSA"],
    )
    def post(self, request: Request, action: str) -> Response:
        self.verify_signature(request)
        result = self.service.process_webhook(action, request.data)
        return Response(result.data)


class OperationStatusView(APIView):
    permission_classes = [IsAuthenticated]
    service = CoelsaService()

    @extend_schema(
        operation_id="coelsa_operation_status",
        summary="Get operation status",
        responses={
            200: CoelsaOperationSerializer,
            404: OpenApiResponse(description="Operation not found"),
        },
        tags=["COELSA"],
    )
    def get(self, request: Request, operation_id: str) -> Response:
        txn = self.service.get_operation_status(operation_id)
        return Response(CoelsaOperationSerializer(txn).data)


class MerchantView(APIView):
    permission_classes = [IsAuthenticated]
    service = CoelsaService()

    @extend_schema(
        operation_id="coelsa_get_merchant",
        summary="Get merchant by CUIT",
        responses={200: MerchantSerializer},
        tags=["COELSA"],
    )
    def get(self, request: Request, cuit: str) -> Response:
        return Response(self.service.get_merchant_by_cuit(cuit))


class ProxyView(APIView):
    permission_classes = [IsAuthenticated]
    service = CoelsaService()

    @extend_schema(
        operation_id="coelsa_proxy",
        summary="Proxy request to a COELSA API",
        request=None,
        responses={200: OpenApiResponse(description="Proxy acknowledgement")},
        tags=["COELSA"],
    )
    def post(self, request: Request, api: str) -> Response:
        return Response(self.service.proxy_request(api, request.data))


class EchoView(APIView):
    """Connectivity check for operator tooling."""

    permission_classes = [IsAuthenticated]
    service = CoelsaService()

    @extend_schema(
        operation_id="coelsa_echo",
        summary="Echo",
        responses={200: EchoSerializer},
        tags=["COELSA"],
    )
    def get(self, request: Request, api: str, type: str | None = None) -> Response:
        return Response(self.service.echo(api, type))
