"""
Views for the compliance extracts.

Endpoints:
    GET /api/v1/compliance/cvu-summary/  - Aggregate CVU figures
    GET /api/v1/compliance/cvu-history/  - Recent COELSA transactions

Both read the x-passphrase and x-secret headers and answer 401 when they
do not match the configured pair.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from compliance.services import ComplianceCredentials, ComplianceService

CREDENTIAL_HEADERS = [
    OpenApiParameter("x-passphrase", OpenApiTypes.STR, OpenApiParameter.HEADER, required=True),
    OpenApiParameter("x-secret", OpenApiTypes.STR, OpenApiParameter.HEADER, required=True),
]


class ComplianceView(APIView):
    """Header-authenticated base for the extracts."""

    authentication_classes = []
    permission_classes = [AllowAny]

    credentials: ComplianceCredentials | None = None

    def get_service(self) -> ComplianceService:
        return ComplianceService(self.credentials or ComplianceCredentials.from_settings())

    @staticmethod
    def read_credentials(request: Request) -> tuple[str | None, str | None]:
        return request.headers.get("x-passphrase"), request.headers.get("x-secret")


class CvuSummaryView(ComplianceView):
    @extend_schema(
        operation_id="compliance_cvu_summary",
        summary="CVU summary extract",
        parameters=CREDENTIAL_HEADERS,
        responses={
            200: OpenApiResponse(description="totalAccounts, totalBalance, activeAccounts, generatedAt"),
            401: OpenApiResponse(description="Invalid credentials"),
        },
        tags=["Compliance"],
    )
    def get(self, request: Request) -> Response:
        return Response(self.get_service().get_cvu_summary(*self.read_credentials(request)))


class CvuHistoryView(ComplianceView):
    @extend_schema(
        operation_id="compliance_cvu_history",
        summary="CVU transaction history extract",
        parameters=CREDENTIAL_HEADERS,
        responses={
            200: OpenApiResponse(description="transactions, count, generatedAt"),
            401: OpenApiResponse(description="Invalid credentials"),
        },
        tags=["Compliance"],
    )
    def get(self, request: Request) -> Response:
        return Response(self.get_service().get_cvu_history(*self.read_credentials(request)))
