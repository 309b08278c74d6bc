"""
Views for the transactions API.

Endpoints:
    GET /api/v1/transactions/       - List the caller's transactions (cursor paged)
    GET /api/v1/transactions/{id}/  - Get one of the caller's transactions
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from transactions.serializers import TransactionListQuerySerializer, TransactionSerializer
from transactions.services import TransactionQueryService


class TransactionListView(APIView):
    """
    Cursor-paginated list of transactions where the caller owns the source
    or target account.

    Response:
        {
            "data": [...],
            "nextCursor": "<id>" | null,
            "previousCursor": "<id>" | null,
            "hasMore": bool,
            "hasPrevious": false
        }
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="list_transactions",
        summary="List user transactions",
        parameters=[TransactionListQuerySerializer],
        responses={200: OpenApiResponse(description="Cursor page of transactions")},
        tags=["Transactions"],
    )
    def get(self, request: Request) -> Response:
        query = TransactionListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        account_ids = TransactionQueryService.account_ids_for(request.user)
        page = TransactionQueryService.list_for_user(
            request.user,
            query.filters(),
            query.to_params(),
            account_ids=account_ids,
        )

        context = {"request": request, "account_ids": account_ids}
        return Response(
            page.to_dict(lambda items: TransactionSerializer(items, many=True, context=context).data)
        )


class TransactionDetailView(APIView):
    """Single transaction of the caller; 404 for anyone else's."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="get_transaction",
        summary="Get transaction details",
        responses={
            200: TransactionSerializer,
            404: OpenApiResponse(description="Transaction not found"),
        },
        tags=["Transactions"],
    )
    def get(self, request: Request, transaction_id: str) -> Response:
        account_ids = TransactionQueryService.account_ids_for(request.user)
        transaction = TransactionQueryService.get_for_user(
            request.user, transaction_id, account_ids=account_ids
        )
        serializer = TransactionSerializer(
            transaction, context={"request": request, "account_ids": account_ids}
        )
        return Response(serializer.data)
