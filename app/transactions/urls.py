"""
URL configuration for the transactions app.

Routes:
    - GET /          - List the caller's transactions
    - GET /{id}/     - Transaction detail

All routes are prefixed with /api/v1/transactions/ in config/urls.py.
"""

from django.urls import path

from transactions.views import TransactionDetailView, TransactionListView

app_name = "transactions"

urlpatterns = [
    path("", TransactionListView.as_view(), name="list"),
    path("<str:transaction_id>/", TransactionDetailView.as_view(), name="detail"),
]
