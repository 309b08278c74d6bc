"""
URL configuration for the COELSA app.

All routes are prefixed with /api/v1/coelsa/ in config/urls.py. The echo
routes match any single segment, so they are registered last.
"""

from django.urls import path, re_path

from coelsa.views import (
    CoelsaWebhookView,
    EchoView,
    MerchantView,
    OperationStatusView,
    ProxyView,
)

app_name = "coelsa"

urlpatterns = [
    re_path(r"^webhook/(?P<action>[^/]+)/?$", CoelsaWebhookView.as_view(), name="webhook"),
    path("operations/<str:operation_id>/", OperationStatusView.as_view(), name="operation-status"),
    path("merchants/<str:cuit>/", MerchantView.as_view(), name="merchant"),
    path("proxy/<str:api>/", ProxyView.as_view(), name="proxy"),
    path("<str:api>/", EchoView.as_view(), name="echo"),
    path("<str:api>/<str:type>/", EchoView.as_view(), name="echo-type"),
]
