"""
URL configuration for the COELSA backoffice.

URL Structure:
    /                              - ReDoc API documentation
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint (for load balancers, Docker)
    /schema/                       - OpenAPI schema (YAML)
    /api/v1/auth/token/            - Obtain JWT pair
    /api/v1/auth/token/refresh/    - Refresh access token
    /api/v1/coelsa/                - COELSA endpoints
        webhook/{action}           - Rail webhooks (POST, public)
        operations/{id}/           - Operation status
        merchants/{cuit}/          - Merchant lookup by CUIT
        proxy/{api}/               - Proxy (POST)
        {api}/, {api}/{type}/      - Echo
    /api/v1/compliance/            - Regulator extracts (header credentials)
        cvu-summary/               - CVU aggregate figures
        cvu-history/               - Recent COELSA transactions
    /api/v1/transactions/          - Caller's transactions
        {id}/                      - Transaction detail

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from core.views import health_check

# =============================================================================
# API v1 Routes
# =============================================================================
# All routes here are prefixed with /api/v1/ automatically
api_v1_patterns = [
    # JWT
    path("auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    # COELSA
    path("coelsa/", include("coelsa.urls")),
    # Compliance
    path("compliance/", include("compliance.urls")),
    # Transactions
    path("transactions/", include("transactions.urls")),
]

urlpatterns = [
    # Documentation
    path("", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # API v1
    path("api/v1/", include(api_v1_patterns)),
]

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "COELSA Backoffice"
admin.site.site_title = "COELSA Backoffice"
admin.site.index_title = "Accounts and transactions"
