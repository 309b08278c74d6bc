"""
Tests for the authenticated COELSA operator endpoints.
"""

import pytest


@pytest.mark.django_db
class TestAuthentication:
    @pytest.mark.parametrize(
        "method, url",
        [
            ("get", "/api/v1/coelsa/operations/OP-1/"),
            ("get", "/api/v1/coelsa/merchants/20123456789/"),
            ("post", "/api/v1/coelsa/proxy/debin/"),
            ("get", "/api/v1/coelsa/debin/"),
            ("get", "/api/v1/coelsa/debin/ping/"),
        ],
    )
    def test_requires_jwt(self, api_client, method, url):
        response = getattr(api_client, method)(url)

        assert response.status_code == 401


@pytest.mark.django_db
class TestOperationStatusView:
    def test_returns_operation(self, authenticated_client, pending_operation):
        response = authenticated_client.get("/api/v1/coelsa/operations/OP-1/")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(pending_operation.id)
        assert body["coelsaId"] == "OP-1"
        assert body["status"] == "pending"
        assert body["amount"] == "1500.00"
        assert set(body) == {"id", "coelsaId", "status", "amount", "type", "createdAt", "updatedAt"}

    def test_unknown_operation(self, authenticated_client):
        response = authenticated_client.get("/api/v1/coelsa/operations/NOPE/")

        assert response.status_code == 404
        assert response.json()["error"] == "Operation not found"


@pytest.mark.django_db
class TestStubViews:
    def test_merchant(self, authenticated_client):
        response = authenticated_client.get("/api/v1/coelsa/merchants/20123456789/")

        assert response.status_code == 200
        assert response.json()["alias"] == "merchant.20123456789"

    def test_proxy(self, authenticated_client):
        response = authenticated_client.post("/api/v1/coelsa/proxy/debin/", {}, format="json")

        assert response.status_code == 200
        assert response.json() == {"message": "Proxy request not implemented", "api": "debin"}

    def test_echo(self, authenticated_client):
        body = authenticated_client.get("/api/v1/coelsa/debin/").json()

        assert body["api"] == "debin"
        assert body["type"] == "default"
        assert body["message"] == "COELSA echo response"

    def test_echo_with_type(self, authenticated_client):
        body = authenticated_client.get("/api/v1/coelsa/debin/ping/").json()

        assert body["type"] == "ping"
