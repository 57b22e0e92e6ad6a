"""Integration tests for User API endpoints."""

from __future__ import annotations

import pytest

from modules.users.models import UserRow

pytestmark = pytest.mark.integration


class TestUserAPI:
    def test_create_never_renders_password(self, api_client):
        response = api_client.post(
            "/api/users/",
            {
                "name": "Ana",
                "email": "ana@example.com",
                "role": "admin",
                "password": "s3cret",
            },
            format="json",
        )
        assert response.status_code == 201
        assert response.data["email"] == "ana@example.com"
        assert "password" not in response.data

    def test_duplicate_email_returns_409(self, api_client, user):
        response = api_client.post(
            "/api/users/", {"name": "Other", "email": user.email}, format="json"
        )
        assert response.status_code == 409

    def test_invalid_email_returns_400(self, api_client):
        response = api_client.post(
            "/api/users/", {"name": "Ana", "email": "nope"}, format="json"
        )
        assert response.status_code == 400

    def test_missing_name_returns_400(self, api_client):
        response = api_client.post(
            "/api/users/", {"email": "ana@example.com"}, format="json"
        )
        assert response.status_code == 400

    def test_get_by_email(self, api_client, user):
        response = api_client.get(f"/api/users/email/{user.email}/")
        assert response.status_code == 200
        assert response.data["id"] == user.id

    def test_get_by_email_missing(self, api_client):
        response = api_client.get("/api/users/email/ghost@example.com/")
        assert response.status_code == 404
        assert response.data["detail"] == "user with email ghost@example.com not found"

    def test_update_keeps_password_when_blank(self, api_client, user):
        response = api_client.put(
            f"/api/users/{user.id}/",
            {"name": "Ana Maria", "email": user.email, "role": "operator"},
            format="json",
        )
        assert response.status_code == 200
        assert response.data["name"] == "Ana Maria"
        assert UserRow.objects.get(pk=user.id).password == "pw"

    def test_list_and_delete(self, api_client, user, other_user):
        response = api_client.get("/api/users/")
        assert [u["email"] for u in response.data] == [user.email, other_user.email]
        assert api_client.delete(f"/api/users/{user.id}/").status_code == 204
        assert api_client.get(f"/api/users/{user.id}/").status_code == 404
