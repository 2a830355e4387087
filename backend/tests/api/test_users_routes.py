"""Tests for the /users endpoints."""


class TestUsersRoutes:
    def test_me(self, client, auth_headers, registered_user):
        response = client.get("/users/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == registered_user.id
        assert data["email"] == registered_user.email
        assert set(data) == {"id", "name", "email", "createdAt", "updatedAt"}

    def test_me_for_deleted_account(self, client, auth_headers):
        response = client.get("/users/me", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_list(self, client, auth_headers, registered_user, user_repository):
        user_repository.add(name="Bo", email="bo@example.com")

        response = client.get("/users", headers=auth_headers)

        assert response.status_code == 200
        emails = [u["email"] for u in response.json()]
        assert emails == [registered_user.email, "bo@example.com"]

    def test_by_email(self, client, auth_headers, registered_user):
        response = client.get(f"/users/email/{registered_user.email}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == registered_user.id

    def test_by_id(self, client, auth_headers, registered_user):
        response = client.get(f"/users/{registered_user.id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["name"] == registered_user.name

    def test_by_id_missing(self, client, auth_headers):
        response = client.get("/users/00000000-0000-0000-0000-000000000000", headers=auth_headers)
        assert response.status_code == 404

    def test_never_exposes_secrets(self, client, auth_headers, registered_user):
        body = client.get("/users", headers=auth_headers).text
        assert "hashed:" not in body
        assert "passwordHash" not in body
        assert "refreshToken" not in body

    def test_requires_token(self, client):
        for path in ("/users", "/users/me", "/users/email/a@example.com"):
            response = client.get(path)
            assert response.status_code == 401
            assert response.json()["code"] == "MISSING_TOKEN"

    def test_non_bearer_scheme(self, client):
        response = client.get("/users/me", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401
