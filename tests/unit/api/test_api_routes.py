"""
Name: HTTP API Unit Tests (in-memory backend)

Responsibilities:
  - Bearer auth: missing -> "Token não fornecido", invalid -> "Token inválido"
  - Status codes per route (201 on create, 400/404/409/401 envelopes)
  - Malformed JSON is treated as an empty body (400, never 500)
  - camelCase bodies, paginated envelopes, X-Request-Id propagation

Collaborators:
  - fastapi.testclient.TestClient (fixture `client`)
  - finance_api.container.Container.in_memory (fixture `container`)
"""

from uuid import uuid4

import pytest

pytestmark = pytest.mark.unit

VALID_CPF = "529.982.247-25"
VALID_PASSWORD = "Senha@123"


def _create_user(client, headers, email="maria@example.com", name="Maria Silva"):
    response = client.post(
        "/api/user",
        json={"name": name, "email": email, "password": VALID_PASSWORD, "cpf": VALID_CPF},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestHealthAndContext:
    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-Id": "abc-123"})
        assert response.headers["X-Request-Id"] == "abc-123"

    def test_request_id_is_generated(self, client):
        assert client.get("/health").headers.get("X-Request-Id")


class TestBearerAuth:
    def test_missing_token(self, client):
        response = client.get("/api/user")
        assert response.status_code == 401
        assert response.json() == {"message": "Token não fornecido"}

    @pytest.mark.parametrize("header", ["Bearer not-a-jwt", "Basic abc", "Bearer "])
    def test_invalid_token(self, client, header):
        response = client.get("/api/account", headers={"Authorization": header})
        assert response.status_code == 401
        assert response.json() == {"message": "Token inválido"}

    def test_refresh_token_is_not_a_bearer(self, client, container):
        refresh = container.token_service.issue_refresh_token(uuid4())
        response = client.get(
            "/api/account", headers={"Authorization": f"Bearer {refresh}"}
        )
        assert response.status_code == 401
        assert response.json() == {"message": "Token inválido"}


class TestSession:
    def test_login_and_refresh(self, client, auth_headers):
        _create_user(client, auth_headers)

        login = client.post(
            "/api/login", json={"email": "maria@example.com", "password": VALID_PASSWORD}
        )
        assert login.status_code == 200
        tokens = login.json()
        assert set(tokens) == {"accessToken", "refreshToken"}

        refreshed = client.post(
            "/api/refresh", json={"refreshToken": tokens["refreshToken"]}
        )
        assert refreshed.status_code == 200
        assert refreshed.json()["refreshToken"] == tokens["refreshToken"]

        me = client.get(
            "/api/user",
            headers={"Authorization": f"Bearer {refreshed.json()['accessToken']}"},
        )
        assert me.status_code == 200

    def test_wrong_credentials(self, client, auth_headers):
        _create_user(client, auth_headers)

        response = client.post(
            "/api/login", json={"email": "maria@example.com", "password": "Outra@999"}
        )

        assert response.status_code == 401
        assert response.json()["slug"] == "EmailOrPasswordWrongError"
        assert response.json()["code"] == 401

    def test_invalid_refresh(self, client):
        response = client.post("/api/refresh", json={"refreshToken": "garbage"})
        assert response.status_code == 401
        assert response.json()["slug"] == "InvalidRefreshTokenError"


class TestUsersRoutes:
    def test_create_hides_password(self, client, auth_headers):
        body = _create_user(client, auth_headers)

        assert "password" not in body
        assert set(body) == {"id", "name", "email", "cpf", "createdAt", "updatedAt"}

    def test_duplicate_email_is_409(self, client, auth_headers):
        _create_user(client, auth_headers)
        response = client.post(
            "/api/user",
            json={
                "name": "Outra",
                "email": "maria@example.com",
                "password": VALID_PASSWORD,
                "cpf": VALID_CPF,
            },
            headers=auth_headers,
        )
        assert response.status_code == 409
        assert response.json()["slug"] == "AlreadyExistsError"

    def test_malformed_json_is_validation_error(self, client, auth_headers):
        response = client.post(
            "/api/user",
            content=b"{not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["slug"] == "InputValidationError"
        assert {"name", "email", "password", "cpf"} <= set(body["error"]["errors"])

    def test_change_password_route_is_not_an_id(self, client, auth_headers):
        _create_user(client, auth_headers)

        response = client.post(
            "/api/user/change-password",
            json={
                "email": "maria@example.com",
                "currentPassword": VALID_PASSWORD,
                "newPassword": "Nova#Senha9",
            },
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Senha atualizada com sucesso"}

    def test_show_patch_delete(self, client, auth_headers):
        created = _create_user(client, auth_headers)
        url = f"/api/user/{created['id']}"

        assert client.get(url, headers=auth_headers).json()["email"] == created["email"]

        patched = client.patch(url, json={"name": "Maria S."}, headers=auth_headers)
        assert patched.status_code == 200
        assert patched.json()["name"] == "Maria S."

        assert client.delete(url, headers=auth_headers).status_code == 200
        missing = client.get(url, headers=auth_headers)
        assert missing.status_code == 404
        assert missing.json()["slug"] == "NotFoundError"

    def test_malformed_id_is_400(self, client, auth_headers):
        response = client.get("/api/user/not-a-uuid", headers=auth_headers)
        assert response.status_code == 400

    def test_list_pagination_envelope(self, client, auth_headers):
        for i in range(3):
            _create_user(client, auth_headers, email=f"u{i}@example.com", name=f"U{i}")

        response = client.get("/api/user?page=2&limit=2", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}
        assert len(body["data"]) == 1

    def test_limit_out_of_range(self, client, auth_headers):
        response = client.get("/api/user?limit=500", headers=auth_headers)
        assert response.status_code == 400


class TestAccountAndTransactionRoutes:
    def _account(self, client, headers, users_ids=()):
        response = client.post(
            "/api/account",
            json={"name": "Casa", "usersIds": list(users_ids)},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    def test_account_crud(self, client, auth_headers):
        user = _create_user(client, auth_headers)
        account = self._account(client, auth_headers, [user["id"]])
        assert [u["id"] for u in account["users"]] == [user["id"]]

        url = f"/api/account/{account['id']}"
        renamed = client.put(url, json={"name": "Viagem"}, headers=auth_headers)
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "Viagem"

        listed = client.get("/api/account?name=viag", headers=auth_headers).json()
        assert listed["pagination"]["total"] == 1

        assert client.delete(url, headers=auth_headers).status_code == 200
        assert client.get(url, headers=auth_headers).status_code == 404

    def test_unknown_user_on_create(self, client, auth_headers):
        response = client.post(
            "/api/account",
            json={"name": "Casa", "usersIds": [str(uuid4())]},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_transaction_flow(self, client, auth_headers):
        account = self._account(client, auth_headers)
        base = f"/api/account/{account['id']}/transaction"

        created = client.post(base, json={"amount": 5000}, headers=auth_headers)
        assert created.status_code == 201
        body = created.json()
        assert body["amount"] == "5000.0000"
        assert body["description"] is None
        assert body["accountId"] == account["id"]

        updated = client.put(
            f"{base}/{body['id']}",
            json={"description": "Salário"},
            headers=auth_headers,
        )
        assert updated.json()["description"] == "Salário"
        assert updated.json()["amount"] == "5000.0000"

        listed = client.get(base, headers=auth_headers).json()
        assert listed["pagination"]["total"] == 1

        assert client.delete(f"{base}/{body['id']}", headers=auth_headers).status_code == 200
        assert client.get(f"{base}/{body['id']}", headers=auth_headers).status_code == 404

    def test_path_account_wins_over_body(self, client, auth_headers):
        casa = self._account(client, auth_headers)
        other = self._account(client, auth_headers)

        created = client.post(
            f"/api/account/{casa['id']}/transaction",
            json={"amount": 1, "accountId": other["id"]},
            headers=auth_headers,
        ).json()

        assert created["accountId"] == casa["id"]

    def test_foreign_transaction_is_404(self, client, auth_headers):
        casa = self._account(client, auth_headers)
        other = self._account(client, auth_headers)
        tx = client.post(
            f"/api/account/{casa['id']}/transaction",
            json={"amount": 1},
            headers=auth_headers,
        ).json()

        response = client.get(
            f"/api/account/{other['id']}/transaction/{tx['id']}", headers=auth_headers
        )

        assert response.status_code == 404

    def test_invalid_amount_is_400(self, client, auth_headers):
        account = self._account(client, auth_headers)
        response = client.post(
            f"/api/account/{account['id']}/transaction",
            json={"amount": "10"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert "amount" in response.json()["error"]["errors"]
