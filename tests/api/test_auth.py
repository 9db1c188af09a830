"""API tests for login endpoints."""

ADMIN = {"email": "admin@studiokatalika.com", "password": "admin123"}


class TestAuthApi:
    async def test_login(self, async_client, memory_store):
        response = await async_client.post("/api/auth/login", json=ADMIN)

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["role"] == "admin"
        assert "password" not in user
        assert (await memory_store.get_current_user()).email == ADMIN["email"]

    async def test_wrong_password(self, async_client):
        response = await async_client.post(
            "/api/auth/login", json={**ADMIN, "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTHENTICATION_FAILED"

    async def test_me_and_logout(self, async_client):
        assert (await async_client.get("/api/auth/me")).status_code == 401

        await async_client.post("/api/auth/login", json=ADMIN)
        me = await async_client.get("/api/auth/me")
        assert me.json()["user"]["email"] == ADMIN["email"]

        assert (await async_client.post("/api/auth/logout")).status_code == 204
        assert (await async_client.get("/api/auth/me")).status_code == 401
