"""
Application-level tests: root endpoint, request ids, unknown identifiers.
"""

from httpx import AsyncClient


class TestRoot:
    """Tests for GET /."""

    async def test_root_returns_200(self, async_client: AsyncClient):
        response = await async_client.get("/")
        assert response.status_code == 200

    async def test_root_says_api_running(self, async_client: AsyncClient):
        response = await async_client.get("/")
        assert response.text == "API Running"

    async def test_responses_carry_request_id(self, async_client: AsyncClient):
        """Every response has an X-Request-ID header."""
        response = await async_client.get("/")
        assert response.headers.get("X-Request-ID")

    async def test_request_ids_are_unique(self, async_client: AsyncClient):
        first = await async_client.get("/")
        second = await async_client.get("/")
        assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


class TestMalformedIds:
    """A path id that is not a UUID is reported as not found."""

    async def test_malformed_post_id_returns_404(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.get(
            "/api/posts/not-an-id",
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 404
        assert response.json() == {
            "errors": [{"msg": "Resource with id 'not-an-id' was not found"}]
        }

    async def test_malformed_profile_user_id_returns_404(self, async_client: AsyncClient):
        response = await async_client.get("/api/profile/user/12345")
        assert response.status_code == 404
        assert response.json()["errors"][0]["msg"] == "Resource with id '12345' was not found"
