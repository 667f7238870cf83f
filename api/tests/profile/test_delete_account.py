"""
Tests for DELETE /api/profile.

Deleting an account removes the user, their profile, their posts, and every
like and comment they left.
"""

from httpx import AsyncClient


class TestDeleteAccount:
    """DELETE /api/profile tests."""

    async def test_delete_returns_message(
        self, async_client: AsyncClient, test_user: dict, auth_headers, create_profile
    ):
        await create_profile(test_user)

        response = await async_client.delete(
            "/api/profile", headers=auth_headers(test_user["token"])
        )
        assert response.status_code == 200
        assert response.json() == {"msg": "User deleted"}

    async def test_delete_without_profile_still_removes_user(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.delete(
            "/api/profile", headers=auth_headers(test_user["token"])
        )
        assert response.status_code == 200

        me = await async_client.get("/api/auth", headers=auth_headers(test_user["token"]))
        assert me.status_code == 404

    async def test_profile_and_login_gone(
        self, async_client: AsyncClient, test_user: dict, auth_headers, create_profile
    ):
        await create_profile(test_user)
        await async_client.put(
            "/api/profile/experience",
            json={"title": "Engineer", "company": "Acme", "from": "2020-01-01"},
            headers=auth_headers(test_user["token"]),
        )

        await async_client.delete("/api/profile", headers=auth_headers(test_user["token"]))

        profile = await async_client.get(f"/api/profile/user/{test_user['user_id']}")
        assert profile.status_code == 404

        login = await async_client.post(
            "/api/auth",
            json={"email": test_user["email"], "password": test_user["password"]},
        )
        assert login.status_code == 400

    async def test_posts_likes_and_comments_removed(
        self,
        async_client: AsyncClient,
        test_user: dict,
        second_user: dict,
        auth_headers,
        create_post,
    ):
        own_post = await create_post(test_user, "Alice's post")
        other_post = await create_post(second_user, "Bob's post")

        alice = auth_headers(test_user["token"])
        await async_client.put(f"/api/posts/like/{other_post['id']}", headers=alice)
        await async_client.put(
            f"/api/posts/comment/{other_post['id']}", json={"text": "Nice"}, headers=alice
        )

        response = await async_client.delete("/api/profile", headers=alice)
        assert response.status_code == 200

        feed = await async_client.get("/api/posts", headers=auth_headers(second_user["token"]))
        posts = feed.json()
        assert [post["id"] for post in posts] == [other_post["id"]]
        assert posts[0]["likes"] == []
        assert posts[0]["comments"] == []

        gone = await async_client.get(
            f"/api/posts/{own_post['id']}", headers=auth_headers(second_user["token"])
        )
        assert gone.status_code == 404

    async def test_other_users_unaffected(
        self,
        async_client: AsyncClient,
        test_user: dict,
        second_user: dict,
        auth_headers,
        create_profile,
    ):
        await create_profile(test_user)
        await create_profile(second_user)

        await async_client.delete("/api/profile", headers=auth_headers(test_user["token"]))

        listing = await async_client.get("/api/profile")
        assert [profile["user"]["name"] for profile in listing.json()] == ["Bob"]

    async def test_requires_token(self, async_client: AsyncClient):
        response = await async_client.delete("/api/profile")
        assert response.status_code == 401
