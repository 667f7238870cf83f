"""
Tests for PUT /api/posts/comment/{post_id} and
DELETE /api/posts/comment/{post_id}/{comment_id}.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient


@pytest.fixture
def add_comment(async_client: AsyncClient, auth_headers):
    """Factory fixture that comments on a post and returns the comment list."""

    async def _add_comment(user: dict, post: dict, text: str = "Nice post") -> list[dict]:
        response = await async_client.put(
            f"/api/posts/comment/{post['id']}",
            json={"text": text},
            headers=auth_headers(user["token"]),
        )
        assert response.status_code == 200
        return response.json()

    return _add_comment


class TestAddComment:
    """PUT /api/posts/comment/{post_id} tests."""

    async def test_comment_copies_commenter(
        self, test_user: dict, second_user: dict, create_post, add_comment
    ):
        post = await create_post(test_user)
        comments = await add_comment(second_user, post, "Great")

        assert len(comments) == 1
        comment = comments[0]
        assert comment["id"]
        assert comment["text"] == "Great"
        assert comment["user"] == second_user["user_id"]
        assert comment["name"] == "Bob"
        assert comment["avatar"] == second_user["avatar"]
        assert comment["date"]

    async def test_newest_comment_first(
        self, test_user: dict, second_user: dict, create_post, add_comment
    ):
        post = await create_post(test_user)
        await add_comment(test_user, post, "first")
        comments = await add_comment(second_user, post, "second")

        assert [comment["text"] for comment in comments] == ["second", "first"]

    async def test_missing_text_returns_400(
        self, async_client: AsyncClient, test_user: dict, auth_headers, create_post
    ):
        post = await create_post(test_user)

        response = await async_client.put(
            f"/api/posts/comment/{post['id']}", json={}, headers=auth_headers(test_user["token"])
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["msg"] == "Text is required"

    async def test_unknown_post_returns_404(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        response = await async_client.put(
            f"/api/posts/comment/{uuid4()}",
            json={"text": "Hello?"},
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 404
        assert response.json() == {"errors": [{"msg": "Post not found"}]}


class TestDeleteComment:
    """DELETE /api/posts/comment/{post_id}/{comment_id} tests."""

    async def test_author_deletes_comment(
        self,
        async_client: AsyncClient,
        test_user: dict,
        second_user: dict,
        auth_headers,
        create_post,
        add_comment,
    ):
        post = await create_post(test_user)
        await add_comment(test_user, post, "keep")
        comments = await add_comment(second_user, post, "drop")
        drop_id = comments[0]["id"]

        response = await async_client.delete(
            f"/api/posts/comment/{post['id']}/{drop_id}",
            headers=auth_headers(second_user["token"]),
        )
        assert response.status_code == 200
        assert [comment["text"] for comment in response.json()] == ["keep"]

    async def test_post_owner_cannot_delete_others_comment(
        self,
        async_client: AsyncClient,
        test_user: dict,
        second_user: dict,
        auth_headers,
        create_post,
        add_comment,
    ):
        post = await create_post(test_user)
        comments = await add_comment(second_user, post)

        response = await async_client.delete(
            f"/api/posts/comment/{post['id']}/{comments[0]['id']}",
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 401
        assert response.json() == {"errors": [{"msg": "User not authorized"}]}

    async def test_unknown_comment_returns_404(
        self, async_client: AsyncClient, test_user: dict, auth_headers, create_post
    ):
        post = await create_post(test_user)

        response = await async_client.delete(
            f"/api/posts/comment/{post['id']}/{uuid4()}",
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 404
        assert response.json() == {"errors": [{"msg": "Comment not found"}]}

    async def test_comment_on_other_post_not_found(
        self,
        async_client: AsyncClient,
        test_user: dict,
        auth_headers,
        create_post,
        add_comment,
    ):
        """A comment id only matches on the post it belongs to."""
        first = await create_post(test_user, "first")
        second = await create_post(test_user, "second")
        comments = await add_comment(test_user, first)

        response = await async_client.delete(
            f"/api/posts/comment/{second['id']}/{comments[0]['id']}",
            headers=auth_headers(test_user["token"]),
        )
        assert response.status_code == 404
