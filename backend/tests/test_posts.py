"""
API tests for posts, likes and comments.
"""
import uuid
from typing import Dict

import pytest
from httpx import AsyncClient


async def create_post(client: AsyncClient, headers: Dict[str, str], text: str = "hello") -> dict:
    response = await client.post("/api/posts", json={"text": text}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


async def account_id(client: AsyncClient, headers: Dict[str, str]) -> str:
    response = await client.get("/api/auth", headers=headers)
    return response.json()["id"]


@pytest.mark.asyncio
async def test_create_post_snapshots_author(client: AsyncClient, alice) -> None:
    post = await create_post(client, alice)

    assert post["text"] == "hello"
    assert post["name"] == "Alice"
    assert post["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert post["user"] == await account_id(client, alice)
    assert post["likes"] == []
    assert post["comments"] == []


@pytest.mark.asyncio
async def test_create_post_requires_text(client: AsyncClient, alice) -> None:
    response = await client.post("/api/posts", json={"text": ""}, headers=alice)
    assert response.status_code == 400
    assert response.json() == {"errors": [{"msg": "Text is required", "field": "text"}]}


@pytest.mark.asyncio
async def test_posts_require_token(client: AsyncClient) -> None:
    assert (await client.get("/api/posts")).status_code == 401
    assert (await client.post("/api/posts", json={"text": "x"})).status_code == 401


@pytest.mark.asyncio
async def test_list_posts_newest_first(client: AsyncClient, alice, bob) -> None:
    await create_post(client, alice, "first")
    await create_post(client, bob, "second")
    await create_post(client, alice, "third")

    response = await client.get("/api/posts", headers=alice)
    assert response.status_code == 200
    assert [p["text"] for p in response.json()] == ["third", "second", "first"]


@pytest.mark.asyncio
@pytest.mark.parametrize("post_id", ["not-an-id", str(uuid.uuid4())])
async def test_get_post_not_found(client: AsyncClient, alice, post_id: str) -> None:
    response = await client.get(f"/api/posts/{post_id}", headers=alice)
    assert response.status_code == 404
    assert response.json() == {"detail": "Post not found"}


@pytest.mark.asyncio
async def test_delete_post_by_non_owner_is_forbidden(client: AsyncClient, alice, bob) -> None:
    post = await create_post(client, alice)

    response = await client.delete(f"/api/posts/{post['id']}", headers=bob)
    assert response.status_code == 401
    assert response.json() == {"detail": "User not authorized"}

    still_there = await client.get(f"/api/posts/{post['id']}", headers=alice)
    assert still_there.status_code == 200
    assert still_there.json()["text"] == post["text"]


@pytest.mark.asyncio
async def test_delete_post_by_owner(client: AsyncClient, alice) -> None:
    post = await create_post(client, alice)

    response = await client.delete(f"/api/posts/{post['id']}", headers=alice)
    assert response.status_code == 200
    assert response.json() == {"msg": "Post removed"}

    gone = await client.get(f"/api/posts/{post['id']}", headers=alice)
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_like_toggles(client: AsyncClient, alice, bob) -> None:
    post = await create_post(client, alice)
    alice_id = await account_id(client, alice)
    bob_id = await account_id(client, bob)

    liked = await client.put(f"/api/posts/like/{post['id']}", headers=alice)
    assert liked.status_code == 200
    assert [like["user"] for like in liked.json()] == [alice_id]

    liked_by_bob = await client.put(f"/api/posts/like/{post['id']}", headers=bob)
    # newest like first
    assert [like["user"] for like in liked_by_bob.json()] == [bob_id, alice_id]

    unliked = await client.put(f"/api/posts/like/{post['id']}", headers=bob)
    assert [like["user"] for like in unliked.json()] == [alice_id]

    unliked = await client.put(f"/api/posts/like/{post['id']}", headers=alice)
    assert unliked.json() == []


@pytest.mark.asyncio
async def test_like_missing_post_is_not_found(client: AsyncClient, alice) -> None:
    response = await client.put(f"/api/posts/like/{uuid.uuid4()}", headers=alice)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_comment_add(client: AsyncClient, alice, bob) -> None:
    post = await create_post(client, alice)

    response = await client.post(f"/api/posts/{post['id']}/comment", json={"text": "nice"}, headers=bob)
    assert response.status_code == 200
    comments = response.json()
    assert len(comments) == 1
    assert comments[0]["text"] == "nice"
    assert comments[0]["name"] == "Bob"
    assert comments[0]["user"] == await account_id(client, bob)
    assert comments[0]["id"]


@pytest.mark.asyncio
async def test_comment_validation_and_missing_post(client: AsyncClient, alice) -> None:
    post = await create_post(client, alice)

    empty = await client.post(f"/api/posts/{post['id']}/comment", json={}, headers=alice)
    assert empty.status_code == 400
    assert empty.json()["errors"][0]["msg"] == "Text is required"

    missing = await client.post(f"/api/posts/{uuid.uuid4()}/comment", json={"text": "hi"}, headers=alice)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_delete_comment_removes_exactly_the_target(client: AsyncClient, alice, bob) -> None:
    post = await create_post(client, alice)
    url = f"/api/posts/{post['id']}/comment"

    await client.post(url, json={"text": "one"}, headers=bob)
    await client.post(url, json={"text": "two"}, headers=bob)
    response = await client.post(url, json={"text": "three"}, headers=bob)
    comments = response.json()
    assert [c["text"] for c in comments] == ["three", "two", "one"]

    target = comments[2]["id"]
    response = await client.delete(f"{url}/{target}", headers=bob)
    assert response.status_code == 200
    assert [c["text"] for c in response.json()] == ["three", "two"]


@pytest.mark.asyncio
async def test_delete_comment_only_by_its_author(client: AsyncClient, alice, bob) -> None:
    post = await create_post(client, alice)
    url = f"/api/posts/{post['id']}/comment"
    comment = (await client.post(url, json={"text": "mine"}, headers=bob)).json()[0]

    # the post's owner is not the comment's author
    response = await client.delete(f"{url}/{comment['id']}", headers=alice)
    assert response.status_code == 401

    post_now = await client.get(f"/api/posts/{post['id']}", headers=alice)
    assert [c["id"] for c in post_now.json()["comments"]] == [comment["id"]]


@pytest.mark.asyncio
async def test_delete_unknown_comment(client: AsyncClient, alice) -> None:
    post = await create_post(client, alice)

    response = await client.delete(f"/api/posts/{post['id']}/comment/{uuid.uuid4()}", headers=alice)
    assert response.status_code == 404
    assert response.json() == {"detail": "Comment does not exist"}
