from datetime import datetime

import pytest
from sqlalchemy import select, update

from models.post import Post, Comment

OLD = datetime(2020, 1, 1, 12, 0, 0)


async def backdate(session_factory, model, row_id):
    # explicit values take precedence over onupdate
    async with session_factory() as session:
        await session.execute(
            update(model).where(model.id == row_id).values(created_at=OLD, updated_at=OLD)
        )
        await session.commit()


async def stamps(session_factory, model, row_id):
    async with session_factory() as session:
        res = await session.execute(
            select(model.created_at, model.updated_at).where(model.id == row_id)
        )
        return res.one()


@pytest.fixture
async def old_post(session_factory, make_post):
    created = await make_post(title="Same", text="Body", tags=("a",))
    await backdate(session_factory, Post, created["id"])
    return created


class TestPostTimestamps:
    async def test_tag_only_update_refreshes_updated_at(self, client, session_factory, old_post):
        response = await client.put(
            f"/api/posts/{old_post['id']}",
            json={"title": "Same", "text": "Body", "tags": ["b"]},
        )
        assert response.status_code == 200
        created_at, updated_at = await stamps(session_factory, Post, old_post["id"])
        assert updated_at > OLD
        assert created_at == OLD

    async def test_like_refreshes_updated_at(self, client, session_factory, old_post):
        response = await client.post(f"/api/posts/{old_post['id']}/likes")
        assert response.json() == 1
        created_at, updated_at = await stamps(session_factory, Post, old_post["id"])
        assert updated_at > OLD
        assert created_at == OLD

    async def test_image_upload_refreshes_updated_at(self, client, session_factory, old_post):
        response = await client.put(
            f"/api/posts/{old_post['id']}/image",
            files={"image": ("a.png", b"png-bytes", "image/png")},
        )
        assert response.status_code == 200
        created_at, updated_at = await stamps(session_factory, Post, old_post["id"])
        assert updated_at > OLD
        assert created_at == OLD

    async def test_reads_leave_timestamps_alone(self, client, session_factory, old_post):
        await client.get(f"/api/posts/{old_post['id']}")
        await client.get("/api/posts", params={"search": "Same"})
        assert tuple(await stamps(session_factory, Post, old_post["id"])) == (OLD, OLD)

    async def test_rejected_image_leaves_timestamps_alone(self, client, session_factory, old_post):
        response = await client.put(
            f"/api/posts/{old_post['id']}/image",
            files={"image": ("a.png", b"", "image/png")},
        )
        assert response.status_code == 400
        assert tuple(await stamps(session_factory, Post, old_post["id"])) == (OLD, OLD)


class TestCommentTimestamps:
    async def test_update_refreshes_updated_at(self, client, session_factory, old_post):
        response = await client.post(f"/api/posts/{old_post['id']}/comments", json={"text": "first"})
        comment_id = response.json()["id"]
        await backdate(session_factory, Comment, comment_id)

        response = await client.put(
            f"/api/posts/{old_post['id']}/comments/{comment_id}", json={"text": "first"}
        )
        assert response.status_code == 200
        created_at, updated_at = await stamps(session_factory, Comment, comment_id)
        assert updated_at > OLD
        assert created_at == OLD
