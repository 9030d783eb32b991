class TestComments:
    async def test_create_and_get_comment(self, client, make_post):
        post = await make_post()
        response = await client.post(f"/api/posts/{post['id']}/comments", json={"text": "Nice post"})
        assert response.status_code == 201
        comment = response.json()
        assert comment["text"] == "Nice post"
        assert comment["postId"] == post["id"]

        response = await client.get(f"/api/posts/{post['id']}/comments/{comment['id']}")
        assert response.status_code == 200
        assert response.json() == comment

    async def test_list_comments_newest_first(self, client, make_post):
        post = await make_post()
        for text in ("first", "second", "third"):
            await client.post(f"/api/posts/{post['id']}/comments", json={"text": text})
        response = await client.get(f"/api/posts/{post['id']}/comments")
        assert response.status_code == 200
        assert [c["text"] for c in response.json()] == ["third", "second", "first"]

    async def test_list_comments_for_post_without_comments(self, client, make_post):
        post = await make_post()
        response = await client.get(f"/api/posts/{post['id']}/comments")
        assert response.status_code == 200
        assert response.json() == []

    async def test_comment_on_missing_post_is_not_found(self, client):
        response = await client.post("/api/posts/404/comments", json={"text": "hello"})
        assert response.status_code == 404
        assert response.json()["message"] == "Post with id 404 not found"
        assert (await client.get("/api/posts/404/comments")).status_code == 404

    async def test_comment_under_wrong_post_is_not_found(self, client, make_post):
        owner = await make_post(title="owner")
        other = await make_post(title="other")
        comment = (await client.post(f"/api/posts/{owner['id']}/comments", json={"text": "mine"})).json()

        response = await client.get(f"/api/posts/{other['id']}/comments/{comment['id']}")
        assert response.status_code == 404
        assert response.json() == {
            "status": 404,
            "message": f"Comment with id {comment['id']} not found in post {other['id']}",
            "error": "Not Found",
        }
        update = await client.put(f"/api/posts/{other['id']}/comments/{comment['id']}", json={"text": "hijack"})
        assert update.status_code == 404
        delete = await client.delete(f"/api/posts/{other['id']}/comments/{comment['id']}")
        assert delete.status_code == 404

    async def test_update_comment(self, client, make_post):
        post = await make_post()
        comment = (await client.post(f"/api/posts/{post['id']}/comments", json={"text": "draft"})).json()
        response = await client.put(f"/api/posts/{post['id']}/comments/{comment['id']}", json={"text": "final"})
        assert response.status_code == 200
        assert response.json() == {"id": comment["id"], "text": "final", "postId": post["id"]}

    async def test_delete_comment(self, client, make_post):
        post = await make_post()
        comment = (await client.post(f"/api/posts/{post['id']}/comments", json={"text": "bye"})).json()
        response = await client.delete(f"/api/posts/{post['id']}/comments/{comment['id']}")
        assert response.status_code == 200
        assert (await client.get(f"/api/posts/{post['id']}/comments/{comment['id']}")).status_code == 404
        assert (await client.get(f"/api/posts/{post['id']}")).json()["commentsCount"] == 0

    async def test_comment_count_on_detail(self, client, make_post):
        post = await make_post()
        await client.post(f"/api/posts/{post['id']}/comments", json={"text": "a"})
        await client.post(f"/api/posts/{post['id']}/comments", json={"text": "b"})
        assert (await client.get(f"/api/posts/{post['id']}")).json()["commentsCount"] == 2

    async def test_comment_without_text_is_bad_request(self, client, make_post):
        post = await make_post()
        response = await client.post(f"/api/posts/{post['id']}/comments", json={})
        assert response.status_code == 400
