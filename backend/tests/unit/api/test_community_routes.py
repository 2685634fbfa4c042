"""
Tests for the community routes.
"""

import uuid


def create_post(client, headers, content="Today was a good day", anonymous=False):
    return client.post(
        "/api/community/posts",
        json={"content": content, "isAnonymous": anonymous},
        headers=headers,
    )


class TestPosts:
    def test_create_post(self, client, auth_headers, test_user):
        response = create_post(client, auth_headers, "  Small wins count  ")

        assert response.status_code == 201
        post = response.json()
        assert post["content"] == "Small wins count"
        assert post["likes"] == 0
        assert post["comments"] == []
        assert post["author"] == {"id": str(test_user.id), "username": "testuser"}

    def test_blank_content_rejected(self, client, auth_headers):
        response = create_post(client, auth_headers, "   ")

        assert response.status_code == 400

    def test_anonymous_author_hidden(self, client, auth_headers):
        post = create_post(client, auth_headers, anonymous=True).json()

        assert post["author"] == {"id": None, "username": "Anonymous User"}
        assert post["isAnonymous"] is True

    def test_list_newest_first(self, client, auth_headers):
        first = create_post(client, auth_headers, "first").json()["id"]
        second = create_post(client, auth_headers, "second").json()["id"]

        response = client.get("/api/community/posts", headers=auth_headers)

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [second, first]

    def test_get_missing_post(self, client, auth_headers):
        response = client.get(
            f"/api/community/posts/{uuid.uuid4()}", headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"

    def test_requires_authentication(self, client):
        assert client.get("/api/community/posts").status_code == 401


class TestCommentsAndLikes:
    def test_add_comments_in_order(
        self, client, auth_headers, other_auth_headers, other_user
    ):
        post_id = create_post(client, auth_headers).json()["id"]

        client.post(
            f"/api/community/posts/{post_id}/comments",
            json={"content": "Proud of you"},
            headers=other_auth_headers,
        )
        response = client.post(
            f"/api/community/posts/{post_id}/comments",
            json={"content": "Same here", "isAnonymous": True},
            headers=auth_headers,
        )

        assert response.status_code == 201
        comments = response.json()["comments"]
        assert [c["content"] for c in comments] == ["Proud of you", "Same here"]
        assert comments[0]["author"] == {
            "id": str(other_user.id),
            "username": "otheruser",
        }
        assert comments[1]["author"]["username"] == "Anonymous User"
        assert comments[1]["likes"] == 0

    def test_comment_on_missing_post(self, client, auth_headers):
        response = client.post(
            "/api/community/posts/not-an-id/comments",
            json={"content": "hello"},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_like_increments(self, client, auth_headers, other_auth_headers):
        post_id = create_post(client, auth_headers).json()["id"]

        client.put(f"/api/community/posts/{post_id}/like", headers=auth_headers)
        response = client.put(
            f"/api/community/posts/{post_id}/like", headers=other_auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {"likes": 2}

        post = client.get(f"/api/community/posts/{post_id}", headers=auth_headers)
        assert post.json()["likes"] == 2
