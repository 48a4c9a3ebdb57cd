"""End-to-end tests for posts, votes and comments."""

from uuid import uuid4

from tests.e2e.conftest import auth_headers, create_post, register


class TestPosts:
    """Tests for creating, reading, editing and deleting posts."""

    def test_create_and_fetch(self, client):
        """A new post is returned in the envelope and can be fetched."""
        # Arrange
        user = register(client)

        # Act
        post = create_post(client, user["token"])
        fetched = client.get(f"/api/posts/{post['id']}")

        # Assert
        assert post["userId"] == user["user"]["id"]
        assert post["firstName"] == "Ada"
        assert post["lastName"] == "Lovelace"
        assert post["post"] == "The long story behind it"
        assert post["imageUrl"] == "https://storage.test/1-dawn.png"
        assert post["comments"] == []
        assert post["votes"] == []
        assert post["voteCount"] == 0
        assert fetched.status_code == 200
        assert fetched.json() == {"success": True, "data": post}

    def test_create_requires_token(self, client):
        response = client.post(
            "/api/posts",
            json={
                "title": "t",
                "caption": "c",
                "imageUrl": "https://storage.test/x.png",
                "post": "p",
            },
        )

        assert response.status_code == 401

    def test_list_newest_first(self, client):
        # Arrange
        user = register(client)
        first = create_post(client, user["token"], title="first")
        second = create_post(client, user["token"], title="second")

        # Act
        response = client.get("/api/posts")

        # Assert
        assert response.status_code == 200
        ids = [p["id"] for p in response.json()["data"]]
        assert ids == [second["id"], first["id"]]

    def test_list_by_user(self, client):
        # Arrange
        ada = register(client)
        grace = register(client, email="grace@example.com", first_name="Grace")
        mine = create_post(client, ada["token"])
        create_post(client, grace["token"])

        # Act
        by_posts_route = client.get(f"/api/posts/user/{ada['user']['id']}")
        by_users_route = client.get(f"/api/users/{ada['user']['id']}/posts")

        # Assert
        assert [p["id"] for p in by_posts_route.json()["data"]] == [mine["id"]]
        assert [p["id"] for p in by_users_route.json()["data"]] == [mine["id"]]

    def test_missing_post(self, client):
        response = client.get(f"/api/posts/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Post not found"}

    def test_malformed_post_id(self, client):
        response = client.get("/api/posts/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_author_edits_post(self, client):
        # Arrange
        user = register(client)
        post = create_post(client, user["token"])

        # Act
        response = client.put(
            f"/api/posts/{post['id']}",
            json={"title": "Better title"},
            headers=auth_headers(user["token"]),
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Better title"
        assert data["caption"] == post["caption"]

    def test_non_author_cannot_edit_or_delete(self, client):
        # Arrange
        ada = register(client)
        grace = register(client, email="grace@example.com", first_name="Grace")
        post = create_post(client, ada["token"])

        # Act
        edit = client.put(
            f"/api/posts/{post['id']}",
            json={"title": "Mine now"},
            headers=auth_headers(grace["token"]),
        )
        delete = client.delete(
            f"/api/posts/{post['id']}", headers=auth_headers(grace["token"])
        )

        # Assert
        assert edit.status_code == 403
        assert delete.status_code == 403
        assert client.get(f"/api/posts/{post['id']}").json()["data"] == post

    def test_author_deletes_post(self, client):
        # Arrange
        user = register(client)
        post = create_post(client, user["token"])

        # Act
        response = client.delete(
            f"/api/posts/{post['id']}", headers=auth_headers(user["token"])
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["data"]["message"] == "Post deleted successfully"
        assert client.get(f"/api/posts/{post['id']}").status_code == 404


class TestVoting:
    """Tests for POST /api/posts/{id}/vote."""

    def test_toggle_sequence(self, client):
        """up, up, down, up gives 1, 0, -1, 1 and at most one vote."""
        # Arrange
        author = register(client)
        voter = register(client, email="grace@example.com", first_name="Grace")
        post = create_post(client, author["token"])
        url = f"/api/posts/{post['id']}/vote"
        voter_id = voter["user"]["id"]

        expected = [
            ("upvote", 1, [{"userId": voter_id, "type": "upvote"}]),
            ("upvote", 0, []),
            ("downvote", -1, [{"userId": voter_id, "type": "downvote"}]),
            ("upvote", 1, [{"userId": voter_id, "type": "upvote"}]),
        ]

        for vote_type, count, votes in expected:
            # Act
            response = client.post(
                url, json={"type": vote_type}, headers=auth_headers(voter["token"])
            )

            # Assert
            assert response.status_code == 200, response.text
            data = response.json()["data"]
            assert data["voteCount"] == count
            assert data["votes"] == votes
            assert data["id"] == post["id"]

        stored = client.get(f"/api/posts/{post['id']}").json()["data"]
        assert stored["voteCount"] == 1

    def test_two_voters(self, client):
        # Arrange
        alice = register(client, email="alice@example.com", first_name="Alice")
        bob = register(client, email="bob@example.com", first_name="Bob")
        post = create_post(client, alice["token"])
        url = f"/api/posts/{post['id']}/vote"

        # Act
        for token, vote_type in [
            (alice["token"], "upvote"),
            (bob["token"], "downvote"),
            (alice["token"], "downvote"),
            (bob["token"], "downvote"),
        ]:
            response = client.post(
                url, json={"type": vote_type}, headers=auth_headers(token)
            )

        # Assert
        data = response.json()["data"]
        assert data["voteCount"] == -1
        assert data["votes"] == [{"userId": alice["user"]["id"], "type": "downvote"}]

    def test_second_voter_flips_to_upvote(self, client):
        """A up, B down, B up gives 1, 0, 2 with both votes up."""
        # Arrange
        alice = register(client, email="alice@example.com", first_name="Alice")
        bob = register(client, email="bob@example.com", first_name="Bob")
        post = create_post(client, alice["token"])
        url = f"/api/posts/{post['id']}/vote"

        counts = []
        for token, vote_type in [
            (alice["token"], "upvote"),
            (bob["token"], "downvote"),
            (bob["token"], "upvote"),
        ]:
            # Act
            response = client.post(
                url, json={"type": vote_type}, headers=auth_headers(token)
            )
            assert response.status_code == 200, response.text
            counts.append(response.json()["data"]["voteCount"])

        # Assert
        assert counts == [1, 0, 2]
        stored = client.get(f"/api/posts/{post['id']}").json()["data"]
        assert stored["voteCount"] == 2
        assert stored["votes"] == [
            {"userId": alice["user"]["id"], "type": "upvote"},
            {"userId": bob["user"]["id"], "type": "upvote"},
        ]

    def test_vote_requires_token(self, client):
        user = register(client)
        post = create_post(client, user["token"])

        response = client.post(
            f"/api/posts/{post['id']}/vote", json={"type": "upvote"}
        )

        assert response.status_code == 401
        stored = client.get(f"/api/posts/{post['id']}").json()["data"]
        assert stored["voteCount"] == 0

    def test_unknown_vote_type(self, client):
        user = register(client)
        post = create_post(client, user["token"])

        response = client.post(
            f"/api/posts/{post['id']}/vote",
            json={"type": "sideways"},
            headers=auth_headers(user["token"]),
        )

        assert response.status_code == 422

    def test_missing_token_wins_over_bad_body(self, client):
        """Without a token the caller is rejected before the body is checked."""
        user = register(client)
        post = create_post(client, user["token"])

        response = client.post(
            f"/api/posts/{post['id']}/vote", json={"type": "sideways"}
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Not authenticated"}

    def test_vote_on_missing_post(self, client):
        user = register(client)

        response = client.post(
            f"/api/posts/{uuid4()}/vote",
            json={"type": "upvote"},
            headers=auth_headers(user["token"]),
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"


class TestCommenting:
    """Tests for POST /api/posts/{id}/comment."""

    def test_comment_returns_list_newest_first(self, client):
        # Arrange
        author = register(client)
        commenter = register(client, email="grace@example.com", first_name="Grace")
        post = create_post(client, author["token"])
        url = f"/api/posts/{post['id']}/comment"

        # Act
        client.post(
            url, json={"comment": "first"}, headers=auth_headers(commenter["token"])
        )
        response = client.post(
            url, json={"comment": "second"}, headers=auth_headers(author["token"])
        )

        # Assert
        assert response.status_code == 201
        comments = response.json()["data"]
        assert [c["comment"] for c in comments] == ["second", "first"]
        assert "text" not in comments[0]
        assert comments[1]["userId"] == commenter["user"]["id"]
        assert comments[1]["firstName"] == "Grace"
        assert comments[1]["lastName"] == "Lovelace"
        assert comments[0]["id"] and comments[0]["createdAt"]

        stored = client.get(f"/api/posts/{post['id']}").json()["data"]
        assert stored["comments"] == comments

    def test_empty_comment(self, client):
        user = register(client)
        post = create_post(client, user["token"])

        response = client.post(
            f"/api/posts/{post['id']}/comment",
            json={"comment": "   "},
            headers=auth_headers(user["token"]),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Comment cannot be empty"

    def test_comment_requires_token(self, client):
        user = register(client)
        post = create_post(client, user["token"])

        response = client.post(
            f"/api/posts/{post['id']}/comment", json={"comment": "hello"}
        )

        assert response.status_code == 401

    def test_missing_token_wins_over_missing_field(self, client):
        user = register(client)
        post = create_post(client, user["token"])

        response = client.post(f"/api/posts/{post['id']}/comment", json={})

        assert response.status_code == 401
        stored = client.get(f"/api/posts/{post['id']}").json()["data"]
        assert stored["comments"] == []
