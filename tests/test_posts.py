from app.core.security import create_access_token
from app.modules.posts.comments.models.comment import Comment, CommentLike
from app.modules.posts.likes.models.like import Like
from app.modules.posts.models.post import Post

from helpers import add_comment, add_post, auth, register


def test_add_post_returns_joined_author(client, alice, settings):
    response = client.post("/add-post", data={"text": "first"}, headers=auth(alice))

    assert response.status_code == 201
    body = response.json()
    assert body["userId"] == 1
    assert body["author"] == "Alice"
    assert body["username"] == "alice"
    assert body["avatar_url"] == settings.DEFAULT_AVATAR_URL
    assert body["text"] == "first"
    assert body["image_url"] is None
    assert body["likes"] == 0
    assert body["comments"] == []
    assert body["likedBy"] == []
    assert "created_at" in body


def test_add_post_requires_text(client, alice):
    response = client.post("/add-post", data={}, headers=auth(alice))

    assert response.status_code == 400


def test_add_post_for_vanished_author_is_404(client, settings):
    response = client.post(
        "/add-post",
        data={"text": "ghost"},
        headers=auth(create_access_token(77, settings)),
    )

    assert response.status_code == 404


def test_feed_is_newest_first(client, alice, bob):
    add_post(client, alice, "older")
    add_post(client, bob, "newer")

    feed = client.get("/posts", headers=auth(alice)).json()

    assert [post["text"] for post in feed] == ["newer", "older"]
    assert feed[0]["author"] == "Bob"
    assert feed[1]["user_id"] == 1


def test_feed_requires_auth(client):
    assert client.get("/posts").status_code == 401


def test_end_to_end_like_seen_by_both_users(client, alice, post_id):
    feed = client.get("/posts", headers=auth(alice)).json()
    assert feed[0]["text"] == "hello"
    assert feed[0]["likes"] == 0
    assert feed[0]["comments"] == []

    register(client, "bob")
    bob = client.post("/login", json={"username": "bob", "password": "secret123"}).json()["token"]
    assert client.post("/like-post", json={"postId": post_id}, headers=auth(bob)).json() == {"likes": 1}

    for token in (alice, bob):
        post = client.get("/posts", headers=auth(token)).json()[0]
        assert post["likes"] == 1


def test_feed_comments_in_creation_order_with_like_counts(client, alice, bob, post_id):
    add_comment(client, alice, post_id, "one")
    second = add_comment(client, bob, post_id, "two")["comments"][1]
    client.post("/like-comment", json={"commentId": second["id"]}, headers=auth(alice))

    comments = client.get("/posts", headers=auth(bob)).json()[0]["comments"]

    assert [c["comment"] for c in comments] == ["one", "two"]
    assert [c["username"] for c in comments] == ["alice", "bob"]
    assert [c["likes"] for c in comments] == [0, 1]
    assert set(comments[0]) == {"id", "username", "avatar_url", "comment", "created_at", "likes"}


def test_my_posts_only_mine_with_reduced_comments(client, alice, bob):
    mine = add_post(client, alice, "mine")
    add_post(client, bob, "theirs")
    add_comment(client, bob, mine, "hi alice")

    posts = client.get("/my-posts", headers=auth(alice)).json()

    assert [post["text"] for post in posts] == ["mine"]
    assert posts[0]["comments"][0]["comment"] == "hi alice"
    assert set(posts[0]["comments"][0]) == {"username", "comment", "created_at"}


def test_delete_post_removes_dependents(client, db, alice, bob, post_id):
    client.post("/like-post", json={"postId": post_id}, headers=auth(bob))
    comment = add_comment(client, bob, post_id)["comments"][0]
    client.post("/like-comment", json={"commentId": comment["id"]}, headers=auth(alice))

    response = client.delete(f"/delete-post/{post_id}", headers=auth(alice))

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Post deleted successfully"}
    assert client.get("/posts", headers=auth(alice)).json() == []
    assert db.query(Post).count() == 0
    assert db.query(Like).filter(Like.post_id == post_id).count() == 0
    assert db.query(Comment).filter(Comment.post_id == post_id).count() == 0
    assert db.query(CommentLike).count() == 0


def test_delete_someone_elses_post_is_403(client, alice, bob, post_id):
    response = client.delete(f"/delete-post/{post_id}", headers=auth(bob))

    assert response.status_code == 403
    assert response.json() == {"error": "You can only delete your own posts"}
    assert len(client.get("/posts", headers=auth(bob)).json()) == 1


def test_delete_missing_post_is_403(client, alice):
    assert client.delete("/delete-post/123", headers=auth(alice)).status_code == 403


def test_delete_post_bad_id_is_400(client, alice):
    assert client.delete("/delete-post/abc", headers=auth(alice)).status_code == 400
