from app.core.security import create_access_token

from helpers import add_comment, auth


def test_add_comment_returns_whole_post(client, alice, bob, post_id):
    client.post("/like-post", json={"postId": post_id}, headers=auth(bob))

    post = add_comment(client, bob, post_id, "great post")

    assert post["id"] == post_id
    assert post["author"] == "Alice"
    assert post["likes"] == 1
    assert len(post["comments"]) == 1
    comment = post["comments"][0]
    assert comment["username"] == "bob"
    assert comment["comment"] == "great post"
    assert comment["likes"] == 0
    assert comment["avatar_url"] is None


def test_add_comment_matches_feed_entry(client, alice, bob, post_id):
    post = add_comment(client, bob, post_id)

    assert client.get("/posts", headers=auth(alice)).json()[0] == post


def test_add_comment_to_missing_post_is_404(client, bob):
    response = client.post("/add-comment", json={"postId": 5, "comment": "hi"}, headers=auth(bob))

    assert response.status_code == 404
    assert response.json() == {"error": "Post not found"}


def test_add_comment_by_vanished_user_is_404(client, settings, post_id):
    token = create_access_token(404, settings)

    response = client.post("/add-comment", json={"postId": post_id, "comment": "hi"}, headers=auth(token))

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_add_comment_requires_text(client, bob, post_id):
    response = client.post("/add-comment", json={"postId": post_id}, headers=auth(bob))

    assert response.status_code == 400


def test_comment_like_twice_is_absorbed(client, alice, bob, post_id):
    comment_id = add_comment(client, alice, post_id)["comments"][0]["id"]

    first = client.post("/like-comment", json={"commentId": comment_id}, headers=auth(bob))
    second = client.post("/like-comment", json={"commentId": comment_id}, headers=auth(bob))

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json() == {"likes": 1}


def test_comment_unlike_without_like_is_noop(client, alice, bob, post_id):
    comment_id = add_comment(client, alice, post_id)["comments"][0]["id"]
    client.post("/like-comment", json={"commentId": comment_id}, headers=auth(alice))

    first = client.post("/unlike-comment", json={"commentId": comment_id}, headers=auth(bob))
    client.post("/unlike-comment", json={"commentId": comment_id}, headers=auth(alice))
    second = client.post("/unlike-comment", json={"commentId": comment_id}, headers=auth(alice))

    assert first.json() == {"likes": 1}
    assert second.status_code == 200
    assert second.json() == {"likes": 0}


def test_check_comment_like(client, alice, bob, post_id):
    comment_id = add_comment(client, alice, post_id)["comments"][0]["id"]

    before = client.get(f"/check-comment-like/{comment_id}", headers=auth(bob)).json()
    client.post("/like-comment", json={"commentId": comment_id}, headers=auth(bob))
    after = client.get(f"/check-comment-like/{comment_id}", headers=auth(bob)).json()

    assert before == {"liked": False}
    assert after == {"liked": True}


def test_like_missing_comment_is_404(client, bob):
    response = client.post("/like-comment", json={"commentId": 31}, headers=auth(bob))

    assert response.status_code == 404
    assert response.json() == {"error": "Comment not found"}
