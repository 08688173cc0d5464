from helpers import auth


def test_like_then_like_again(client, bob, post_id):
    first = client.post("/like-post", json={"postId": post_id}, headers=auth(bob))
    second = client.post("/like-post", json={"postId": post_id}, headers=auth(bob))

    assert first.status_code == 200
    assert first.json() == {"likes": 1}
    assert second.status_code == 400
    assert second.json() == {"error": "You already liked this post"}
    assert client.get("/posts", headers=auth(bob)).json()[0]["likes"] == 1


def test_unlike_without_like_is_400(client, bob, post_id):
    response = client.post("/unlike-post", json={"postId": post_id}, headers=auth(bob))

    assert response.status_code == 400
    assert response.json() == {"error": "You have not liked this post"}
    assert client.get("/posts", headers=auth(bob)).json()[0]["likes"] == 0


def test_unlike_returns_new_count(client, alice, bob, post_id):
    client.post("/like-post", json={"postId": post_id}, headers=auth(alice))
    client.post("/like-post", json={"postId": post_id}, headers=auth(bob))

    response = client.post("/unlike-post", json={"postId": post_id}, headers=auth(bob))

    assert response.json() == {"likes": 1}


def test_like_missing_post_is_404(client, bob):
    for path in ("/like-post", "/unlike-post"):
        response = client.post(path, json={"postId": 999}, headers=auth(bob))
        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}


def test_check_like(client, bob, post_id):
    assert client.get(f"/check-like/{post_id}", headers=auth(bob)).json() == {"liked": False}

    client.post("/like-post", json={"postId": post_id}, headers=auth(bob))

    assert client.get(f"/check-like/{post_id}", headers=auth(bob)).json() == {"liked": True}


def test_like_requires_post_id(client, bob):
    response = client.post("/like-post", json={}, headers=auth(bob))

    assert response.status_code == 400
    assert "postId" in response.json()["error"]
