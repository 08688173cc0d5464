from app.modules.follows.models.follower import Follower

from helpers import auth


def test_follow_is_idempotent(client, db, alice, bob):
    first = client.post("/follow", json={"followingId": 2}, headers=auth(alice))
    second = client.post("/follow", json={"followingId": 2}, headers=auth(alice))

    assert first.json() == second.json() == {"success": True}
    assert client.get("/check-follow/2", headers=auth(alice)).json() == {"isFollowing": True}
    assert db.query(Follower).filter(Follower.follower_id == 1, Follower.following_id == 2).count() == 1


def test_follow_is_directed(client, alice, bob):
    client.post("/follow", json={"followingId": 2}, headers=auth(alice))

    assert client.get("/check-follow/1", headers=auth(bob)).json() == {"isFollowing": False}


def test_unfollow(client, alice, bob):
    client.post("/follow", json={"followingId": 2}, headers=auth(alice))

    response = client.post("/unfollow", json={"followingId": 2}, headers=auth(alice))

    assert response.json() == {"success": True}
    assert client.get("/check-follow/2", headers=auth(alice)).json() == {"isFollowing": False}


def test_unfollow_when_not_following_succeeds(client, alice, bob):
    response = client.post("/unfollow", json={"followingId": 2}, headers=auth(alice))

    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_follow_unknown_user_is_404(client, alice):
    response = client.post("/follow", json={"followingId": 50}, headers=auth(alice))

    assert response.status_code == 404


def test_follow_rejects_unknown_keys(client, alice, bob):
    response = client.post("/follow", json={"followingId": 2, "extra": 1}, headers=auth(alice))

    assert response.status_code == 400
