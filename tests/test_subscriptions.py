from app.modules.subscriptions.models.subscription import Subscription

from helpers import auth


def test_subscribe_records_plan(client, db, alice):
    response = client.post(
        "/subscribe",
        json={"plan": "premium", "price": 9.99, "period": "monthly"},
        headers=auth(alice),
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    subscription = db.query(Subscription).one()
    assert subscription.user_id == 1
    assert subscription.plan == "premium"
    assert float(subscription.price) == 9.99
    assert subscription.period == "monthly"


def test_subscriptions_are_append_only(client, db, alice):
    for _ in range(2):
        client.post("/subscribe", json={"plan": "basic", "price": 0, "period": "yearly"}, headers=auth(alice))

    assert db.query(Subscription).count() == 2


def test_subscribe_requires_auth(client):
    assert client.post("/subscribe", json={"plan": "basic"}).status_code == 401
