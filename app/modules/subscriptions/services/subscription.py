import logging

from sqlalchemy.orm import Session

from app.modules.subscriptions.models.subscription import Subscription
from app.modules.subscriptions.schemas.subscription import SubscriptionCreate

logger = logging.getLogger("app")

def create_subscription(db: Session, subscription_in: SubscriptionCreate, user_id: int) -> Subscription:
    """Record a plan purchase; plan and price are stored as given"""
    subscription = Subscription(user_id=user_id, **subscription_in.model_dump())
    db.add(subscription)
    db.commit()
    db.refresh(subscription)
    logger.info(f"User {user_id} subscribed to plan {subscription.plan!r}")
    return subscription
