from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.subscriptions.schemas.subscription import SubscriptionCreate
from app.modules.subscriptions.services.subscription import create_subscription
from app.modules.user_management.schemas.user import Success

router = APIRouter()

@router.post("/subscribe", response_model=Success)
def subscribe(
    *,
    db: Session = Depends(get_db),
    subscription_in: SubscriptionCreate,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Record a plan purchase for the current user"""
    create_subscription(db, subscription_in, current_user_id)
    return Success()
