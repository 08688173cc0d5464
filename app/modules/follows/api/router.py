from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.follows.schemas.follower import FollowRequest, FollowStatus
from app.modules.follows.services.follower import follow, is_following, unfollow
from app.modules.user_management.schemas.user import Success
from app.modules.user_management.services.user import get_user

router = APIRouter()

def _validate_user(db: Session, user_id: int) -> None:
    """Validate the followed user exists or raise HTTPException"""
    if not get_user(db, user_id=user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

@router.get("/check-follow/{user_id}", response_model=FollowStatus)
def check_follow(
    *,
    db: Session = Depends(get_db),
    user_id: int = Path(..., description="The ID of the user that may be followed"),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Check whether the current user follows another user"""
    return FollowStatus(is_following=is_following(db, current_user_id, user_id))

@router.post("/follow", response_model=Success)
def follow_user(
    *,
    db: Session = Depends(get_db),
    follow_in: FollowRequest,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Follow a user; following twice is not an error"""
    _validate_user(db, follow_in.following_id)
    follow(db, current_user_id, follow_in.following_id)
    return Success()

@router.post("/unfollow", response_model=Success)
def unfollow_user(
    *,
    db: Session = Depends(get_db),
    follow_in: FollowRequest,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Stop following a user; not following is not an error"""
    unfollow(db, current_user_id, follow_in.following_id)
    return Success()
