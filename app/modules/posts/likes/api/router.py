from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.posts.services.post import get_post
from app.modules.posts.likes.schemas.like import LikeCount, LikeRequest, LikeStatus
from app.modules.posts.likes.services.like import get_like, like_post, unlike_post

router = APIRouter()

def _validate_post(db: Session, post_id: int) -> None:
    """Validate post exists or raise HTTPException"""
    post = get_post(db, post_id=post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

@router.get("/check-like/{post_id}", response_model=LikeStatus)
def check_like(
    *,
    db: Session = Depends(get_db),
    post_id: int = Path(..., description="The ID of the post to check"),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Check whether the current user liked a post"""
    return LikeStatus(liked=get_like(db, current_user_id, post_id) is not None)

@router.post("/like-post", response_model=LikeCount)
def like(
    *,
    db: Session = Depends(get_db),
    like_in: LikeRequest,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Like a post; liking it twice is an error"""
    _validate_post(db, like_in.post_id)

    likes = like_post(db, current_user_id, like_in.post_id)
    if likes is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You already liked this post"
        )
    return LikeCount(likes=likes)

@router.post("/unlike-post", response_model=LikeCount)
def unlike(
    *,
    db: Session = Depends(get_db),
    like_in: LikeRequest,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Remove the current user's like from a post"""
    _validate_post(db, like_in.post_id)

    likes = unlike_post(db, current_user_id, like_in.post_id)
    if likes is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You have not liked this post"
        )
    return LikeCount(likes=likes)
