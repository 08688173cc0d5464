from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps import get_current_user_id
from app.modules.user_management.services.user import get_user
from app.modules.posts.schemas.post import FeedPost
from app.modules.posts.services.post import get_feed_post, get_post
from app.modules.posts.likes.schemas.like import LikeCount, LikeStatus
from app.modules.posts.comments.schemas.comment import CommentCreate, CommentLikeRequest
from app.modules.posts.comments.services.comment import (
    create_comment, get_comment, has_liked_comment, like_comment, unlike_comment
)

router = APIRouter()

def _validate_post(db: Session, post_id: int) -> None:
    """Validate post exists and return None or raise HTTPException"""
    post = get_post(db, post_id=post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

def _validate_comment(db: Session, comment_id: int) -> None:
    """Validate comment exists or raise HTTPException"""
    if not get_comment(db, comment_id=comment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found"
        )

@router.post("/add-comment", response_model=FeedPost)
def add_comment(
    *,
    db: Session = Depends(get_db),
    comment_in: CommentCreate,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Comment on a post and return the post as it now appears in the feed"""
    _validate_post(db, comment_in.post_id)
    if not get_user(db, user_id=current_user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    create_comment(db, comment_in.post_id, current_user_id, comment_in.comment)
    return get_feed_post(db, comment_in.post_id)

@router.get("/check-comment-like/{comment_id}", response_model=LikeStatus)
def check_comment_like(
    *,
    db: Session = Depends(get_db),
    comment_id: int = Path(..., description="The ID of the comment to check"),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Check whether the current user liked a comment"""
    return LikeStatus(liked=has_liked_comment(db, current_user_id, comment_id))

@router.post("/like-comment", response_model=LikeCount)
def like(
    *,
    db: Session = Depends(get_db),
    like_in: CommentLikeRequest,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Like a comment; a repeated like is absorbed"""
    _validate_comment(db, like_in.comment_id)
    return LikeCount(likes=like_comment(db, current_user_id, like_in.comment_id))

@router.post("/unlike-comment", response_model=LikeCount)
def unlike(
    *,
    db: Session = Depends(get_db),
    like_in: CommentLikeRequest,
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Remove a like from a comment; no like is a no-op"""
    _validate_comment(db, like_in.comment_id)
    return LikeCount(likes=unlike_comment(db, current_user_id, like_in.comment_id))
