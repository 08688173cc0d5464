from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.modules.posts.likes.models.like import Like
from app.modules.posts.services.post import count_post_likes

logger = logging.getLogger("app")

def get_like(db: Session, user_id: int, post_id: int) -> Optional[Like]:
    """Get like by user ID and post ID"""
    return (
        db.query(Like)
        .filter(Like.user_id == user_id, Like.post_id == post_id)
        .first()
    )

def like_post(db: Session, user_id: int, post_id: int) -> Optional[int]:
    """
    Like a post and return the new like count.

    A second like by the same user hits the unique_like constraint and
    returns None so the caller can report it.
    """
    db.add(Like(user_id=user_id, post_id=post_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"User {user_id} already liked post {post_id}")
        return None
    logger.info(f"User {user_id} liked post {post_id}")
    return count_post_likes(db, post_id)

def unlike_post(db: Session, user_id: int, post_id: int) -> Optional[int]:
    """Remove a like and return the new like count, or None if there was no like"""
    deleted = (
        db.query(Like)
        .filter(Like.user_id == user_id, Like.post_id == post_id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        db.rollback()
        return None
    db.commit()
    logger.info(f"User {user_id} unliked post {post_id}")
    return count_post_likes(db, post_id)
