from typing import Optional
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.modules.posts.comments.models.comment import Comment, CommentLike

logger = logging.getLogger("app")

def get_comment(db: Session, comment_id: int) -> Optional[Comment]:
    """Get comment by ID"""
    return db.query(Comment).filter(Comment.id == comment_id).first()

def create_comment(db: Session, post_id: int, user_id: int, text: str) -> Comment:
    """Create a new comment"""
    comment = Comment(post_id=post_id, user_id=user_id, comment=text)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info(f"User {user_id} commented on post {post_id}")
    return comment

def count_comment_likes(db: Session, comment_id: int) -> int:
    return (
        db.query(func.count(CommentLike.user_id))
        .filter(CommentLike.comment_id == comment_id)
        .scalar()
        or 0
    )

def has_liked_comment(db: Session, user_id: int, comment_id: int) -> bool:
    return (
        db.query(CommentLike)
        .filter(CommentLike.user_id == user_id, CommentLike.comment_id == comment_id)
        .first()
        is not None
    )

def like_comment(db: Session, user_id: int, comment_id: int) -> int:
    """
    Like a comment and return its like count.

    Unlike post likes, a repeated like is absorbed: the conflicting insert
    is rolled back and the current count is returned.
    """
    db.add(CommentLike(user_id=user_id, comment_id=comment_id))
    try:
        db.commit()
        logger.info(f"User {user_id} liked comment {comment_id}")
    except IntegrityError:
        db.rollback()
        logger.debug(f"User {user_id} already liked comment {comment_id}")
    return count_comment_likes(db, comment_id)

def unlike_comment(db: Session, user_id: int, comment_id: int) -> int:
    """Remove a comment like if present and return the like count"""
    db.query(CommentLike).filter(
        CommentLike.user_id == user_id,
        CommentLike.comment_id == comment_id,
    ).delete(synchronize_session=False)
    db.commit()
    return count_comment_likes(db, comment_id)
