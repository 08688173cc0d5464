import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.modules.follows.models.follower import Follower

logger = logging.getLogger(__name__)

def is_following(db: Session, follower_id: int, following_id: int) -> bool:
    """Check whether follower_id follows following_id"""
    return db.query(Follower).filter(
        Follower.follower_id == follower_id,
        Follower.following_id == following_id,
    ).first() is not None

def follow(db: Session, follower_id: int, following_id: int) -> None:
    """Follow a user; following twice leaves a single edge"""
    db.add(Follower(follower_id=follower_id, following_id=following_id))
    try:
        db.commit()
        logger.info(f"User {follower_id} now follows user {following_id}")
    except IntegrityError:
        db.rollback()
        logger.debug(f"User {follower_id} already follows user {following_id}")

def unfollow(db: Session, follower_id: int, following_id: int) -> None:
    """Unfollow a user; unfollowing a user that is not followed is a no-op"""
    deleted = db.query(Follower).filter(
        Follower.follower_id == follower_id,
        Follower.following_id == following_id,
    ).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info(f"User {follower_id} unfollowed user {following_id}")
