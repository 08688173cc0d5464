from typing import List, Optional
import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import get_password_hash
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger("app")

def get_user(db: Session, user_id: int) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    """Get user by exact username"""
    return db.query(User).filter(User.username == username).first()

def create_user(db: Session, user_in: UserCreate, rounds: int) -> Optional[User]:
    """
    Create a user with a hashed password.

    Returns None when the username is already taken; uniqueness is left to
    the database constraint rather than checked beforehand.
    """
    user = User(
        name=user_in.name,
        username=user_in.username,
        password=get_password_hash(user_in.password, rounds),
        location=user_in.location,
        birthdate=user_in.birthdate,
        avatar_url=user_in.avatar_url,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Registration rejected, username taken: {user_in.username}")
        return None
    db.refresh(user)
    logger.info(f"Created user {user.id} ({user.username})")
    return user

def update_user(db: Session, user: User, user_in: UserUpdate, rounds: int) -> Optional[User]:
    """
    Update the fields that were sent. A missing avatar or password keeps
    the stored one. Returns None on a username collision.
    """
    update_data = user_in.model_dump(exclude_unset=True, exclude_none=True)

    # Handle password update separately to ensure proper hashing
    if "password" in update_data:
        update_data["password"] = get_password_hash(update_data["password"], rounds)

    for field, value in update_data.items():
        setattr(user, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Profile update for user {user.id} rejected, username taken")
        return None
    db.refresh(user)
    logger.info(f"Updated profile of user {user.id}: {sorted(update_data)}")
    return user

def search_users(db: Session, query: str) -> List[User]:
    """Case-insensitive substring match on username or name; empty query matches everyone"""
    term = query.lower()
    return (
        db.query(User)
        .filter(
            or_(
                func.lower(User.username).contains(term, autoescape=True),
                func.lower(User.name).contains(term, autoescape=True),
            )
        )
        .order_by(User.id)
        .all()
    )
