import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.security import verify_password
from app.modules.user_management.models.user import User
from app.modules.user_management.services.user import get_user_by_username

logger = logging.getLogger("app")

def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    """
    Return the user if the credentials match, otherwise None.

    Unknown usernames and wrong passwords are indistinguishable to the caller.
    """
    user = get_user_by_username(db, username=username)
    if not user:
        logger.info("Login failed: unknown username")
        return None
    if not verify_password(password, user.password):
        logger.info(f"Login failed: wrong password for user {user.id}")
        return None
    return user
