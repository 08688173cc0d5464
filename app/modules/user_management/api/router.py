from datetime import date
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.security import password_is_hashable
from app.core.storage import InvalidUpload, LocalImageStorage
from app.db.session import get_db
from app.deps import get_app_settings, get_current_user_id, get_image_storage
from app.modules.user_management.models.user import User
from app.modules.user_management.schemas.user import Profile, Success, UserSearchResult, UserUpdate
from app.modules.user_management.services.user import get_user, search_users, update_user

router = APIRouter()

def _validate_user(db: Session, user_id: int) -> User:
    """Validate user exists and return user object or raise HTTPException"""
    user = get_user(db, user_id=user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user

@router.get("/profile", response_model=Profile)
def read_profile(
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Get current user"""
    return _validate_user(db, current_user_id)

@router.post("/update-profile", response_model=Success)
async def update_profile(
    *,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    storage: LocalImageStorage = Depends(get_image_storage),
    name: Optional[str] = Form(None),
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    birthdate: Optional[date] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Update the fields that were sent; the avatar only changes on a new upload"""
    user = _validate_user(db, current_user_id)

    if password and not password_is_hashable(password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password must not contain NUL characters",
        )

    try:
        avatar_url = await storage.save_image(avatar)
    except InvalidUpload as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    user_in = UserUpdate(
        name=name,
        username=username,
        password=password or None,
        location=location,
        birthdate=birthdate,
        avatar_url=avatar_url,
    )
    if not update_user(db, user, user_in, settings.BCRYPT_ROUNDS):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists",
        )
    return Success()

@router.get("/search-users", response_model=List[UserSearchResult])
def search(
    *,
    db: Session = Depends(get_db),
    username: str = Query("", description="Substring of a username or name"),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """Search for users by name or username"""
    return search_users(db, username)
