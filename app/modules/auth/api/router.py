"""Authentication router: registration and password login"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.security import create_access_token, password_is_hashable
from app.core.storage import InvalidUpload, LocalImageStorage
from app.db.session import get_db
from app.deps import get_app_settings, get_image_storage
from app.modules.auth.schemas.auth import LoginRequest, LoginResponse, Token
from app.modules.auth.services.auth import authenticate_user
from app.modules.user_management.schemas.user import UserCreate
from app.modules.user_management.services.user import create_user

router = APIRouter()

@router.post("/register", response_model=Token)
async def register(
    *,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    storage: LocalImageStorage = Depends(get_image_storage),
    name: str = Form(...),
    username: str = Form(...),
    password: str = Form(...),
    location: Optional[str] = Form(None),
    birthdate: Optional[date] = Form(None),
    avatar: Optional[UploadFile] = File(None),
) -> Token:
    """Create an account and return a token for it"""
    if not password_is_hashable(password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password must not contain NUL characters",
        )

    try:
        avatar_url = await storage.save_image(avatar)
    except InvalidUpload as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    user_in = UserCreate(
        name=name,
        username=username,
        password=password,
        location=location,
        birthdate=birthdate,
        avatar_url=avatar_url,
    )
    user = create_user(db, user_in, settings.BCRYPT_ROUNDS)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists",
        )

    return Token(token=create_access_token(user.id, settings))

@router.post("/login", response_model=LoginResponse)
def login(
    *,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    credentials: LoginRequest,
) -> LoginResponse:
    """Exchange username and password for a fresh token"""
    if not credentials.username or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required",
        )

    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return LoginResponse(token=create_access_token(user.id, settings))
