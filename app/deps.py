from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from app.core import security
from app.core.config import Settings
from app.core.storage import LocalImageStorage

# Missing tokens are reported by get_current_user_id, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

def get_app_settings(request: Request) -> Settings:
    """
    Dependency for the settings the application was built with
    """
    return request.app.state.settings

def get_image_storage(settings: Settings = Depends(get_app_settings)) -> LocalImageStorage:
    return LocalImageStorage(settings)

def get_current_user_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_app_settings),
) -> int:
    """
    Dependency for the id of the authenticated caller.

    No bearer token gives 401; a token that fails verification gives 403.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = security.verify_access_token(token, settings)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token",
        )

    request.state.user_id = user_id
    return user_id
