from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Path
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.storage import InvalidUpload, LocalImageStorage
from app.db.session import get_db
from app.deps import get_app_settings, get_current_user_id, get_image_storage
from app.modules.posts.schemas.post import CreatedPost, FeedPost, OwnPost, PostCreate, PostDeleted
from app.modules.posts.services.post import (
    create_post, delete_post, get_feed, get_owned_post, get_user_posts
)
from app.modules.user_management.services.user import get_user

router = APIRouter()

@router.post("/add-post", response_model=CreatedPost, status_code=status.HTTP_201_CREATED)
async def create_new_post(
    *,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    storage: LocalImageStorage = Depends(get_image_storage),
    text: str = Form(...),
    image: Optional[UploadFile] = File(None),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Create new post with optional image file.
    """
    author = get_user(db, user_id=current_user_id)
    if not author:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    try:
        image_url = await storage.save_image(image)
    except InvalidUpload as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    post_in = PostCreate(text=text, image_url=image_url)
    return create_post(db, post_in, author, settings.DEFAULT_AVATAR_URL)

@router.get("/posts", response_model=List[FeedPost])
def read_posts(
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Retrieve every post with like counts and comments.
    """
    return get_feed(db)

@router.get("/my-posts", response_model=List[OwnPost])
def read_my_posts(
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Retrieve the current user's posts.
    """
    return get_user_posts(db, user_id=current_user_id)

@router.delete("/delete-post/{post_id}", response_model=PostDeleted)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: int = Path(..., description="The ID of the post to delete"),
    current_user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Delete a post and all associated data.
    This is a cascading delete operation that will remove:
    1. All likes on this post
    2. All comments on this post, with their likes
    3. The post itself
    """
    post = get_owned_post(db, post_id=post_id, user_id=current_user_id)
    # A missing post and someone else's post look the same to the caller
    if not post:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only delete your own posts",
        )

    delete_post(db, post)
    return PostDeleted()
