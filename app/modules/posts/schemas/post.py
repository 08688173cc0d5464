from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class PostCreate(BaseModel):
    text: str
    image_url: Optional[str] = None

class FeedComment(BaseModel):
    id: int
    username: str
    avatar_url: Optional[str] = None
    comment: str
    created_at: datetime
    likes: int = 0

class OwnPostComment(BaseModel):
    """Reduced comment projection used on the author's own posts"""
    username: str
    comment: str
    created_at: datetime

class PostInDBBase(BaseModel):
    id: int
    text: str
    image_url: Optional[str] = None
    created_at: datetime
    author: str
    username: str
    avatar_url: Optional[str] = None
    likes: int = 0

class FeedPost(PostInDBBase):
    """Post in the global feed, with live like counts and full comments"""
    user_id: int
    comments: List[FeedComment] = []

class OwnPost(PostInDBBase):
    user_id: int
    comments: List[OwnPostComment] = []

class CreatedPost(PostInDBBase):
    """Post returned right after creation"""
    user_id: int = Field(..., alias="userId")
    comments: List[FeedComment] = []
    liked_by: List[int] = Field(default_factory=list, alias="likedBy")

    model_config = ConfigDict(populate_by_name=True)

class PostDeleted(BaseModel):
    success: bool = True
    message: str = "Post deleted successfully"
