from pydantic import BaseModel, ConfigDict, Field

class LikeRequest(BaseModel):
    post_id: int = Field(..., alias="postId")

    model_config = ConfigDict(extra="forbid")

class LikeCount(BaseModel):
    likes: int

class LikeStatus(BaseModel):
    liked: bool
