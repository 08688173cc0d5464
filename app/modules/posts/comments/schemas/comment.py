from pydantic import BaseModel, ConfigDict, Field

class CommentCreate(BaseModel):
    post_id: int = Field(..., alias="postId")
    comment: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")

class CommentLikeRequest(BaseModel):
    comment_id: int = Field(..., alias="commentId")

    model_config = ConfigDict(extra="forbid")
