from pydantic import BaseModel, ConfigDict, Field

class FollowRequest(BaseModel):
    following_id: int = Field(..., alias="followingId")

    model_config = ConfigDict(extra="forbid")

class FollowStatus(BaseModel):
    is_following: bool = Field(..., alias="isFollowing")

    model_config = ConfigDict(populate_by_name=True)
