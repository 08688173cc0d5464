from typing import Optional
from datetime import date
from pydantic import BaseModel, ConfigDict

class UserBase(BaseModel):
    name: Optional[str] = None
    username: Optional[str] = None
    location: Optional[str] = None
    birthdate: Optional[date] = None

class UserCreate(UserBase):
    name: str
    username: str
    password: str
    avatar_url: Optional[str] = None

class UserUpdate(UserBase):
    """Only fields that are set are written"""
    password: Optional[str] = None
    avatar_url: Optional[str] = None

class Profile(UserBase):
    """Profile returned to its owner"""
    id: int
    name: str
    username: str
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class UserSearchResult(BaseModel):
    id: int
    name: str
    username: str
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class Success(BaseModel):
    success: bool = True
