from typing import Optional
from pydantic import BaseModel, ConfigDict

class Token(BaseModel):
    token: str

class LoginResponse(Token):
    success: bool = True

class LoginRequest(BaseModel):
    # Presence is checked by the login route so both fields share one message
    username: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(extra="forbid")
