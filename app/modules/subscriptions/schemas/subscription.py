from typing import Optional
from pydantic import BaseModel, ConfigDict

class SubscriptionCreate(BaseModel):
    plan: str
    price: Optional[float] = None
    period: Optional[str] = None

    model_config = ConfigDict(extra="forbid")
