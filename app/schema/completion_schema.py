from typing import List
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class CompletionCreate(BaseModel):
    user_id: str = Field(min_length=1, max_length=64)
    location_id: str = Field(min_length=1, max_length=64)


class CompletionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    completion_id: int
    user_id: str
    location_id: str
    completed_at: datetime
    badges_earned: List[str] = []
