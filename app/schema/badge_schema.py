from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from datetime import datetime


class BadgeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    awarded_at: datetime


class UserBadgesOut(BaseModel):
    badges: List[BadgeOut]


class AwardBadgesOut(BaseModel):
    user_id: str
    awarded: List[str]


class MilestoneProgressOut(BaseModel):
    threshold: int
    name: str
    description: str
    icon: str
    earned: bool


class BadgeProgressOut(BaseModel):
    user_id: str
    completions: int
    milestones: List[MilestoneProgressOut]
    next_milestone: Optional[MilestoneProgressOut] = None
    remaining_to_next: Optional[int] = None
