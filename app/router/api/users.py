from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database.db import get_db
from app.router.api.logics.badge_logic import (
    get_user_badges_logic,
    get_badge_progress,
    award_badges_logic,
)
from app.schema.badge_schema import UserBadgesOut, BadgeProgressOut, AwardBadgesOut

router = APIRouter()


@router.get("/{user_id}/badges", response_model=UserBadgesOut, status_code=status.HTTP_200_OK)
def get_a_user_badges(user_id: str, db: Session = Depends(get_db)):
    """Get all the badges that a user has earned, newest first."""
    return get_user_badges_logic(db, user_id)


@router.get("/{user_id}/badges/progress", response_model=BadgeProgressOut, status_code=status.HTTP_200_OK)
def get_a_user_badge_progress(user_id: str, db: Session = Depends(get_db)):
    """Completion count of the user against every milestone."""
    return get_badge_progress(db, user_id)


@router.post("/{user_id}/badges/award", response_model=AwardBadgesOut, status_code=status.HTTP_200_OK)
def award_user_badges(user_id: str, db: Session = Depends(get_db)):
    """Award any milestone badges the user has reached. Returns only the new ones."""
    return award_badges_logic(db, user_id)
