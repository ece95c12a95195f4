from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database.db import get_db
from app.router.api.logics.completion_logic import complete_location_logic
from app.schema.completion_schema import CompletionCreate, CompletionOut

router = APIRouter()


@router.post("", response_model=CompletionOut, status_code=status.HTTP_201_CREATED)
def complete_location(payload: CompletionCreate, db: Session = Depends(get_db)):
    """Record a completed location and award the badges it unlocks."""
    return complete_location_logic(db, payload)
