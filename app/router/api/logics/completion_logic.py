from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.exceptions import StorageError, DuplicateCompletionError
from app.log import get_logger
from app.model.completions import Completion
from app.router.background.badges_task import award_badges_for_user
from app.schema.completion_schema import CompletionCreate, CompletionOut

log = get_logger(__name__)


def record_completion(db: Session, user_id: str, location_id: str) -> Completion:
    """
    Insert a completion row and commit it.

    Raises:
        DuplicateCompletionError: The user already completed this location.
        StorageError: Any other database failure.
    """
    completion = Completion(user_id=user_id, location_id=location_id)
    try:
        db.add(completion)
        db.commit()
        db.refresh(completion)
    except IntegrityError as e:
        db.rollback()
        raise DuplicateCompletionError() from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e
    return completion


def complete_location_logic(db: Session, payload: CompletionCreate) -> CompletionOut:
    """Record the completion, then award whatever milestones it unlocks."""
    completion = record_completion(db, payload.user_id, payload.location_id)
    badges_earned = award_badges_for_user(db, payload.user_id)
    if badges_earned:
        log.info("user %s earned %s", payload.user_id, ", ".join(badges_earned))
    return CompletionOut(
        completion_id=completion.completion_id,
        user_id=completion.user_id,
        location_id=completion.location_id,
        completed_at=completion.completed_at,
        badges_earned=badges_earned,
    )
