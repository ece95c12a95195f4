from typing import List, NamedTuple

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database.db import get_ctx_db
from app.exceptions import StorageError
from app.log import get_logger

log = get_logger(__name__)


class Milestone(NamedTuple):
    threshold: int
    name: str
    description: str
    icon: str


# ascending by threshold; award order follows this order
MILESTONES = (
    Milestone(1, "Beginner", "Completed your first prayer location", "🌱"),
    Milestone(5, "Pilgrim", "Completed 5 prayer locations", "🚶"),
    Milestone(20, "Intercessor", "Completed 20 prayer locations", "🙏"),
)

COUNT_COMPLETIONS_SQL = text(
    "SELECT COUNT(*) FROM completions WHERE user_id = :user_id"
)

INSERT_BADGE_IF_ABSENT_SQL = text(
    """
    INSERT INTO badges (user_id, name, awarded_at)
    VALUES (:user_id, :name, CURRENT_TIMESTAMP)
    ON CONFLICT (user_id, name) DO NOTHING
    """
)


def count_completions(db: Session, user_id: str) -> int:
    """Number of completions recorded for ``user_id``; 0 for unknown users."""
    try:
        count = db.execute(COUNT_COMPLETIONS_SQL, {"user_id": user_id}).scalar()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e
    return int(count or 0)


#############
### Badge ###
#############

def award_badges_for_user(db: Session, user_id: str) -> List[str]:
    """
    Award every milestone badge ``user_id`` has reached but does not hold yet.

    All inserts happen in one transaction that is committed at the end, so a
    failure part way through leaves no badges from this call behind. Each
    insert is a no-op when the ``(user_id, name)`` row already exists, which
    keeps concurrent calls for the same user from creating duplicates.

    Parameters:
        db (Session): Session to run the statements on.
        user_id (str): The user to evaluate. Not validated; unknown ids
        simply have no completions.

    Returns:
        List[str]: Names of the badges inserted by this call, in ascending
        threshold order.

    Raises:
        StorageError: If any statement fails. The transaction is rolled back.
    """
    completion_count = count_completions(db, user_id)

    awarded = []
    try:
        for milestone in MILESTONES:
            if completion_count < milestone.threshold:
                continue
            result = db.execute(
                INSERT_BADGE_IF_ABSENT_SQL,
                {"user_id": user_id, "name": milestone.name},
            )
            if result.rowcount == 1:
                awarded.append(milestone.name)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e

    if awarded:
        log.debug("awarded %s to user %s (%d completions)", awarded, user_id, completion_count)
    return awarded


def check_and_award_badges(user_id: str, session_factory=None) -> List[str]:
    """
    Background task to check and award badges to a user.
    Creates a new DB session for the background task.
    """
    with get_ctx_db(session_factory) as db:
        try:
            return award_badges_for_user(db, user_id)
        except StorageError:
            # nothing upstream to report to; the next completion retries
            log.exception("Error checking badges for user %s", user_id)
            return []
