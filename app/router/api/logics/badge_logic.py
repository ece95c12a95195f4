from sqlalchemy.orm import Session
from sqlalchemy import desc, asc
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import StorageError
from app.model.badges import Badge
from app.router.background.badges_task import MILESTONES, count_completions, award_badges_for_user
from app.schema.badge_schema import (
    BadgeOut, UserBadgesOut, AwardBadgesOut,
    MilestoneProgressOut, BadgeProgressOut,
)


def get_user_badges(db: Session, user_id: str):
    """All badge rows of a user, newest first."""
    try:
        return (
            db.query(Badge)
            .filter(Badge.user_id == user_id)
            .order_by(desc(Badge.awarded_at), asc(Badge.name))
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError() from e


def get_user_badges_logic(db: Session, user_id: str) -> UserBadgesOut:
    badges = get_user_badges(db, user_id)
    return UserBadgesOut(badges=[BadgeOut.model_validate(b) for b in badges])


def get_badge_progress(db: Session, user_id: str) -> BadgeProgressOut:
    """Completion count against every milestone, with the next one still to reach."""
    completions = count_completions(db, user_id)
    earned_names = {b.name for b in get_user_badges(db, user_id)}

    milestones = [
        MilestoneProgressOut(
            threshold=m.threshold,
            name=m.name,
            description=m.description,
            icon=m.icon,
            earned=m.name in earned_names,
        )
        for m in MILESTONES
    ]
    next_milestone = next((m for m in milestones if m.threshold > completions), None)
    return BadgeProgressOut(
        user_id=user_id,
        completions=completions,
        milestones=milestones,
        next_milestone=next_milestone,
        remaining_to_next=next_milestone.threshold - completions if next_milestone else None,
    )


def award_badges_logic(db: Session, user_id: str) -> AwardBadgesOut:
    return AwardBadgesOut(user_id=user_id, awarded=award_badges_for_user(db, user_id))
