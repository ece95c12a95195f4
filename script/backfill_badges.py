# backfill_badges.py
import argparse

from sqlalchemy import select

from app.database.db import SessionLocal, get_ctx_db
from app.model.badges import Badge
from app.model.completions import Completion
from app.router.background.badges_task import MILESTONES, check_and_award_badges, count_completions


def pending_milestones(db, user_id):
    """Names the user qualifies for but does not hold yet."""
    completions = count_completions(db, user_id)
    held = set(db.scalars(select(Badge.name).where(Badge.user_id == user_id)))
    return [m.name for m in MILESTONES if m.threshold <= completions and m.name not in held]


def backfill(session_factory=None, dry_run=False):
    """
    Run the badge awarder for every user that has at least one completion.

    Returns:
        dict: user_id -> badge names awarded (or that would be, with dry_run).
    """
    session_factory = session_factory or SessionLocal
    with get_ctx_db(session_factory) as db:
        user_ids = list(db.scalars(select(Completion.user_id).distinct().order_by(Completion.user_id)))
        if dry_run:
            return {user_id: pending_milestones(db, user_id) for user_id in user_ids}

    return {user_id: check_and_award_badges(user_id, session_factory) for user_id in user_ids}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Award missing milestone badges to every user.")
    parser.add_argument("--dry-run", action="store_true", help="report what would be awarded without writing")
    args = parser.parse_args(argv)

    results = backfill(dry_run=args.dry_run)
    awarded_total = 0
    for user_id, names in results.items():
        if names:
            awarded_total += len(names)
            print(f"{user_id}: {', '.join(names)}")
    verb = "would award" if args.dry_run else "awarded"
    print(f"Checked {len(results)} users, {verb} {awarded_total} badges.")


if __name__ == "__main__":
    main()
