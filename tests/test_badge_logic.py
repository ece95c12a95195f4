from datetime import datetime

import pytest

from app.exceptions import DuplicateCompletionError, StorageError
from app.model.badges import Badge
from app.router.api.logics.badge_logic import get_badge_progress, get_user_badges
from app.router.api.logics.completion_logic import complete_location_logic, record_completion
from app.schema.completion_schema import CompletionCreate

USER = "user-1"


def test_user_badges_newest_first(db):
    db.add_all([
        Badge(user_id=USER, name="Beginner", awarded_at=datetime(2024, 1, 1)),
        Badge(user_id=USER, name="Pilgrim", awarded_at=datetime(2024, 3, 1)),
        Badge(user_id="someone-else", name="Intercessor", awarded_at=datetime(2024, 5, 1)),
    ])
    db.commit()

    assert [b.name for b in get_user_badges(db, USER)] == ["Pilgrim", "Beginner"]


def test_progress_without_completions(db):
    progress = get_badge_progress(db, USER)

    assert progress.completions == 0
    assert [m.earned for m in progress.milestones] == [False, False, False]
    assert progress.next_milestone.name == "Beginner"
    assert progress.remaining_to_next == 1


def test_progress_tracks_next_milestone(db, add_completions):
    add_completions(USER, 6)
    db.add(Badge(user_id=USER, name="Beginner"))
    db.commit()

    progress = get_badge_progress(db, USER)

    assert progress.completions == 6
    assert {m.name: m.earned for m in progress.milestones} == {
        "Beginner": True,
        "Pilgrim": False,
        "Intercessor": False,
    }
    assert progress.next_milestone.name == "Intercessor"
    assert progress.remaining_to_next == 14


def test_progress_past_last_milestone(db, add_completions):
    add_completions(USER, 21)

    progress = get_badge_progress(db, USER)

    assert progress.next_milestone is None
    assert progress.remaining_to_next is None


def test_record_completion_rejects_repeat_location(db):
    completion = record_completion(db, USER, "loc-a")
    assert completion.completion_id is not None
    assert completion.completed_at is not None

    with pytest.raises(DuplicateCompletionError):
        record_completion(db, USER, "loc-a")

    # a different user may complete the same location
    record_completion(db, "user-2", "loc-a")


def test_duplicate_completion_is_a_storage_error():
    assert issubclass(DuplicateCompletionError, StorageError)
    assert str(DuplicateCompletionError()) == "Completion already recorded"


def test_completing_a_location_awards_badges(db):
    first = complete_location_logic(db, CompletionCreate(user_id=USER, location_id="loc-a"))
    second = complete_location_logic(db, CompletionCreate(user_id=USER, location_id="loc-b"))

    assert first.badges_earned == ["Beginner"]
    assert second.badges_earned == []
