"""Tests for review submission: load, reschedule, save and log in one call."""

from datetime import date, timedelta

import pytest

from vocab_srs.crud import (
    find_progress,
    get_review_logs,
    load_progress,
    start_tracking,
    submit_boolean_review,
    submit_review,
    to_retention_state,
)
from vocab_srs.errors import InvalidPriorState, InvalidQuality, LearnerNotFound
from vocab_srs.models import VocabularyProgress


def test_first_review_starts_tracking(db, learner, item, today):
    outcome = submit_review(db, learner.id, item.id, 5, today=today)

    assert outcome.previous.repetitions == 0
    assert outcome.state.repetitions == 1
    assert outcome.state.interval == 1
    assert outcome.state.ease_factor == pytest.approx(2.6)
    assert outcome.state.next_review_date == today + timedelta(days=1)
    assert outcome.version == 2

    progress = load_progress(db, learner.id, item.id)
    assert to_retention_state(progress) == outcome.state
    assert progress.total_reviews == 1
    assert progress.correct_reviews == 1
    assert progress.last_reviewed == today


def test_review_sequence(db, learner, item, today):
    start_tracking(db, learner.id, item.id, today=today)

    day = today
    for quality in (5, 4, 5):
        outcome = submit_review(db, learner.id, item.id, quality, today=day)
        day = outcome.state.next_review_date

    # 1 day, 6 days, then round(6 * 2.7)
    assert outcome.state.interval == 16
    assert outcome.state.repetitions == 3
    assert outcome.version == 4

    logs = get_review_logs(db, learner.id)
    assert [log.quality for log in logs] == [5, 4, 5]
    assert [log.interval for log in logs] == [16, 6, 1]


def test_failure_resets_but_keeps_penalty(db, learner, item, today):
    for quality in (5, 5, 5):
        submit_review(db, learner.id, item.id, quality, today=today)

    outcome = submit_review(db, learner.id, item.id, 0, today=today)

    assert outcome.state.repetitions == 0
    assert outcome.state.interval == 1
    assert outcome.state.ease_factor == pytest.approx(2.0)

    progress = load_progress(db, learner.id, item.id)
    assert progress.total_reviews == 4
    assert progress.correct_reviews == 3


@pytest.mark.parametrize("quality", [-1, 6])
def test_invalid_quality_writes_nothing(db, learner, item, today, quality):
    with pytest.raises(InvalidQuality):
        submit_review(db, learner.id, item.id, quality, today=today)

    assert find_progress(db, learner.id, item.id) is None
    assert get_review_logs(db, learner.id) == []


def test_corrupt_state_is_reported_not_repaired(db, learner, item, today):
    progress = start_tracking(db, learner.id, item.id, today=today)
    db.query(VocabularyProgress).filter(VocabularyProgress.id == progress.id).update({"ease_factor": 1.1})
    db.commit()

    with pytest.raises(InvalidPriorState):
        submit_review(db, learner.id, item.id, 4, today=today)

    progress = load_progress(db, learner.id, item.id)
    assert progress.ease_factor == pytest.approx(1.1)
    assert progress.version == 1
    assert progress.total_reviews == 0


def test_unknown_learner(db, item, today):
    with pytest.raises(LearnerNotFound):
        submit_review(db, 999, item.id, 4, today=today)


def test_boolean_review(db, learner, item, other_item, today):
    correct = submit_boolean_review(db, learner.id, item.id, True, today=today)
    wrong = submit_boolean_review(db, learner.id, other_item.id, False, today=today)

    assert correct.quality == 4
    assert correct.state.repetitions == 1
    assert wrong.quality == 1
    assert wrong.state.repetitions == 0
    assert load_progress(db, learner.id, other_item.id).correct_reviews == 0


def test_long_streak_reaches_end_of_calendar(db, learner, item, today):
    for _ in range(20):
        outcome = submit_review(db, learner.id, item.id, 5, today=today)

    assert outcome.state.repetitions == 20
    assert outcome.state.next_review_date == date.max
    assert outcome.state.interval == (date.max - today).days

    # The item stays reviewable after hitting the cap
    lapse = submit_review(db, learner.id, item.id, 0, today=today)
    assert lapse.state.interval == 1
    assert load_progress(db, learner.id, item.id).total_reviews == 21
