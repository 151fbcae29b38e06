import logging
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from vocab_srs import clock
from vocab_srs.config import settings
from vocab_srs.crud.learner import get_learner
from vocab_srs.crud.vocabulary import get_vocabulary_item
from vocab_srs.errors import LearnerNotFound, ProgressConflict, ProgressNotFound, VocabularyNotFound
from vocab_srs.models import VocabularyProgress
from vocab_srs.schemas import RetentionState, ReviewStats
from vocab_srs.sm2 import SM2Algorithm
from datetime import date
from typing import List, Optional

logger = logging.getLogger(__name__)

def to_retention_state(progress: VocabularyProgress) -> RetentionState:
    """Scheduling fields of a stored progress row"""
    return RetentionState(
        ease_factor=progress.ease_factor,
        interval=progress.interval,
        repetitions=progress.repetitions,
        next_review_date=progress.next_review
    )

def find_progress(db: Session, learner_id: int, item_id: int) -> Optional[VocabularyProgress]:
    return db.query(VocabularyProgress).filter(
        VocabularyProgress.learner_id == learner_id,
        VocabularyProgress.item_id == item_id
    ).first()

def load_progress(db: Session, learner_id: int, item_id: int) -> VocabularyProgress:
    """Get progress for a learner and item, raising ProgressNotFound if untracked"""
    progress = find_progress(db, learner_id, item_id)
    if progress is None:
        raise ProgressNotFound(learner_id, item_id)
    return progress

def start_tracking(db: Session, learner_id: int, item_id: int, today: date = None) -> VocabularyProgress:
    """Add an item to the learner's study set. Returns the existing row if already tracked."""
    existing = find_progress(db, learner_id, item_id)
    if existing:
        return existing

    if get_learner(db, learner_id) is None:
        raise LearnerNotFound(learner_id)
    if get_vocabulary_item(db, item_id) is None:
        raise VocabularyNotFound(item_id)

    state = SM2Algorithm.initialize(reference_date=today)
    progress = VocabularyProgress(
        learner_id=learner_id,
        item_id=item_id,
        ease_factor=state.ease_factor,
        interval=state.interval,
        repetitions=state.repetitions,
        next_review=state.next_review_date,
        total_reviews=0,
        correct_reviews=0,
        version=1
    )
    db.add(progress)
    try:
        db.commit()
    except IntegrityError:
        # Another session started tracking the same pair first
        db.rollback()
        winner = find_progress(db, learner_id, item_id)
        if winner is None:
            raise
        logger.info("Item %s already tracked for learner %s", item_id, learner_id)
        return winner
    db.refresh(progress)
    logger.info("Started tracking item %s for learner %s", item_id, learner_id)
    return progress

def save_progress(
    db: Session,
    learner_id: int,
    item_id: int,
    state: RetentionState,
    expected_version: int,
    reviewed_on: Optional[date] = None,
    correct: Optional[bool] = None,
    commit: bool = True
) -> VocabularyProgress:
    """
    Write a new retention state if the stored row is still at expected_version.

    Args:
        reviewed_on: Review date; when set the review counters are updated
        correct: Whether the review passed (counts towards correct_reviews)
        commit: Commit the transaction (False lets the caller add more writes)

    Raises:
        ProgressConflict: the row was saved by someone else since it was read
    """
    values = {
        "ease_factor": state.ease_factor,
        "interval": state.interval,
        "repetitions": state.repetitions,
        "next_review": state.next_review_date,
        "version": VocabularyProgress.version + 1
    }
    if reviewed_on is not None:
        values["last_reviewed"] = reviewed_on
        values["total_reviews"] = VocabularyProgress.total_reviews + 1
        if correct:
            values["correct_reviews"] = VocabularyProgress.correct_reviews + 1

    result = db.execute(
        update(VocabularyProgress)
        .where(
            VocabularyProgress.learner_id == learner_id,
            VocabularyProgress.item_id == item_id,
            VocabularyProgress.version == expected_version
        )
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        if find_progress(db, learner_id, item_id) is None:
            raise ProgressNotFound(learner_id, item_id)
        logger.warning(
            "Stale write rejected for learner %s item %s (version %s)",
            learner_id, item_id, expected_version
        )
        raise ProgressConflict(learner_id, item_id, expected_version)

    if commit:
        db.commit()
    progress = load_progress(db, learner_id, item_id)
    db.refresh(progress)
    return progress

def get_due_items(
    db: Session,
    learner_id: int,
    today: date = None,
    limit: Optional[int] = None
) -> List[VocabularyProgress]:
    """Get items due for review, most overdue first"""
    today = today or clock.today()
    return db.query(VocabularyProgress).filter(
        VocabularyProgress.learner_id == learner_id,
        VocabularyProgress.next_review <= today
    ).order_by(
        VocabularyProgress.next_review, VocabularyProgress.id
    ).limit(settings.due_review_limit if limit is None else limit).all()

def get_progress_list(db: Session, learner_id: int) -> List[VocabularyProgress]:
    """Get all tracked items for a learner"""
    return db.query(VocabularyProgress).filter(
        VocabularyProgress.learner_id == learner_id
    ).order_by(VocabularyProgress.next_review, VocabularyProgress.id).all()

def get_review_stats(progress: VocabularyProgress, today: date = None) -> ReviewStats:
    """Per-item statistics for display"""
    today = today or clock.today()
    total = progress.total_reviews or 0
    correct = progress.correct_reviews or 0
    success_rate = correct / total * 100 if total > 0 else 0.0

    days_since = None
    if progress.last_reviewed is not None:
        days_since = (today - progress.last_reviewed).days

    return ReviewStats(
        success_rate=success_rate,
        total_reviews=total,
        correct_reviews=correct,
        current_interval_days=progress.interval,
        repetitions=progress.repetitions,
        ease_factor=progress.ease_factor,
        days_since_last_review=days_since,
        days_until_next_review=max(0, (progress.next_review - today).days),
        is_due=SM2Algorithm.is_due_for_review(progress.next_review, reference_date=today)
    )
