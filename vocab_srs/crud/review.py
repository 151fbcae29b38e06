import logging
from sqlalchemy.orm import Session
from vocab_srs import clock
from vocab_srs.crud.progress import find_progress, save_progress, start_tracking, to_retention_state
from vocab_srs.models import ReviewLog
from vocab_srs.schemas import ReviewOutcome
from vocab_srs.sm2 import PASSING_QUALITY, SM2Algorithm
from datetime import date
from typing import List

logger = logging.getLogger(__name__)

def submit_review(
    db: Session,
    learner_id: int,
    item_id: int,
    quality: int,
    today: date = None
) -> ReviewOutcome:
    """
    Record a review and reschedule the item with SM-2.

    Items the learner has not started yet are added to the study set first.
    The progress row is written only if nobody else saved it since it was read.

    Raises:
        InvalidQuality: quality outside 0-5 (nothing is written)
        InvalidPriorState: stored progress is corrupt (nothing is written)
        ProgressConflict: concurrent review of the same item won the race
        LearnerNotFound, VocabularyNotFound: unknown learner or item
    """
    q = SM2Algorithm.validate_quality(quality)
    today = today or clock.today()

    progress = find_progress(db, learner_id, item_id)
    if progress is None:
        progress = start_tracking(db, learner_id, item_id, today=today)

    previous = to_retention_state(progress)
    new_state = SM2Algorithm.compute_next(previous, q, reference_date=today)

    progress = save_progress(
        db,
        learner_id,
        item_id,
        new_state,
        expected_version=progress.version,
        reviewed_on=today,
        correct=q >= PASSING_QUALITY,
        commit=False
    )
    db.add(ReviewLog(
        progress_id=progress.id,
        learner_id=learner_id,
        quality=int(q),
        reviewed_on=today,
        ease_factor=new_state.ease_factor,
        interval=new_state.interval,
        next_review=new_state.next_review_date
    ))
    db.commit()

    logger.info(
        "Review submitted: learner=%s item=%s quality=%s interval=%s next_review=%s",
        learner_id, item_id, int(q), new_state.interval, new_state.next_review_date
    )
    return ReviewOutcome(
        learner_id=learner_id,
        item_id=item_id,
        quality=int(q),
        previous=previous,
        state=new_state,
        version=progress.version
    )

def submit_boolean_review(
    db: Session,
    learner_id: int,
    item_id: int,
    is_correct: bool,
    today: date = None
) -> ReviewOutcome:
    """Submit a right/wrong answer (correct counts as 4, incorrect as 1)"""
    quality = SM2Algorithm.quality_from_boolean(is_correct)
    return submit_review(db, learner_id, item_id, quality, today=today)

def get_review_logs(db: Session, learner_id: int, limit: int = 50) -> List[ReviewLog]:
    """Get recent reviews for a learner"""
    return db.query(ReviewLog).filter(
        ReviewLog.learner_id == learner_id
    ).order_by(ReviewLog.reviewed_on.desc(), ReviewLog.id.desc()).limit(limit).all()
