from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

class RetentionState(BaseModel):
    """SM-2 scheduling state for one learner and one vocabulary item.

    Invariants are checked by the scheduler, not here, so that a corrupt
    stored record can still be loaded and reported.
    """
    ease_factor: float
    interval: int  # days until next review
    repetitions: int  # consecutive successful reviews
    next_review_date: date

    class Config:
        frozen = True

class QualityLabel(BaseModel):
    """Button metadata for a review quality"""
    quality: int
    label: str
    tier: str

    class Config:
        frozen = True

class LearnerCreate(BaseModel):
    """Schema for creating a learner"""
    name: str

class VocabularyCreate(BaseModel):
    """Schema for adding a vocabulary item"""
    word: str
    reading: str
    meaning: str
    part_of_speech: Optional[str] = None

class ReviewStats(BaseModel):
    """Per-item review statistics for display"""
    success_rate: float
    total_reviews: int
    correct_reviews: int
    current_interval_days: int
    repetitions: int
    ease_factor: float
    days_since_last_review: Optional[int] = None
    days_until_next_review: int
    is_due: bool

class ReviewOutcome(BaseModel):
    """Result of submitting a review"""
    learner_id: int
    item_id: int
    quality: int = Field(ge=0, le=5)
    previous: RetentionState
    state: RetentionState
    version: int
