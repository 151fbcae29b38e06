from sqlalchemy import Column, Integer, Float, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from vocab_srs.database import Base

class VocabularyProgress(Base):
    """SM-2 spaced repetition tracking per learner and vocabulary item"""
    __tablename__ = "vocabulary_progress"
    __table_args__ = (UniqueConstraint("learner_id", "item_id", name="uq_progress_learner_item"),)
    
    id = Column(Integer, primary_key=True, index=True)
    learner_id = Column(Integer, ForeignKey("learners.id"), nullable=False)
    item_id = Column(Integer, ForeignKey("vocabulary_items.id"), nullable=False)
    
    # SM-2 algorithm fields
    ease_factor = Column(Float, nullable=False, default=2.5)
    interval = Column(Integer, nullable=False, default=1)  # days until next review
    repetitions = Column(Integer, nullable=False, default=0)  # consecutive successful reviews
    next_review = Column(Date, nullable=False, index=True)
    
    last_reviewed = Column(Date)
    total_reviews = Column(Integer, nullable=False, default=0)
    correct_reviews = Column(Integer, nullable=False, default=0)
    
    # Optimistic concurrency: every save must name the version it read
    version = Column(Integer, nullable=False, default=1)
    
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    learner = relationship("Learner", back_populates="progress")
    item = relationship("VocabularyItem", back_populates="progress")
    review_logs = relationship("ReviewLog", back_populates="progress", cascade="all, delete-orphan")
