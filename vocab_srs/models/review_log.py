from sqlalchemy import Column, Integer, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from vocab_srs.database import Base

class ReviewLog(Base):
    """Record of one review and the schedule it produced"""
    __tablename__ = "review_logs"
    
    id = Column(Integer, primary_key=True, index=True)
    progress_id = Column(Integer, ForeignKey("vocabulary_progress.id"), nullable=False)
    learner_id = Column(Integer, ForeignKey("learners.id"), nullable=False)
    
    quality = Column(Integer, nullable=False)  # 0-5
    reviewed_on = Column(Date, nullable=False)
    
    # Schedule after this review
    ease_factor = Column(Float, nullable=False)
    interval = Column(Integer, nullable=False)
    next_review = Column(Date, nullable=False)
    
    created_at = Column(DateTime, default=datetime.utcnow)
    
    progress = relationship("VocabularyProgress", back_populates="review_logs")
    learner = relationship("Learner", back_populates="review_logs")
