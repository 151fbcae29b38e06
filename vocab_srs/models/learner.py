from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from vocab_srs.database import Base

class Learner(Base):
    """Person studying vocabulary"""
    __tablename__ = "learners"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    progress = relationship("VocabularyProgress", back_populates="learner")
    review_logs = relationship("ReviewLog", back_populates="learner")
