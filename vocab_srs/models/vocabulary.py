from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from vocab_srs.database import Base

class VocabularyItem(Base):
    """A word to be learned"""
    __tablename__ = "vocabulary_items"
    
    id = Column(Integer, primary_key=True, index=True)
    word = Column(String, nullable=False)
    reading = Column(String, nullable=False)
    meaning = Column(String, nullable=False)
    part_of_speech = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    progress = relationship("VocabularyProgress", back_populates="item", cascade="all, delete-orphan")
