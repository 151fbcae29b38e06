from sqlalchemy import or_
from sqlalchemy.orm import Session
from vocab_srs.models import VocabularyItem
from vocab_srs.schemas import VocabularyCreate
from typing import List, Optional

def add_vocabulary_item(db: Session, item: VocabularyCreate) -> VocabularyItem:
    """Add a vocabulary item"""
    db_item = VocabularyItem(**item.model_dump())
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item

def get_vocabulary_item(db: Session, item_id: int) -> Optional[VocabularyItem]:
    """Get vocabulary item by ID"""
    return db.query(VocabularyItem).filter(VocabularyItem.id == item_id).first()

def search_vocabulary(db: Session, term: str, limit: int = 10) -> List[VocabularyItem]:
    """Find items whose word, reading or meaning contains term"""
    pattern = f"%{term}%"
    return db.query(VocabularyItem).filter(
        or_(
            VocabularyItem.word.ilike(pattern),
            VocabularyItem.reading.ilike(pattern),
            VocabularyItem.meaning.ilike(pattern)
        )
    ).order_by(VocabularyItem.id).limit(limit).all()
