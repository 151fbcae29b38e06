from sqlalchemy.orm import Session
from vocab_srs.models import Learner
from vocab_srs.schemas import LearnerCreate
from typing import Optional

def create_learner(db: Session, learner: LearnerCreate) -> Learner:
    """Create a new learner"""
    db_learner = Learner(**learner.model_dump())
    db.add(db_learner)
    db.commit()
    db.refresh(db_learner)
    return db_learner

def get_learner(db: Session, learner_id: int) -> Optional[Learner]:
    """Get learner by ID"""
    return db.query(Learner).filter(Learner.id == learner_id).first()
