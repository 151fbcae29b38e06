import os
from datetime import date

import pytest

# Set test environment variables before vocab_srs reads its settings
os.environ["VOCAB_SRS_DATABASE_URL"] = "sqlite://"
os.environ["VOCAB_SRS_LOG_LEVEL"] = "WARNING"
os.environ.pop("VOCAB_SRS_TIMEZONE", None)

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vocab_srs.crud import add_vocabulary_item, create_learner
from vocab_srs.database import Base
from vocab_srs.schemas import LearnerCreate, VocabularyCreate
import vocab_srs.models  # noqa: F401


@pytest.fixture
def engine():
    """In-memory database shared by every session of one test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def today():
    return date(2026, 3, 2)


@pytest.fixture
def learner(db):
    return create_learner(db, LearnerCreate(name="Aiko"))


@pytest.fixture
def item(db):
    return add_vocabulary_item(
        db,
        VocabularyCreate(word="猫", reading="ねこ", meaning="cat", part_of_speech="noun"),
    )


@pytest.fixture
def other_item(db):
    return add_vocabulary_item(
        db,
        VocabularyCreate(word="犬", reading="いぬ", meaning="dog", part_of_speech="noun"),
    )
