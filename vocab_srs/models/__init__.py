from vocab_srs.models.learner import Learner
from vocab_srs.models.vocabulary import VocabularyItem
from vocab_srs.models.vocabulary_progress import VocabularyProgress
from vocab_srs.models.review_log import ReviewLog

__all__ = [
    "Learner",
    "VocabularyItem",
    "VocabularyProgress",
    "ReviewLog"
]
