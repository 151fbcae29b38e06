from vocab_srs.crud.learner import create_learner, get_learner
from vocab_srs.crud.vocabulary import add_vocabulary_item, get_vocabulary_item, search_vocabulary
from vocab_srs.crud.progress import (
    to_retention_state,
    find_progress,
    load_progress,
    start_tracking,
    save_progress,
    get_due_items,
    get_progress_list,
    get_review_stats
)
from vocab_srs.crud.review import submit_review, submit_boolean_review, get_review_logs

__all__ = [
    "create_learner",
    "get_learner",
    "add_vocabulary_item",
    "get_vocabulary_item",
    "search_vocabulary",
    "to_retention_state",
    "find_progress",
    "load_progress",
    "start_tracking",
    "save_progress",
    "get_due_items",
    "get_progress_list",
    "get_review_stats",
    "submit_review",
    "submit_boolean_review",
    "get_review_logs",
]
