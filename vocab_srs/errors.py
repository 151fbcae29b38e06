"""
Typed errors for vocab-srs.

Scheduler errors are caller contract violations and are never retried.
Storage errors come from the persistence layer and carry the identifiers
needed to report them.
"""


class SchedulerError(Exception):
    """Base class for scheduling errors."""


class InvalidQuality(SchedulerError, ValueError):
    """Quality rating is not an integer in [0, 5]."""

    def __init__(self, quality) -> None:
        self.quality = quality
        super().__init__(f"Quality rating must be an integer between 0 and 5, got {quality!r}")


class InvalidPriorState(SchedulerError, ValueError):
    """Stored retention state breaks an invariant (corrupt or hand-edited record)."""

    def __init__(self, field: str, value, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {reason}")


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class StorageError(Exception):
    """Base class for persistence errors."""


class LearnerNotFound(StorageError):
    def __init__(self, learner_id: int) -> None:
        self.learner_id = learner_id
        super().__init__(f"Learner {learner_id} not found")


class VocabularyNotFound(StorageError):
    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Vocabulary item {item_id} not found")


class ProgressNotFound(StorageError):
    """Learner has not started studying this item."""

    def __init__(self, learner_id: int, item_id: int) -> None:
        self.learner_id = learner_id
        self.item_id = item_id
        super().__init__(f"No progress for learner {learner_id} on item {item_id}")


class ProgressConflict(StorageError):
    """Progress was written by someone else since it was loaded."""

    def __init__(self, learner_id: int, item_id: int, expected_version: int) -> None:
        self.learner_id = learner_id
        self.item_id = item_id
        self.expected_version = expected_version
        super().__init__(
            f"Progress for learner {learner_id} on item {item_id} changed "
            f"since version {expected_version}"
        )
