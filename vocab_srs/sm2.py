import math
from datetime import date, timedelta
from enum import IntEnum
from typing import List
from vocab_srs import clock
from vocab_srs.errors import InvalidPriorState, InvalidQuality
from vocab_srs.schemas import QualityLabel, RetentionState

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
INITIAL_INTERVAL = 1
SECOND_INTERVAL = 6

class ReviewQuality(IntEnum):
    """How well the learner recalled an item (SM-2 0-5 scale)"""
    BLACKOUT = 0  # complete blackout
    INCORRECT = 1  # incorrect, but the answer felt easy once seen
    INCORRECT_EASY = 2  # incorrect, but remembered once seen
    CORRECT_HARD = 3  # correct with serious difficulty
    CORRECT_HESITANT = 4  # correct after hesitation
    PERFECT = 5

PASSING_QUALITY = ReviewQuality.CORRECT_HARD

_DESCRIPTIONS = {
    ReviewQuality.BLACKOUT: "Complete blackout",
    ReviewQuality.INCORRECT: "Incorrect, but felt easy",
    ReviewQuality.INCORRECT_EASY: "Incorrect, but remembered",
    ReviewQuality.CORRECT_HARD: "Correct with difficulty",
    ReviewQuality.CORRECT_HESITANT: "Correct with hesitation",
    ReviewQuality.PERFECT: "Perfect!",
}

# Review buttons collapse the six-point scale to four choices; 1 and 2 are never offered.
_BUTTONS = (
    (ReviewQuality.BLACKOUT, "Again", "danger"),
    (ReviewQuality.CORRECT_HARD, "Hard", "warning"),
    (ReviewQuality.CORRECT_HESITANT, "Good", "primary"),
    (ReviewQuality.PERFECT, "Easy", "success"),
)


def _round_half_up(value: float) -> int:
    # Intervals are positive, so half-up is the same as half away from zero
    return int(math.floor(value + 0.5))


class SM2Algorithm:
    """
    SM-2 spaced repetition algorithm for calculating review intervals.
    Based on SuperMemo 2 algorithm by Piotr Wozniak.

    Every method is a pure function of its arguments. "Today" defaults to
    clock.today() and can be pinned with reference_date.
    """

    @staticmethod
    def validate_quality(quality) -> ReviewQuality:
        """Return quality as a ReviewQuality or raise InvalidQuality"""
        if isinstance(quality, bool) or not isinstance(quality, int):
            raise InvalidQuality(quality)
        if quality < ReviewQuality.BLACKOUT or quality > ReviewQuality.PERFECT:
            raise InvalidQuality(quality)
        return ReviewQuality(quality)

    @staticmethod
    def validate_state(state: RetentionState) -> None:
        """Raise InvalidPriorState if a stored state breaks an SM-2 invariant"""
        if not state.ease_factor >= MIN_EASE_FACTOR:
            raise InvalidPriorState("ease_factor", state.ease_factor, f"must be at least {MIN_EASE_FACTOR}")
        if state.repetitions < 0:
            raise InvalidPriorState("repetitions", state.repetitions, "must not be negative")
        if state.interval < 0:
            raise InvalidPriorState("interval", state.interval, "must not be negative")
        if state.repetitions >= 1 and state.interval < 1:
            raise InvalidPriorState("interval", state.interval, "must be at least 1 after a successful review")

    @staticmethod
    def initialize(reference_date: date = None) -> RetentionState:
        """
        Initial state for an item entering the learner's study set.
        The item is due immediately.
        """
        return RetentionState(
            ease_factor=DEFAULT_EASE_FACTOR,
            interval=INITIAL_INTERVAL,
            repetitions=0,
            next_review_date=reference_date or clock.today(),
        )

    @staticmethod
    def compute_next(
        current: RetentionState,
        quality: int,
        reference_date: date = None  # Optional: use custom date instead of today
    ) -> RetentionState:
        """
        Calculate the state after one review.

        Args:
            current: Stored state before the review (not modified)
            quality: Response quality (0-5). 0=total blackout, 5=perfect
            reference_date: Optional reference date (defaults to today)

        Returns:
            New RetentionState

        Raises:
            InvalidQuality: quality is not an integer in [0, 5]
            InvalidPriorState: current breaks an invariant
        """
        q = SM2Algorithm.validate_quality(quality)
        SM2Algorithm.validate_state(current)

        # Failed reviews still lower the ease factor
        new_ef = current.ease_factor + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
        if new_ef < MIN_EASE_FACTOR:
            new_ef = MIN_EASE_FACTOR

        if q < PASSING_QUALITY:
            new_repetitions = 0
            new_interval = INITIAL_INTERVAL
        else:
            new_repetitions = current.repetitions + 1
            if new_repetitions == 1:
                new_interval = INITIAL_INTERVAL
            elif new_repetitions == 2:
                new_interval = SECOND_INTERVAL
            else:
                new_interval = _round_half_up(current.interval * new_ef)

        base_date = reference_date or clock.today()

        # Long streaks outgrow the calendar; cap the schedule at date.max
        days_left = (date.max - base_date).days
        if new_interval > days_left:
            new_interval = max(days_left, INITIAL_INTERVAL)

        return RetentionState(
            ease_factor=new_ef,
            interval=new_interval,
            repetitions=new_repetitions,
            next_review_date=base_date + timedelta(days=min(new_interval, days_left)),
        )

    @staticmethod
    def quality_from_boolean(is_correct: bool) -> ReviewQuality:
        """Map a plain right/wrong answer onto the 0-5 scale"""
        return ReviewQuality.CORRECT_HESITANT if is_correct else ReviewQuality.INCORRECT

    @staticmethod
    def describe_quality(quality: int) -> str:
        return _DESCRIPTIONS[SM2Algorithm.validate_quality(quality)]

    @staticmethod
    def quality_labels() -> List[QualityLabel]:
        return [QualityLabel(quality=int(q), label=label, tier=tier) for q, label, tier in _BUTTONS]

    @staticmethod
    def is_due_for_review(next_review_date: date, reference_date: date = None) -> bool:
        """Check if an item is due for review"""
        return (reference_date or clock.today()) >= next_review_date

    @staticmethod
    def get_days_overdue(next_review_date: date, reference_date: date = None) -> int:
        """Calculate how many days overdue a review is"""
        today = reference_date or clock.today()
        if today < next_review_date:
            return 0
        return (today - next_review_date).days
