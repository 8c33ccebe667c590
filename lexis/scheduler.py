"""Grade-driven review scheduling."""

import logging
import math
from datetime import datetime

from .config import DEFAULT_SRS_CONFIG, UNSTABLE_NOTE, UNSTABLE_STREAK, SrsConfig
from .exceptions import InvalidGradeError
from .models import ReviewGrade, VocabularyEntry
from .scoring import refresh_derived
from .utils import due_date, local_naive

logger = logging.getLogger(__name__)

ONE_DAY_SECONDS = 24 * 60 * 60


def parse_grade(value) -> ReviewGrade:
    """Validate a grade coming from outside; raises InvalidGradeError."""
    if isinstance(value, ReviewGrade):
        return value
    try:
        return ReviewGrade(value)
    except ValueError:
        raise InvalidGradeError(value) from None


def next_interval(entry: VocabularyEntry, grade: ReviewGrade, config: SrsConfig) -> int:
    """Interval in days that follows `grade` given the entry's current state."""
    current = entry.interval or 0

    if grade == ReviewGrade.LEARNED:
        return config.initial_hard
    if grade == ReviewGrade.FORGOT:
        return config.forgot_interval
    if grade == ReviewGrade.HARD:
        if entry.last_grade == ReviewGrade.EASY:
            return max(1, math.floor(current * config.easy_hard_penalty))
        if current == 0:
            return config.initial_hard
        return max(1, math.floor(current * config.hard_hard))

    # EASY
    if current == 0:
        return config.initial_easy
    factor = config.hard_easy if entry.last_grade == ReviewGrade.HARD else config.easy_easy
    return max(config.initial_easy, math.floor(current * factor))


def advance(entry: VocabularyEntry, grade, now: datetime | None = None,
            config: SrsConfig | None = None) -> VocabularyEntry:
    """Apply a review grade and return the rescheduled entry.

    The input entry is left untouched. The due date is always midnight of
    the target day, so reviews on the same day share a due date.
    """
    grade = parse_grade(grade)
    config = config or DEFAULT_SRS_CONFIG
    now = local_naive(now or datetime.now())

    updated = entry.copy()
    updated.interval = next_interval(entry, grade, config)

    if grade == ReviewGrade.LEARNED:
        updated.consecutive_correct = 1
    elif grade == ReviewGrade.FORGOT:
        if entry.consecutive_correct >= UNSTABLE_STREAK and UNSTABLE_NOTE not in (entry.note or ''):
            updated.note = f"{entry.note} {UNSTABLE_NOTE}".strip()
        updated.consecutive_correct = 0
        updated.forgot_count += 1
    else:
        updated.consecutive_correct += 1

    updated.next_review_at = due_date(now, updated.interval)
    updated.last_grade = grade
    updated.last_reviewed_at = now

    logger.info(f"Review {entry.word!r}: {grade.value}, interval {entry.interval} -> {updated.interval}")
    return refresh_derived(updated)


def reset(entry: VocabularyEntry, now: datetime | None = None) -> VocabularyEntry:
    """Demote an entry back to new: clear its schedule and test history."""
    now = local_naive(now or datetime.now())
    updated = entry.copy()
    updated.next_review_at = now
    updated.interval = 0
    updated.consecutive_correct = 0
    updated.forgot_count = 0
    updated.last_grade = None
    updated.last_reviewed_at = None
    updated.test_results = {}
    logger.debug(f"Reset progress for {entry.word!r}")
    return refresh_derived(updated)


def is_due(entry: VocabularyEntry, now: datetime | None = None) -> bool:
    return entry.next_review_at <= local_naive(now or datetime.now())


def remaining_time(next_review_at: datetime, now: datetime | None = None) -> tuple[str, str]:
    """Label time until the next review as ('DUE', 'due') or ('<n>d', urgency).

    Urgency is 'soon' when the review falls within a day, else 'later'.
    """
    diff = (next_review_at - local_naive(now or datetime.now())).total_seconds()
    if diff <= 0:
        return 'DUE', 'due'
    days = math.ceil(diff / ONE_DAY_SECONDS)
    return f"{days}d", 'soon' if days <= 1 else 'later'
