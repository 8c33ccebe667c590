"""Entry update pipeline: enumerate units, merge results, score, resolve games.

Every function here returns a new entry and leaves its input untouched.
The caller persists the returned entry.
"""

import logging
from datetime import datetime

from .config import SrsConfig
from .models import ReviewEvent, VocabularyEntry
from .results import merge_by_group
from .scheduler import advance, parse_grade, reset
from .scoring import refresh_derived

logger = logging.getLogger(__name__)


def recompute(entry: VocabularyEntry) -> VocabularyEntry:
    """Rebuild complexity, mastery and game eligibility from content and history."""
    return refresh_derived(entry.copy())


def record_test_results(entry: VocabularyEntry, results: dict) -> VocabularyEntry:
    """Merge a batch of quiz results into the entry's history."""
    updated = entry.copy()
    updated.test_results = merge_by_group(entry.test_results, results)
    return refresh_derived(updated)


def record_review(entry: VocabularyEntry, event, config: SrsConfig | None = None,
                  now: datetime | None = None) -> VocabularyEntry:
    """Apply a graded review along with the results it produced.

    `event` is a ReviewEvent or a dict of its fields. The grade is validated
    before anything changes.
    """
    if not isinstance(event, ReviewEvent):
        event = ReviewEvent.model_validate(event)
    grade = parse_grade(event.grade)
    reviewed_at = event.reviewed_at or now or datetime.now()

    updated = advance(entry, grade, reviewed_at, config)
    if event.results:
        updated.test_results = merge_by_group(updated.test_results, event.results)
    return refresh_derived(updated)


def update_content(entry: VocabularyEntry, changes: dict) -> VocabularyEntry:
    """Apply a manual edit or an AI refinement to the entry's content.

    `changes` uses the dict form of the entry. Keys outside the content
    fields (schedule, history, derived scores) are ignored.
    """
    skipped = set(changes) - set(VocabularyEntry.CONTENT_KEYS)
    if skipped:
        logger.debug(f"Ignoring non-content fields in edit: {sorted(skipped)}")

    data = entry.to_dict()
    data.update({k: v for k, v in changes.items() if k in VocabularyEntry.CONTENT_KEYS})
    edited = VocabularyEntry.from_dict(data)

    updated = entry.copy()
    for attr in VocabularyEntry.CONTENT_ATTRS:
        setattr(updated, attr, getattr(edited, attr))
    return refresh_derived(updated)


def reset_entry(entry: VocabularyEntry, now: datetime | None = None) -> VocabularyEntry:
    """Demote the entry back to new and refresh its derived fields."""
    return reset(entry, now)
