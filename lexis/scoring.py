"""Complexity and mastery scores, and the derived-field refresh built on them."""

import math

from .games import eligible_games
from .models import KnowledgeUnit, VocabularyEntry
from .results import normalize
from .units import enumerate_units


def is_passed(unit: KnowledgeUnit, history: dict) -> bool:
    """A unit passes when all of its history keys are recorded as True."""
    return all(history.get(key) is True for key in unit.required_history_keys)


def unit_status(entry: VocabularyEntry) -> list[tuple[KnowledgeUnit, bool]]:
    """Pair each knowledge unit with whether it is currently passed."""
    history = normalize(entry.test_results)
    return [(unit, is_passed(unit, history)) for unit in enumerate_units(entry)]


def complexity(entry: VocabularyEntry) -> int:
    """Number of knowledge units the entry contains."""
    return len(enumerate_units(entry))


def mastery(entry: VocabularyEntry) -> int:
    """Percentage (0-100) of knowledge units fully passed.

    An entry without units scores 0. Halves round up.
    """
    status = unit_status(entry)
    if not status:
        return 0
    passed = sum(1 for _, ok in status if ok)
    score = math.floor(100 * passed / len(status) + 0.5)
    return max(0, min(100, score))


def refresh_scores(entry: VocabularyEntry) -> VocabularyEntry:
    """Write complexity and mastery back onto the entry in place."""
    entry.complexity = complexity(entry)
    entry.mastery_score = mastery(entry)
    return entry


def refresh_derived(entry: VocabularyEntry) -> VocabularyEntry:
    """Normalize history, then rebuild scores and game eligibility in place."""
    entry.test_results = normalize(entry.test_results)
    refresh_scores(entry)
    entry.game_eligibility = eligible_games(entry)
    return entry
