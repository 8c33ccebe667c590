"""Mini-game eligibility rules."""

import re

from .config import PARAPHRASE_CONTEXT_MIN, SCRAMBLE_MIN_TOKENS, TARGET_PHONEMES
from .models import VocabularyEntry, WordQuality
from .units import family_word_count
from .utils import split_words

# Guards keep a phoneme from matching inside a larger sound (d in dʒ, ɪ in eɪ)
_PHONEME_GUARDS = {
    'd': r'd(?!ʒ)',
    't': r't(?!ʃ)',
    'ʃ': r'(?<!t)ʃ',
    'ʒ': r'(?<!d)ʒ',
    'ɪ': r'(?<![aeɔ])ɪ',
    'ʊ': r'(?<![aə])ʊ',
    'e': r'e(?!ɪ)',
}

_PHONEME_PATTERNS = [
    re.compile(_PHONEME_GUARDS.get(phoneme, re.escape(phoneme)))
    for phoneme in TARGET_PHONEMES
]


def has_clean_phoneme(ipa: str) -> bool:
    """True if the IPA holds at least one target phoneme standing on its own."""
    if not ipa or len(ipa) < 2:
        return False
    return any(pattern.search(ipa) for pattern in _PHONEME_PATTERNS)


def eligible_games(entry: VocabularyEntry) -> list[str]:
    """Games the entry currently qualifies for, in a fixed order.

    Only verified entries that have been reviewed at least once qualify.
    """
    if entry.quality != WordQuality.VERIFIED or not entry.last_reviewed_at:
        return []

    example = (entry.example or '').strip()
    eligible = []

    if any(c.active for c in entry.collocations):
        eligible.append('COLLO_CONNECT')
    if any(i.active for i in entry.idioms):
        eligible.append('IDIOM_CONNECT')
    if entry.word.strip() and (entry.meaning or '').strip():
        eligible.append('MEANING_MATCH')
    if has_clean_phoneme(entry.ipa):
        eligible.append('IPA_SORTER')
    if len(split_words(example)) >= SCRAMBLE_MIN_TOKENS:
        eligible.append('SENTENCE_SCRAMBLE')
    if example and any(p.active for p in entry.prepositions):
        eligible.append('PREPOSITION_POWER')
    if example and family_word_count(entry) >= 2:
        eligible.append('WORD_TRANSFORMER')
    with_context = [p for p in entry.paraphrases if p.active and p.detail.strip()]
    if len(with_context) >= PARAPHRASE_CONTEXT_MIN:
        eligible.append('PARAPHRASE_CONTEXT')

    return eligible
