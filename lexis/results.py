"""Normalization and merging of test-result history keys.

History keys have the form ``TYPE`` or ``TYPE:IDENTIFIER``. Older records
use abbreviated type tokens (``sp``, ``cq``, ``wf_n`` ...); these are
rewritten to their long form on the way in. Unknown type tokens are kept
as they are, so results from quiz types added later are never lost.
"""

import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)

SHORT_TO_LONG_TYPE = {
    'sp': 'SPELLING',
    'iq': 'IPA_QUIZ',
    'pq': 'PREPOSITION_QUIZ',
    'wf': 'WORD_FAMILY',
    'mq': 'MEANING_QUIZ',
    'prq': 'PARAPHRASE_QUIZ',
    'sc': 'SENTENCE_SCRAMBLE',
    'hq': 'HETERONYM_QUIZ',
    'p': 'PRONUNCIATION',
    'cq': 'COLLOCATION_QUIZ',
    'idq': 'IDIOM_QUIZ',
    'pcq': 'PARAPHRASE_CONTEXT_QUIZ',
    'ccq': 'COLLOCATION_CONTEXT_QUIZ',
    'cmq': 'COLLOCATION_MULTICHOICE_QUIZ',
    'icq': 'IDIOM_CONTEXT_QUIZ',
}

# Legacy per-part-of-speech family tokens; the code moves into the identifier
FAMILY_TYPE_CODES = {
    'wf_n': 'n',
    'wf_v': 'v',
    'wf_j': 'j',
    'wf_d': 'd',
}

# Quiz types that test the same concept; a newer result of any type in a
# group replaces all older results in that group.
RESULT_GROUPS = {
    'collocation': ('COLLOCATION_QUIZ', 'COLLOCATION_CONTEXT_QUIZ', 'COLLOCATION_MULTICHOICE_QUIZ'),
    'paraphrase': ('PARAPHRASE_QUIZ', 'PARAPHRASE_CONTEXT_QUIZ'),
    'idiom': ('IDIOM_QUIZ', 'IDIOM_CONTEXT_QUIZ'),
    'pronunciation': ('PRONUNCIATION', 'IPA_QUIZ'),
}

TYPE_TO_GROUP = {
    result_type: group
    for group, types in RESULT_GROUPS.items()
    for result_type in types
}

KNOWN_TYPES = set(SHORT_TO_LONG_TYPE.values()) | set(TYPE_TO_GROUP)


class ResultKey(NamedTuple):
    """A parsed history key."""

    type: str
    identifier: str | None = None

    @classmethod
    def parse(cls, key: str) -> 'ResultKey':
        """Parse a raw key, expanding abbreviated type tokens."""
        token, sep, identifier = key.partition(':')
        if token in FAMILY_TYPE_CODES:
            code = FAMILY_TYPE_CODES[token]
            return cls('WORD_FAMILY', f"{code}:{identifier}" if sep else code)
        result_type = SHORT_TO_LONG_TYPE.get(token, token)
        if result_type not in KNOWN_TYPES:
            logger.debug(f"Keeping unknown result type: {token}")
        return cls(result_type, identifier if sep else None)

    @property
    def group(self) -> str | None:
        return TYPE_TO_GROUP.get(self.type)

    def __str__(self) -> str:
        if self.identifier is None:
            return self.type
        return f"{self.type}:{self.identifier}"


def normalize(history: dict | None) -> dict:
    """Rewrite every key of a history map to its long form."""
    if not history:
        return {}
    return {str(ResultKey.parse(key)): passed for key, passed in history.items()}


def merge_by_group(existing: dict | None, incoming: dict | None) -> dict:
    """Fold a new batch of results into an existing history.

    For every semantic group touched by an incoming key, all existing keys
    of that group are dropped first, so a pass recorded by one quiz style
    does not linger after the concept is re-tested in another style.
    """
    existing = normalize(existing)
    incoming = normalize(incoming)

    touched = {ResultKey.parse(key).group for key in incoming} - {None}
    if touched:
        evicted = [key for key in existing if ResultKey.parse(key).group in touched]
        for key in evicted:
            del existing[key]
        if evicted:
            logger.debug(f"Evicted {len(evicted)} result(s) in groups {sorted(touched)}")

    return {**existing, **incoming}
