"""Domain models for lexis."""

import copy
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, field_validator

from .config import FAMILY_CODES
from .utils import from_timestamp, local_naive, to_timestamp


class ReviewGrade(str, Enum):
    """Learner's self-reported outcome of a review."""

    LEARNED = 'LEARNED'
    FORGOT = 'FORGOT'
    HARD = 'HARD'
    EASY = 'EASY'


class WordQuality(str, Enum):
    """Editorial state of an entry's content."""

    RAW = 'RAW'
    REFINED = 'REFINED'
    VERIFIED = 'VERIFIED'
    FAILED = 'FAILED'

    @classmethod
    def parse(cls, value) -> 'WordQuality':
        if not value:
            return cls.RAW
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


class KnowledgeUnit(NamedTuple):
    """One independently testable sub-fact of an entry.

    The unit counts as passed only when every key in
    `required_history_keys` is True in the entry's history.
    """

    unit_key: str
    required_history_keys: tuple[str, ...]


class SubItem:
    """An ignorable list item: collocation, idiom, preposition, paraphrase or family member."""

    def __init__(self, text: str, ignored: bool = False, detail: str = ''):
        self.text = text
        self.ignored = ignored
        self.detail = detail  # usage for prepositions, context for paraphrases

    def __eq__(self, other) -> bool:
        if not isinstance(other, SubItem):
            return NotImplemented
        return (self.text, self.ignored, self.detail) == (other.text, other.ignored, other.detail)

    def __repr__(self) -> str:
        flag = ', ignored' if self.ignored else ''
        return f"SubItem({self.text!r}{flag})"

    @property
    def active(self) -> bool:
        """Not ignored and carrying some text."""
        return not self.ignored and bool(self.text and self.text.strip())

    def to_dict(self, text_key: str = 'text', detail_key: str | None = None) -> dict:
        data = {text_key: self.text, 'ignored': self.ignored}
        if detail_key:
            data[detail_key] = self.detail
        return data

    @classmethod
    def from_dict(cls, data, text_key: str = 'text', detail_key: str | None = None) -> 'SubItem':
        if isinstance(data, str):
            return cls(data)
        ignored = data.get('ignored', data.get('isIgnored', False))
        detail = (data.get(detail_key) or '') if detail_key else ''
        return cls(data.get(text_key) or '', bool(ignored), detail)


class WordFamily:
    """Derivationally related words, grouped by part of speech."""

    def __init__(self):
        self.nouns = []
        self.verbs = []
        self.adjs = []
        self.advs = []

    def members(self) -> list[tuple[str, SubItem]]:
        """All members as (short code, item) pairs, in noun/verb/adj/adv order."""
        result = []
        for field, code in FAMILY_CODES.items():
            for item in getattr(self, field):
                result.append((code, item))
        return result

    def active_words(self) -> list[str]:
        return [item.text for _, item in self.members() if item.active]

    def to_dict(self) -> dict:
        return {
            field: [item.to_dict('word') for item in getattr(self, field)]
            for field in FAMILY_CODES
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> 'WordFamily':
        family = cls()
        if not data:
            return family
        for field in FAMILY_CODES:
            items = data.get(field) or []
            setattr(family, field, [SubItem.from_dict(i, 'word') for i in items])
        return family


class VocabularyEntry:
    """A vocabulary entry with its content, review schedule and test history."""

    # Dict key holding each list item's text, and its optional detail text
    _LIST_FIELDS = {
        'collocations': ('collocations', 'text', None),
        'idioms': ('idioms', 'text', None),
        'prepositions': ('prepositions', 'prep', 'usage'),
        'paraphrases': ('paraphrases', 'word', 'context'),
    }

    # Content fields in dict form; edits to any of these trigger recomputation
    CONTENT_KEYS = (
        'word', 'ipa', 'needsPronunciationFocus', 'meaning', 'example', 'note',
        'collocations', 'idioms', 'prepositions', 'paraphrases', 'wordFamily',
        'quality',
    )
    CONTENT_ATTRS = (
        'word', 'ipa', 'needs_pronunciation_focus', 'meaning', 'example', 'note',
        'collocations', 'idioms', 'prepositions', 'paraphrases', 'word_family',
        'quality',
    )

    def __init__(self, word: str, entry_id: str = ''):
        self.id = entry_id
        self.word = word
        self.ipa = ''
        self.needs_pronunciation_focus = False
        self.meaning = ''
        self.example = ''
        self.note = ''
        self.collocations = []
        self.idioms = []
        self.prepositions = []
        self.paraphrases = []
        self.word_family = WordFamily()
        self.quality = WordQuality.RAW
        # Scheduling
        self.interval = 0
        self.next_review_at = datetime.now()
        self.last_grade = None
        self.last_reviewed_at = None
        self.consecutive_correct = 0
        self.forgot_count = 0
        # {history_key: passed}
        self.test_results = {}
        # Derived, rebuilt by lexis.pipeline.recompute
        self.complexity = 0
        self.mastery_score = 0
        self.game_eligibility = []

    @classmethod
    def create(cls, word: str, ipa: str = '', meaning: str = '', example: str = '',
               note: str = '', needs_pronunciation_focus: bool = False,
               now: datetime | None = None) -> 'VocabularyEntry':
        """Create a brand-new RAW entry due immediately, with derived fields computed."""
        from .pipeline import recompute

        entry = cls(word.strip(), str(uuid.uuid4()))
        entry.ipa = ipa.strip()
        entry.meaning = meaning.strip()
        entry.example = example.strip()
        entry.note = note  # Not trimmed, keeps user formatting
        entry.needs_pronunciation_focus = needs_pronunciation_focus
        entry.next_review_at = now or datetime.now()
        return recompute(entry)

    def copy(self) -> 'VocabularyEntry':
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        data = {
            'id': self.id,
            'word': self.word,
            'ipa': self.ipa,
            'needsPronunciationFocus': self.needs_pronunciation_focus,
            'meaning': self.meaning,
            'example': self.example,
            'note': self.note,
        }
        for attr, (key, text_key, detail_key) in self._LIST_FIELDS.items():
            data[key] = [item.to_dict(text_key, detail_key) for item in getattr(self, attr)]
        data.update({
            'wordFamily': self.word_family.to_dict(),
            'quality': self.quality.value,
            'interval': self.interval,
            'nextReviewAt': to_timestamp(self.next_review_at),
            'lastGrade': self.last_grade.value if self.last_grade else None,
            'lastReviewedAt': to_timestamp(self.last_reviewed_at),
            'consecutiveCorrect': self.consecutive_correct,
            'forgotCount': self.forgot_count,
            'testResults': dict(self.test_results),
            'complexity': self.complexity,
            'masteryScore': self.mastery_score,
            'gameEligibility': list(self.game_eligibility),
        })
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'VocabularyEntry':
        entry = cls(data['word'], data.get('id', ''))
        entry.ipa = data.get('ipa') or ''
        entry.needs_pronunciation_focus = bool(data.get('needsPronunciationFocus', False))
        entry.meaning = data.get('meaning') or ''
        entry.example = data.get('example') or ''
        entry.note = data.get('note') or ''
        for attr, (key, text_key, detail_key) in cls._LIST_FIELDS.items():
            items = data.get(key) or []
            setattr(entry, attr, [SubItem.from_dict(i, text_key, detail_key) for i in items])
        entry.word_family = WordFamily.from_dict(data.get('wordFamily'))
        entry.quality = WordQuality.parse(data.get('quality'))

        entry.interval = int(data.get('interval') or 0)
        entry.next_review_at = from_timestamp(data.get('nextReviewAt')) or datetime.now()
        last_grade = data.get('lastGrade')
        entry.last_grade = ReviewGrade(last_grade) if last_grade else None
        entry.last_reviewed_at = from_timestamp(data.get('lastReviewedAt'))
        entry.consecutive_correct = int(data.get('consecutiveCorrect') or 0)
        entry.forgot_count = int(data.get('forgotCount') or 0)
        entry.test_results = dict(data.get('testResults') or {})

        entry.complexity = int(data.get('complexity') or 0)
        entry.mastery_score = int(data.get('masteryScore') or 0)
        entry.game_eligibility = list(data.get('gameEligibility') or [])
        return entry


class ReviewEvent(BaseModel):
    """Outcome of one review session, as produced by a quiz runner."""

    grade: Any  # validated by lexis.scheduler.parse_grade
    results: dict[str, bool] = {}
    reviewed_at: Optional[datetime] = None

    @field_validator('reviewed_at')
    @classmethod
    def _local_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return local_naive(value) if value else value
