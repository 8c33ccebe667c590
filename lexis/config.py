"""Configuration constants for lexis."""

from pydantic import BaseModel, ConfigDict, Field

# Review scheduling defaults (days / multipliers)
INITIAL_EASY_INTERVAL = 4     # First interval after an EASY on a fresh word
INITIAL_HARD_INTERVAL = 1     # First interval after HARD or LEARNED
EASY_EASY_FACTOR = 2.5        # EASY following EASY
HARD_EASY_FACTOR = 2.0        # EASY following HARD (recovery)
HARD_HARD_FACTOR = 1.3        # HARD following HARD
EASY_HARD_PENALTY = 0.5       # HARD following EASY
FORGOT_INTERVAL = 1

# FORGOT after this many consecutive correct reviews marks the word unstable
UNSTABLE_STREAK = 3
UNSTABLE_NOTE = '[Unstable: Forgot after mastery]'

# Word family sub-lists and their short codes in history keys
FAMILY_CODES = {
    'nouns': 'n',
    'verbs': 'v',
    'adjs': 'j',
    'advs': 'd',
}

# Game eligibility
GAME_TAGS = [
    'COLLO_CONNECT', 'IDIOM_CONNECT', 'MEANING_MATCH', 'IPA_SORTER',
    'SENTENCE_SCRAMBLE', 'PREPOSITION_POWER', 'WORD_TRANSFORMER',
    'PARAPHRASE_CONTEXT',
]
SCRAMBLE_MIN_TOKENS = 5
PARAPHRASE_CONTEXT_MIN = 2

# Phonemes the IPA sorter game can sort by
TARGET_PHONEMES = [
    'i:', 'ɪ', 'u:', 'ʊ', 'æ', 'e', 'ʌ', 'ɑ:', 'ɒ', 'ɔ:', 'eɪ', 'əʊ',
    's', 'ʃ', 'tʃ', 'dʒ', 'θ', 'ð', 't', 'd', 'n', 'l', 'ŋ', 'v', 'w',
]


class SrsConfig(BaseModel):
    """Interval growth and penalty tuning for the review scheduler.

    Field aliases match the keys of the ``srs`` section in the host
    application's settings, so a stored settings dict validates directly.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    initial_easy: int = Field(INITIAL_EASY_INTERVAL, ge=1, alias='initialEasy')
    initial_hard: int = Field(INITIAL_HARD_INTERVAL, ge=1, alias='initialHard')
    easy_easy: float = Field(EASY_EASY_FACTOR, gt=0, alias='easyEasy')
    hard_easy: float = Field(HARD_EASY_FACTOR, gt=0, alias='hardEasy')
    hard_hard: float = Field(HARD_HARD_FACTOR, gt=0, alias='hardHard')
    easy_hard_penalty: float = Field(EASY_HARD_PENALTY, gt=0, alias='easyHardPenalty')
    forgot_interval: int = Field(FORGOT_INTERVAL, ge=1, alias='forgotInterval')

    @classmethod
    def from_settings(cls, settings: dict | None) -> 'SrsConfig':
        """Build from a full settings dict, reading its ``srs`` section."""
        if not settings:
            return cls()
        return cls.model_validate(settings.get('srs') or {})


DEFAULT_SRS_CONFIG = SrsConfig()
