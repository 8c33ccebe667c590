from .models import (
    ReviewGrade, WordQuality, KnowledgeUnit, SubItem, WordFamily,
    VocabularyEntry, ReviewEvent
)
from .interfaces import EntryStorage, QuizRunner
from .exceptions import LexisError, InvalidGradeError
from .config import SrsConfig, DEFAULT_SRS_CONFIG, GAME_TAGS
from .units import enumerate_units
from .results import ResultKey, normalize, merge_by_group
from .scoring import complexity, mastery, unit_status
from .scheduler import advance, reset, is_due, remaining_time, parse_grade
from .games import eligible_games
from .pipeline import (
    recompute, record_test_results, record_review, update_content, reset_entry
)

__all__ = [
    'ReviewGrade', 'WordQuality', 'KnowledgeUnit', 'SubItem', 'WordFamily',
    'VocabularyEntry', 'ReviewEvent',
    'EntryStorage', 'QuizRunner',
    'LexisError', 'InvalidGradeError',
    'SrsConfig', 'DEFAULT_SRS_CONFIG', 'GAME_TAGS',
    'enumerate_units',
    'ResultKey', 'normalize', 'merge_by_group',
    'complexity', 'mastery', 'unit_status',
    'advance', 'reset', 'is_due', 'remaining_time', 'parse_grade',
    'eligible_games',
    'recompute', 'record_test_results', 'record_review', 'update_content', 'reset_entry'
]
