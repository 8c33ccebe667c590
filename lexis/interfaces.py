"""Abstract base classes for the collaborators lexis works with."""

from abc import ABC, abstractmethod

from .models import KnowledgeUnit, ReviewEvent, VocabularyEntry


class EntryStorage(ABC):
    """Abstract base class for entry and settings persistence."""

    @abstractmethod
    def load_config(self) -> dict:
        """Load application settings. The `srs` section feeds SrsConfig."""
        pass

    @abstractmethod
    def load_entry(self, entry_id: str) -> VocabularyEntry | None:
        """Load an entry by id. Returns None if not found."""
        pass

    @abstractmethod
    def save_entry(self, entry: VocabularyEntry) -> None:
        """Persist an entry, replacing any stored version."""
        pass

    @abstractmethod
    def list_entries(self) -> list[VocabularyEntry]:
        """Return all stored entries."""
        pass


class QuizRunner(ABC):
    """Abstract base class for the component that tests a learner."""

    @abstractmethod
    def run(self, entry: VocabularyEntry, units: list[KnowledgeUnit]) -> ReviewEvent:
        """Quiz the learner on `units` and return the grade and per-key results."""
        pass
