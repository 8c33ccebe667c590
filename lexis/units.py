"""Enumeration of an entry's knowledge units."""

from .models import KnowledgeUnit, VocabularyEntry


def family_word_count(entry: VocabularyEntry) -> int:
    """Distinct active family members plus the headword, ignoring case."""
    words = {w.lower() for w in entry.word_family.active_words()}
    words.add(entry.word.lower())
    return len(words)


def enumerate_units(entry: VocabularyEntry) -> list[KnowledgeUnit]:
    """List the knowledge units an entry currently contains.

    Depends only on content, never on test results, and always returns the
    units in the same order: spelling, phonetic, meaning, context, then one
    unit per active collocation, idiom, preposition, paraphrase and word
    family member.
    """
    units = [KnowledgeUnit('spelling', ('SPELLING',))]

    ipa = (entry.ipa or '').strip()
    if ipa or entry.needs_pronunciation_focus:
        keys = ('PRONUNCIATION', 'IPA_QUIZ') if ipa else ('PRONUNCIATION',)
        units.append(KnowledgeUnit('phonetic', keys))
    if (entry.meaning or '').strip():
        units.append(KnowledgeUnit('meaning', ('MEANING_QUIZ',)))
    if (entry.example or '').strip():
        units.append(KnowledgeUnit('context', ('SENTENCE_SCRAMBLE',)))

    seen = {unit.unit_key for unit in units}

    def add(unit_key: str, history_key: str) -> None:
        # Duplicate list items describe the same fact
        if unit_key in seen:
            return
        seen.add(unit_key)
        units.append(KnowledgeUnit(unit_key, (history_key,)))

    for item in entry.collocations:
        if item.active:
            add(f"colloc:{item.text}", f"COLLOCATION_QUIZ:{item.text}")
    for item in entry.idioms:
        if item.active:
            add(f"idiom:{item.text}", f"IDIOM_QUIZ:{item.text}")
    for item in entry.prepositions:
        if item.active:
            add(f"prep:{item.text}", f"PREPOSITION_QUIZ:{item.text}")
    for item in entry.paraphrases:
        if item.active:
            add(f"para:{item.text}", f"PARAPHRASE_QUIZ:{item.text}")

    # A family whose only member is the headword is not a separate fact
    if family_word_count(entry) > 1:
        for code, item in entry.word_family.members():
            if item.active:
                add(f"fam:{code}:{item.text}", f"WORD_FAMILY:{code}:{item.text}")

    return units
