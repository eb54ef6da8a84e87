"""Entry model for a word looked up in the dictionary."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from autoanki.common.errors import UnrecognizedPartOfSpeech


class PartOfSpeech(Enum):
    """Parts of speech known to the Anki note template.

    Member values are the canonical strings the note template expects.
    """
    NOUNS = "nouns"
    PRONOUNS = "pronouns"
    ADJECTIVES = "adjective"
    NUMERALS = "num"
    VERB = "verb"
    ADVERB = "adverb"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    ARTICLE = "article"

    def to_canonical(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, raw: str) -> "PartOfSpeech":
        """Map a dictionary POS label to a member.

        Only labels the dictionary actually prints are recognized, so
        PRONOUNS, INTERJECTION and ARTICLE are never produced here.
        """
        label = (raw or "").strip()
        try:
            return _LABELS[label]
        except KeyError:
            raise UnrecognizedPartOfSpeech(label) from None


_LABELS = {
    "noun": PartOfSpeech.NOUNS,
    "adjective": PartOfSpeech.ADJECTIVES,
    "verb": PartOfSpeech.VERB,
    "adverb": PartOfSpeech.ADVERB,
    "number": PartOfSpeech.NUMERALS,
    "conjunction": PartOfSpeech.CONJUNCTION,
    "preposition": PartOfSpeech.PREPOSITION,
}

RECOGNIZED_LABELS: Tuple[str, ...] = tuple(_LABELS)
DEFAULT_PART_OF_SPEECH = PartOfSpeech.ADJECTIVES


@dataclass(frozen=True)
class Phrase:
    """A phrase or collocation with its own example sentences."""
    phrase: str
    sentences: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Explanation:
    """One sense of a word: definition text, examples, and phrases."""
    text: str  # "[signpost] definition" or just the definition
    sentences: Tuple[str, ...] = ()
    phrases: Tuple[Phrase, ...] = ()


@dataclass(frozen=True)
class WordDetail:
    """One dictionary entry block (a headword under one part of speech)."""
    phonetic: str
    part_of_speech: PartOfSpeech
    explanations: Tuple[Explanation, ...] = ()


@dataclass(frozen=True)
class Entry:
    """Everything extracted for one requested word, in document order."""
    word: str
    details: Tuple[WordDetail, ...] = field(default_factory=tuple)


__all__ = [
    "PartOfSpeech",
    "RECOGNIZED_LABELS",
    "DEFAULT_PART_OF_SPEECH",
    "Phrase",
    "Explanation",
    "WordDetail",
    "Entry",
]
