"""Entry model definitions."""

from autoanki.schema.entry import (
    PartOfSpeech,
    RECOGNIZED_LABELS,
    DEFAULT_PART_OF_SPEECH,
    Phrase,
    Explanation,
    WordDetail,
    Entry,
)

__all__ = [
    "PartOfSpeech",
    "RECOGNIZED_LABELS",
    "DEFAULT_PART_OF_SPEECH",
    "Phrase",
    "Explanation",
    "WordDetail",
    "Entry",
]
