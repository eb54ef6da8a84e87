"""Encode an Entry into the AnkiWeb note editor payload.

The note template has 14 fields:

    word, entry count,
    then three slots of (part of speech, example, phrase, phonetic<br/>definition)

Only the first three entries are encoded, and of each only the first
explanation and its first phrase. The editor expects the fields as a JSON
array wrapped as `[<fields>,""]`.
"""

import json
from typing import Dict, List

from autoanki.common.config import AnkiConfig
from autoanki.common.errors import MissingExampleSentence
from autoanki.schema.entry import Entry, WordDetail


SLOT_COUNT = 3
FIELDS_PER_SLOT = 4
FIELD_COUNT = 2 + SLOT_COUNT * FIELDS_PER_SLOT
LINE_BREAK = "<br/>"


def _slot_fields(word: str, slot: int, detail: WordDetail) -> List[str]:
    if not detail.explanations or not detail.explanations[0].sentences:
        raise MissingExampleSentence(word, slot)
    explanation = detail.explanations[0]

    if explanation.phrases:
        phrase = explanation.phrases[0]
        phrase_sentence = phrase.sentences[0] if phrase.sentences else ""
        phrase_field = f"{phrase.phrase}{LINE_BREAK}{phrase_sentence}"
    else:
        phrase_field = ""

    return [
        detail.part_of_speech.to_canonical(),
        explanation.sentences[0],
        phrase_field,
        f"{detail.phonetic}{LINE_BREAK}{explanation.text}",
    ]


def note_fields(entry: Entry) -> List[str]:
    """Flatten an entry into the template's 14 field strings.

    Raises MissingExampleSentence if an encoded entry has no example
    sentence for its first explanation.
    """
    fields = [entry.word, str(len(entry.details))]
    for slot in range(SLOT_COUNT):
        if slot < len(entry.details):
            fields.extend(_slot_fields(entry.word, slot, entry.details[slot]))
        else:
            fields.extend([""] * FIELDS_PER_SLOT)
    return fields


def encode_entry(entry: Entry) -> str:
    """Encode an entry as the `data` form field of a note save request."""
    inner = json.dumps(note_fields(entry), ensure_ascii=False, separators=(",", ":"))
    return f'[{inner},""]'


def build_note_fields(payload: str, config: AnkiConfig) -> Dict[str, str]:
    """Form fields for creating a new note from an encoded payload."""
    return {
        "nid": "",
        "data": payload,
        "csrf_token": config.csrf_token,
        "mid": config.mid,
        "deck": config.deck,
    }


__all__ = [
    "SLOT_COUNT",
    "FIELDS_PER_SLOT",
    "FIELD_COUNT",
    "note_fields",
    "encode_entry",
    "build_note_fields",
]
