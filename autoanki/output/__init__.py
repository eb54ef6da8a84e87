"""Note output: encoding entries and saving them to AnkiWeb."""

from autoanki.output.payload import encode_entry, note_fields, build_note_fields, FIELD_COUNT
from autoanki.output.ankiweb import submit_note
from autoanki.output.processing import WordOutcome, format_outcome, save_word, process_words

__all__ = [
    "encode_entry",
    "note_fields",
    "build_note_fields",
    "FIELD_COUNT",
    "submit_note",
    "WordOutcome",
    "format_outcome",
    "save_word",
    "process_words",
]
