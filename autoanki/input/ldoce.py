"""Longman Dictionary (LDOCE) lookup and entry extraction.

Page structure we rely on:

    div.dictionary
      .dictentry                       one per part of speech
        .PronCodes                     IPA pronunciation
        .POS                           part-of-speech label ("verb", "noun", ...)
        .Sense                         one per meaning
          .SIGNPOST                    optional short label ("formal", "LEAVE")
          .DEF                         definition
          .EXAMPLE                     example sentences
          .GramExa / .ColloExa         phrase or collocation block
            .PROPFORMPREP / .PROPFORM  phrase headword
            .EXAMPLE                   phrase example sentences

Extraction is permissive: anything missing is treated as "no data here" and
the affected entry, sense or phrase is left out.
"""

from typing import List, Optional, Union
from urllib.parse import quote

from bs4 import BeautifulSoup
from bs4.element import Tag

from autoanki.common.config import AnkiConfig
from autoanki.common.errors import UnrecognizedPartOfSpeech
from autoanki.common.http import Transport
from autoanki.common.utils import clean_text, normalize_word
from autoanki.schema.entry import Entry, Explanation, PartOfSpeech, Phrase, WordDetail


DICTIONARY_SELECTOR = "div.dictionary"
ENTRY_SELECTOR = ".dictentry"
PRONUNCIATION_SELECTOR = ".PronCodes"
POS_SELECTOR = ".POS"
SENSE_SELECTOR = ".Sense"
DEFINITION_SELECTOR = ".DEF"
SIGNPOST_SELECTOR = ".SIGNPOST"
EXAMPLE_SELECTOR = ".EXAMPLE"
PHRASE_BLOCK_SELECTOR = ".GramExa, .ColloExa"
PHRASE_HEADWORD_SELECTOR = ".PROPFORMPREP, .PROPFORM"

_PHRASE_BLOCK_CLASSES = ("GramExa", "ColloExa")


def dictionary_url(word: str, base_url: str = "https://www.ldoceonline.com/dictionary/") -> str:
    """URL of the dictionary page for a word."""
    if not base_url.endswith("/"):
        base_url += "/"
    return base_url + quote(normalize_word(word), safe="")


def parse_document(html: Union[str, bytes]) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def fetch_document(transport: Transport, word: str, config: AnkiConfig, verbose: bool = False) -> BeautifulSoup:
    """Fetch and parse the dictionary page for a word.

    Raises NetworkError if the page cannot be fetched.
    """
    url = dictionary_url(word, config.dictionary_url)
    if verbose:
        print(f"[ldoce] [fetch] {url}")
    body = transport.fetch(url)
    if verbose:
        print(f"[ldoce] [ok] {len(body):,} bytes")
    return parse_document(body)


def lookup_word(transport: Transport, word: str, config: AnkiConfig, verbose: bool = False) -> Entry:
    """Fetch a word's dictionary page and extract its entry."""
    word = normalize_word(word)
    document = fetch_document(transport, word, config, verbose=verbose)
    entry = extract_entry(document, word)
    if verbose:
        print(f"[ldoce] [parse] {len(entry.details)} entries for {word}")
    return entry


# ---------------------------------------------------------------------------
# Node helpers. Each returns None (or empty) when the node is absent.
# ---------------------------------------------------------------------------

def _first(node: Tag, selector: str) -> Optional[Tag]:
    return node.select_one(selector)


def _text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return clean_text(node.get_text())


def _joined_text(node: Tag, selector: str) -> str:
    """Text of every match of selector under node, in document order."""
    return clean_text(" ".join(n.get_text() for n in node.select(selector)))


def _inside_phrase_block(node: Tag, stop: Tag) -> bool:
    """True if node sits inside a phrase block below stop."""
    for parent in node.parents:
        if parent is stop:
            return False
        classes = parent.get("class") or []
        if any(c in _PHRASE_BLOCK_CLASSES for c in classes):
            return True
    return False


def _sentences(nodes: List[Tag]) -> tuple:
    return tuple(_text(n) for n in nodes)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def extract_phrase(block: Tag) -> Optional[Phrase]:
    """Build a Phrase from a GramExa/ColloExa block, or None if it has no headword."""
    phrase = _text(_first(block, PHRASE_HEADWORD_SELECTOR))
    if not phrase:
        return None
    return Phrase(phrase=phrase, sentences=_sentences(block.select(EXAMPLE_SELECTOR)))


def extract_explanation(sense: Tag) -> Optional[Explanation]:
    """Build an Explanation from a Sense block, or None if it has no definition."""
    definition = _joined_text(sense, DEFINITION_SELECTOR)
    if not definition:
        return None

    signpost = _joined_text(sense, SIGNPOST_SELECTOR)
    text = f"[{signpost}] {definition}" if signpost else definition

    examples = [
        ex for ex in sense.select(EXAMPLE_SELECTOR)
        if not _inside_phrase_block(ex, sense)
    ]

    phrases = []
    for block in sense.select(PHRASE_BLOCK_SELECTOR):
        phrase = extract_phrase(block)
        if phrase is not None:
            phrases.append(phrase)

    return Explanation(text=text, sentences=_sentences(examples), phrases=tuple(phrases))


def extract_detail(block: Tag) -> Optional[WordDetail]:
    """Build a WordDetail from a dictentry block.

    Returns None when the part-of-speech label is missing or unrecognized,
    or when no sense in the block has a definition.
    """
    try:
        part_of_speech = PartOfSpeech.from_label(_text(_first(block, POS_SELECTOR)))
    except UnrecognizedPartOfSpeech:
        return None

    phonetic = _text(_first(block, PRONUNCIATION_SELECTOR))

    explanations = []
    for sense in block.select(SENSE_SELECTOR):
        explanation = extract_explanation(sense)
        if explanation is not None:
            explanations.append(explanation)
    if not explanations:
        return None

    return WordDetail(
        phonetic=phonetic,
        part_of_speech=part_of_speech,
        explanations=tuple(explanations),
    )


def extract_entry(document: Tag, word: str) -> Entry:
    """Extract the dictionary entry for word from a parsed page.

    Never raises for malformed pages: missing structure yields fewer details.
    Every text leaf has inner runs of whitespace collapsed to one space as
    well as being trimmed.
    """
    word = normalize_word(word)
    dictionary = _first(document, DICTIONARY_SELECTOR)
    if dictionary is None:
        return Entry(word=word, details=())

    details = []
    for block in dictionary.select(ENTRY_SELECTOR):
        detail = extract_detail(block)
        if detail is not None:
            details.append(detail)

    return Entry(word=word, details=tuple(details))
