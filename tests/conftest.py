"""Shared fixtures: a fake transport and small LDOCE-shaped pages."""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Mapping, Optional, Tuple

import pytest

from autoanki.common.config import AnkiConfig
from autoanki.common.errors import NetworkError
from autoanki.common.http import Response


class FakeTransport:
    """Stands in for Transport: serves canned pages and records submissions.

    ``pages`` maps a word (the last URL path segment) to HTML; words mapped to
    None fail with NetworkError. ``responder`` decides the submit response.
    """

    def __init__(
        self,
        pages: Mapping[str, Optional[str]],
        responder: Optional[Callable[[Mapping[str, str]], Response]] = None,
    ) -> None:
        self.pages = dict(pages)
        self.responder = responder or (lambda form: Response(200, "{}"))
        self.fetched: List[str] = []
        self.submitted: List[Tuple[str, Dict[str, str], Dict[str, str]]] = []
        self._lock = threading.Lock()

    def fetch(self, url: str) -> bytes:
        with self._lock:
            self.fetched.append(url)
        word = url.rsplit("/", 1)[-1]
        html = self.pages.get(word)
        if html is None:
            raise NetworkError(url, "connection refused")
        return html.encode("utf-8")

    def submit(self, url: str, headers: Mapping[str, str], form: Mapping[str, str]) -> Response:
        with self._lock:
            self.submitted.append((url, dict(headers), dict(form)))
        return self.responder(form)


def sense_html(
    definition: str,
    examples: Tuple[str, ...] = (),
    signpost: str = "",
    phrases: Tuple[Tuple[str, Tuple[str, ...]], ...] = (),
    phrase_class: str = "GramExa",
) -> str:
    parts = ['<span class="Sense">']
    if signpost:
        parts.append(f'<span class="SIGNPOST">{signpost}</span>')
    parts.append(f'<span class="DEF">{definition}</span>')
    for ex in examples:
        parts.append(f'<span class="EXAMPLE">{ex}</span>')
    for phrase, phrase_examples in phrases:
        parts.append(f'<span class="{phrase_class}"><span class="PROPFORM">{phrase}</span>')
        for ex in phrase_examples:
            parts.append(f'<span class="EXAMPLE">{ex}</span>')
        parts.append("</span>")
    parts.append("</span>")
    return "".join(parts)


def entry_html(pos: str, phonetic: str, *senses: str) -> str:
    return (
        '<span class="dictentry">'
        f'<span class="PronCodes">{phonetic}</span>'
        f'<span class="POS">{pos}</span>'
        + "".join(senses)
        + "</span>"
    )


def page_html(*entries: str) -> str:
    return (
        "<html><body><div class=\"header\">LDOCE</div>"
        '<div class="dictionary">' + "".join(entries) + "</div>"
        "</body></html>"
    )


def simple_page(word: str, pos: str = "verb") -> str:
    """A one-entry page that encodes without errors."""
    return page_html(
        entry_html(pos, f"/{word}/", sense_html(f"meaning of {word}", (f"I {word} it.",)))
    )


@pytest.fixture
def config() -> AnkiConfig:
    return AnkiConfig(
        cookies={"ankiweb": "session-cookie", "has_auth": "1"},
        csrf_token="csrf-123",
        mid="1674395347344",
        deck="1674395027912",
    )
