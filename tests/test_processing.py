"""Tests for concurrent save jobs."""

from __future__ import annotations

import json
import threading

import pytest

from conftest import FakeTransport, entry_html, page_html, sense_html, simple_page

from autoanki.common.config import AnkiConfig
from autoanki.common.errors import MissingExampleSentence, NetworkError, RemoteRejection
from autoanki.common.http import Response
from autoanki.output.processing import WordOutcome, format_outcome, process_words, save_word


def test_save_word_submits_encoded_entry(config: AnkiConfig) -> None:
    transport = FakeTransport({"abandon": simple_page("abandon")})
    payload = save_word(transport, config, "abandon")

    assert json.loads(payload)[0][:3] == ["abandon", "1", "verb"]
    assert [form["data"] for _, _, form in transport.submitted] == [payload]


def test_save_word_dry_run_does_not_submit(config: AnkiConfig, capsys: pytest.CaptureFixture[str]) -> None:
    transport = FakeTransport({"abandon": simple_page("abandon")})
    payload = save_word(transport, config, "abandon", dry_run=True)

    assert transport.submitted == []
    assert f"[dry-run] {payload}" in capsys.readouterr().out


def test_five_words_two_fetch_failures(config: AnkiConfig, capsys: pytest.CaptureFixture[str]) -> None:
    """Fetch failures are reported per word; the other words still save."""
    pages = {
        "alpha": simple_page("alpha"),
        "beta": None,
        "gamma": simple_page("gamma"),
        "delta": None,
        "epsilon": simple_page("epsilon"),
    }
    transport = FakeTransport(pages)
    outcomes = process_words(list(pages), transport, config)

    assert [o.word for o in outcomes] == list(pages)
    assert [o.word for o in outcomes if o.ok] == ["alpha", "gamma", "epsilon"]
    failed = [o for o in outcomes if not o.ok]
    assert [o.word for o in failed] == ["beta", "delta"]
    assert all(isinstance(o.error, NetworkError) for o in failed)
    assert len(transport.submitted) == 3

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert sorted(line for line in lines if line.startswith("[✅]")) == [
        "[✅] alpha",
        "[✅] epsilon",
        "[✅] gamma",
    ]
    assert sum(1 for line in lines if line.startswith("[❌] beta detail: ")) == 1


def test_missing_example_fails_only_that_word(config: AnkiConfig) -> None:
    bare = page_html(entry_html("verb", "/b/", sense_html("no examples here")))
    transport = FakeTransport({"bare": bare, "good": simple_page("good")})
    outcomes = process_words(["bare", "good"], transport, config)

    assert isinstance(outcomes[0].error, MissingExampleSentence)
    assert outcomes[1].ok
    assert len(transport.submitted) == 1
    assert json.loads(transport.submitted[0][2]["data"])[0][0] == "good"


def test_remote_rejection_is_per_word(config: AnkiConfig) -> None:
    def responder(form):
        word = json.loads(form["data"])[0][0]
        if word == "rejected":
            return Response(400, "bad note")
        return Response(200, "{}")

    transport = FakeTransport(
        {"rejected": simple_page("rejected"), "accepted": simple_page("accepted")},
        responder=responder,
    )
    outcomes = process_words(["rejected", "accepted"], transport, config)

    assert isinstance(outcomes[0].error, RemoteRejection)
    assert outcomes[0].error.body == "bad note"
    assert outcomes[1].ok


def test_duplicates_are_processed_independently(config: AnkiConfig) -> None:
    transport = FakeTransport({"echo": simple_page("echo")})
    outcomes = process_words(["echo", "echo", "echo"], transport, config)

    assert [o.ok for o in outcomes] == [True, True, True]
    assert len(transport.fetched) == 3
    assert len(transport.submitted) == 3


def test_jobs_run_concurrently(config: AnkiConfig) -> None:
    """Every job is in flight at once: a barrier for all words must be reached."""
    words = ["one", "two", "three", "four"]
    barrier = threading.Barrier(len(words), timeout=5)

    class BarrierTransport(FakeTransport):
        def fetch(self, url: str) -> bytes:
            barrier.wait()
            return super().fetch(url)

    transport = BarrierTransport({w: simple_page(w) for w in words})
    outcomes = process_words(words, transport, config)
    assert all(o.ok for o in outcomes)


def test_unexpected_errors_are_contained(config: AnkiConfig) -> None:
    class ExplodingTransport(FakeTransport):
        def fetch(self, url: str) -> bytes:
            if url.endswith("/boom"):
                raise RuntimeError("unexpected")
            return super().fetch(url)

    transport = ExplodingTransport({"fine": simple_page("fine")})
    outcomes = process_words(["boom", "fine"], transport, config)

    assert isinstance(outcomes[0].error, RuntimeError)
    assert outcomes[1].ok


def test_no_words_returns_no_outcomes(config: AnkiConfig) -> None:
    assert process_words([], FakeTransport({}), config) == []


def test_format_outcome() -> None:
    assert format_outcome(WordOutcome("abandon")) == "[✅] abandon"
    assert (
        format_outcome(WordOutcome("abandon", RemoteRejection(403, "denied")))
        == "[❌] abandon detail: denied"
    )


def test_block_without_definitions_does_not_fail_word(config: AnkiConfig) -> None:
    """An empty leading entry block is skipped and the next one is saved."""
    page = page_html(
        entry_html("verb", "/v/", sense_html("  ")),
        entry_html("noun", "/went/", sense_html("a journey", ("They went on a trip.",))),
    )
    transport = FakeTransport({"went": page})
    outcomes = process_words(["went"], transport, config)

    assert outcomes == [WordOutcome("went")]
    fields = json.loads(transport.submitted[0][2]["data"])[0]
    assert fields[:6] == ["went", "1", "nouns", "They went on a trip.", "", "/went/<br/>a journey"]
