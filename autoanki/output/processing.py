"""Save many words concurrently, one job per word.

Every word gets its own worker thread (no cap). Jobs share only the
read-only transport and config; an error in one job becomes that word's
failed outcome and never affects the others.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Sequence

from autoanki.common.config import AnkiConfig
from autoanki.common.http import Transport
from autoanki.common.logging import clear_thread_log_context, log_debug, set_thread_log_context
from autoanki.input.ldoce import lookup_word
from autoanki.output.ankiweb import submit_note
from autoanki.output.payload import encode_entry


@dataclass(frozen=True)
class WordOutcome:
    """Result of one save job."""
    word: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_outcome(outcome: WordOutcome) -> str:
    if outcome.ok:
        return f"[✅] {outcome.word}"
    return f"[❌] {outcome.word} detail: {outcome.error}"


def save_word(
    transport: Transport,
    config: AnkiConfig,
    word: str,
    dry_run: bool = False,
    verbose: bool = False,
    debug: bool = False,
) -> str:
    """Look up a word, encode it, and save it to AnkiWeb.

    Returns the encoded payload. In dry-run mode the payload is printed
    instead of submitted.
    """
    set_thread_log_context(word)
    try:
        entry = lookup_word(transport, word, config, verbose=verbose)
        log_debug(debug, f"entry for {word}: {entry}")

        payload = encode_entry(entry)
        log_debug(debug, f"payload for {word}: {payload}")

        if dry_run:
            print(f"[dry-run] {payload}")
        else:
            submit_note(transport, config, payload, verbose=verbose)
        return payload
    finally:
        clear_thread_log_context()


def _run_job(
    transport: Transport,
    config: AnkiConfig,
    word: str,
    dry_run: bool,
    verbose: bool,
    debug: bool,
) -> WordOutcome:
    try:
        save_word(transport, config, word, dry_run=dry_run, verbose=verbose, debug=debug)
    except Exception as e:
        return WordOutcome(word, e)
    return WordOutcome(word)


def process_words(
    words: Sequence[str],
    transport: Transport,
    config: AnkiConfig,
    dry_run: bool = False,
    verbose: bool = False,
    debug: bool = False,
) -> List[WordOutcome]:
    """Save every word concurrently and report each outcome as it finishes.

    Duplicate words are processed independently. Returns outcomes in the
    order the words were given, after all jobs have completed.
    """
    if not words:
        return []

    if verbose:
        print(f"[main] [info] Parallel workers: {len(words)}")

    with ThreadPoolExecutor(max_workers=len(words)) as executor:
        futures = [
            executor.submit(_run_job, transport, config, word, dry_run, verbose, debug)
            for word in words
        ]
        for fut in as_completed(futures):
            print(format_outcome(fut.result()))

    return [fut.result() for fut in futures]
