"""Logging utilities for concurrent save jobs."""

import sys
import threading
from typing import Dict


# Module-level state
_THREAD_IDX_LOCK = threading.Lock()
_THREAD_IDX_MAP: Dict[int, int] = {}
_THREAD_IDX_NEXT = 0

# Thread-local log context (the word a worker is saving)
_LOG_CTX = threading.local()


def set_thread_log_context(word: str) -> None:
    """Set the logging context for the current thread."""
    _LOG_CTX.word = word


def clear_thread_log_context() -> None:
    """Drop the logging context of the current thread."""
    _LOG_CTX.word = ""


def get_thread_log_context() -> str:
    return getattr(_LOG_CTX, "word", "")


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def _emoji_for(line: str) -> str:
    """Emoji for a line's leading status tag, or empty string."""
    if not line.startswith("["):
        return ""
    end = line.find("]")
    if end == -1:
        return ""
    mapping = {
        "ldoce": "📖",
        "ankiweb": "📤",
        "dry-run": "📝",
    }
    return mapping.get(line[1:end], "")


class _ThreadPrefixedWriter:
    """Wrapper for stdout that adds thread IDs and context to output."""

    def __init__(self, wrapped):
        self._wrapped = wrapped
        self._lock = threading.Lock()

    def _prefix(self) -> str:
        global _THREAD_IDX_NEXT
        tid = threading.get_ident()
        # Map OS thread id to small stable index t00..t99
        with _THREAD_IDX_LOCK:
            idx = _THREAD_IDX_MAP.get(tid)
            if idx is None:
                idx = _THREAD_IDX_NEXT
                _THREAD_IDX_MAP[tid] = idx
                _THREAD_IDX_NEXT = (_THREAD_IDX_NEXT + 1) % 100
        word = get_thread_log_context()
        return f"[t{idx:02d}] [{word or 'main'}] "

    def write(self, s: str) -> int:
        if not isinstance(s, str):
            return 0
        # print() writes the trailing newline separately
        if s == "\n":
            with self._lock:
                self._wrapped.write("\n")
                self._wrapped.flush()
            return 1

        prefix = self._prefix()
        with self._lock:
            parts = s.split("\n")
            has_trailing_newline = len(parts) > 1 and parts[-1] == ""

            for i, part in enumerate(parts):
                if part == "" and i == len(parts) - 1:
                    continue

                emoji = _emoji_for(part)
                if emoji:
                    end = part.find("]")
                    tag = part[:end + 1]
                    rest = part[end + 1:].lstrip()
                    self._wrapped.write(prefix + tag + " " + emoji + " " + rest)
                else:
                    self._wrapped.write(prefix + part)

                if i < len(parts) - 1:
                    self._wrapped.write("\n")

            if has_trailing_newline:
                self._wrapped.write("\n")

            self._wrapped.flush()
        return len(s)

    def flush(self) -> None:
        self._wrapped.flush()

    def isatty(self) -> bool:
        try:
            return bool(self._wrapped.isatty())
        except (AttributeError, ValueError):
            return False


def setup_thread_prefixed_stdout() -> None:
    """Set up thread-prefixed stdout writer."""
    if isinstance(sys.stdout, _ThreadPrefixedWriter):
        return
    try:
        sys.stdout.reconfigure(line_buffering=True)  # type: ignore
    except AttributeError:
        pass
    sys.stdout = _ThreadPrefixedWriter(sys.stdout)  # type: ignore


def restore_stdout() -> None:
    """Undo setup_thread_prefixed_stdout."""
    if isinstance(sys.stdout, _ThreadPrefixedWriter):
        sys.stdout = sys.stdout._wrapped
