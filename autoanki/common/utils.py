"""Common utility functions shared across the library."""

import os
import re
from pathlib import Path
from typing import Iterable, List


_DEF_ENV_LOADED = False

_WHITESPACE_RE = re.compile(r"\s+")


def _load_env_file() -> None:
    """Load environment variables from .env file if present."""
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    # Look for .env in the project root, the package, or the current directory
    here = Path(__file__).parent
    candidates = [
        here.parent.parent / ".env",
        here.parent / ".env",
        Path.cwd() / ".env",
    ]
    for p in candidates:
        if not p.is_file():
            continue
        try:
            text = p.read_text(encoding="utf-8", errors="ignore")
        except OSError:
            continue
        for raw in text.splitlines():
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):].strip()
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            key = k.strip()
            val = v.strip().strip('"').strip("'")
            if key and os.environ.get(key) is None:
                os.environ[key] = val


def clean_text(text: str) -> str:
    """Collapse runs of whitespace and trim both ends."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_word(word: str) -> str:
    """Normalize a requested word the way it is looked up and stored."""
    return clean_text(word)


def non_empty(items: Iterable[str]) -> List[str]:
    """Return cleaned items, dropping the ones that end up empty."""
    result: List[str] = []
    for item in items:
        cleaned = clean_text(item)
        if cleaned:
            result.append(cleaned)
    return result
