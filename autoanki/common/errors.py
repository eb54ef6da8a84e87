"""Exceptions raised while looking up and saving words."""


class AutoAnkiError(Exception):
    """Base class for all autoanki errors."""


class ConfigError(AutoAnkiError):
    """Configuration file is missing or invalid."""


class NetworkError(AutoAnkiError):
    """A fetch or submit request failed at the transport level."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class UnrecognizedPartOfSpeech(AutoAnkiError, ValueError):
    """Raw part-of-speech label is not one we know how to map."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Illegal value '{label}'")
        self.label = label


class MissingExampleSentence(AutoAnkiError):
    """A kept entry has no example sentence for its first explanation."""

    def __init__(self, word: str, slot: int) -> None:
        super().__init__(
            f"'{word}' has no example sentence for the first explanation of entry {slot + 1}"
        )
        self.word = word
        self.slot = slot


class RemoteRejection(AutoAnkiError):
    """AnkiWeb answered the save request with a non-success status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(body or f"HTTP {status}")
        self.status = status
        self.body = body


__all__ = [
    "AutoAnkiError",
    "ConfigError",
    "NetworkError",
    "UnrecognizedPartOfSpeech",
    "MissingExampleSentence",
    "RemoteRejection",
]
