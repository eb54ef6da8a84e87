"""Common utilities shared across input and output processing."""

from autoanki.common.utils import (
    _load_env_file,
    clean_text,
    normalize_word,
    non_empty,
)
from autoanki.common.logging import (
    log_debug,
    set_thread_log_context,
    clear_thread_log_context,
    setup_thread_prefixed_stdout,
    restore_stdout,
)
from autoanki.common.errors import (
    AutoAnkiError,
    ConfigError,
    NetworkError,
    UnrecognizedPartOfSpeech,
    MissingExampleSentence,
    RemoteRejection,
)
from autoanki.common.config import (
    CONFIG_FILENAME,
    AnkiConfig,
    load_config,
    write_config,
)
from autoanki.common.http import Transport, Response, build_cookie_header, request_headers

__all__ = [
    # utils
    "_load_env_file",
    "clean_text",
    "normalize_word",
    "non_empty",
    # logging
    "log_debug",
    "set_thread_log_context",
    "clear_thread_log_context",
    "setup_thread_prefixed_stdout",
    "restore_stdout",
    # errors
    "AutoAnkiError",
    "ConfigError",
    "NetworkError",
    "UnrecognizedPartOfSpeech",
    "MissingExampleSentence",
    "RemoteRejection",
    # config
    "CONFIG_FILENAME",
    "AnkiConfig",
    "load_config",
    "write_config",
    # http
    "Transport",
    "Response",
    "build_cookie_header",
    "request_headers",
]
