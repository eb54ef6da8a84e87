#!/usr/bin/env python3
"""Save words from the Longman dictionary to AnkiWeb.

Each word is looked up on ldoceonline.com, converted into a note, and saved
to the deck configured in ~/.autoanki. All words are processed in parallel;
a failure for one word is reported and does not affect the others.

Usage:
    python save.py abandon reckless --verbose
    python save.py                      # saves the word on the clipboard
    python save.py --init --path ~/     # write a template config
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import pyperclip

from autoanki.common.utils import _load_env_file, non_empty
from autoanki.common.config import (
    CONFIG_FILENAME,
    default_config_folder,
    load_config,
    template_config,
    write_config,
)
from autoanki.common.errors import ConfigError
from autoanki.common.http import Transport
from autoanki.common.logging import restore_stdout, setup_thread_prefixed_stdout
from autoanki.output.processing import process_words


# Load .env on import
_load_env_file()


def get_clipboard_text() -> str:
    """Read the word currently on the clipboard."""
    try:
        return pyperclip.paste() or ""
    except pyperclip.PyperclipException as e:
        print(f"[main] [warn] Clipboard unavailable: {e}", file=sys.stderr)
        return ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A toolkit for saving dictionary words to Anki quickly"
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Words to save (default: the clipboard contents)",
    )
    parser.add_argument(
        "-p",
        "--path",
        default=None,
        help=f"Folder containing the {CONFIG_FILENAME} config file (default: home directory)",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help=f"Write a template {CONFIG_FILENAME} into the config folder and exit",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the encoded notes instead of saving them",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    folder = Path(args.path).expanduser() if args.path else default_config_folder()

    if args.init:
        config_path = folder / CONFIG_FILENAME
        if config_path.exists():
            print(f"[main] [error] Config already exists: {config_path}", file=sys.stderr)
            return 2
        write_config(folder, template_config())
        print(f"[main] [ok] Wrote template config: {config_path}")
        return 0

    try:
        config = load_config(folder)
    except ConfigError as e:
        print(f"[main] [error] {e}", file=sys.stderr)
        return 2

    words = non_empty(args.words) if args.words else non_empty([get_clipboard_text()])
    if not words:
        print("[main] [warn] No words to save")
        return 0

    if args.verbose or args.debug:
        setup_thread_prefixed_stdout()
        print(f"[main] [info] Config: {config.source}")
        print(f"[main] [info] Words: {', '.join(words)}")

    try:
        with Transport(timeout=config.timeout, user_agent=config.user_agent) as transport:
            process_words(
                words,
                transport,
                config,
                dry_run=args.dry_run,
                verbose=args.verbose,
                debug=args.debug,
            )
    except KeyboardInterrupt:
        print("[main] [info] Interrupted by user (Ctrl-C). Exiting cleanly.")
        return 130
    finally:
        restore_stdout()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
