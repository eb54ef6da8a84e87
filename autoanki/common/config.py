"""AnkiWeb session configuration.

The configuration lives in a `.autoanki` JSON file, by default in the user's
home directory (or `$AUTOANKI_HOME`, or the folder passed with --path):
- cookies: session cookies copied from a logged-in AnkiWeb browser session
- csrf_token: token from the AnkiWeb note editor page
- mid: note type (model) id
- deck: target deck id
- user_agent, dictionary_url, save_url, timeout: optional overrides
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from autoanki.common.errors import ConfigError


CONFIG_FILENAME = ".autoanki"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/110.0.0.0 Safari/537.36"
)
DEFAULT_DICTIONARY_URL = "https://www.ldoceonline.com/dictionary/"
DEFAULT_SAVE_URL = "https://ankiuser.net/edit/save"
DEFAULT_TIMEOUT = 20.0


@dataclass(frozen=True)
class AnkiConfig:
    """Credentials and endpoints shared read-only by every save job."""
    cookies: Dict[str, str]
    csrf_token: str
    mid: str
    deck: str
    user_agent: str = DEFAULT_USER_AGENT
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    save_url: str = DEFAULT_SAVE_URL
    timeout: float = DEFAULT_TIMEOUT
    source: Optional[Path] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.cookies, dict) or not self.cookies:
            raise ConfigError("cookies must be a non-empty object of name -> value")
        for name in ("csrf_token", "mid", "deck"):
            if not str(getattr(self, name) or "").strip():
                raise ConfigError(f"{name} must be set")
        for name in ("user_agent", "dictionary_url", "save_url"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{name} must be a non-empty string")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")


def default_config_folder() -> Path:
    """Folder holding the config file when --path is not given."""
    override = os.environ.get("AUTOANKI_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home()


def load_config(folder: Optional[Path] = None) -> AnkiConfig:
    """Load configuration from a folder's .autoanki file.

    Raises ConfigError if the file is missing, unreadable or incomplete.
    """
    folder = folder if folder is not None else default_config_folder()
    config_path = folder / CONFIG_FILENAME
    if not config_path.exists():
        raise ConfigError(f"No {CONFIG_FILENAME} found in {folder}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    cookies = data.get("cookies", {})
    if isinstance(cookies, dict):
        cookies = {str(k): str(v) for k, v in cookies.items()}

    try:
        timeout = float(data.get("timeout", DEFAULT_TIMEOUT))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"timeout must be a number: {e}") from e

    return AnkiConfig(
        cookies=cookies,
        csrf_token=str(data.get("csrf_token", "")),
        mid=str(data.get("mid", "")),
        deck=str(data.get("deck", "")),
        user_agent=data.get("user_agent", DEFAULT_USER_AGENT),
        dictionary_url=data.get("dictionary_url", DEFAULT_DICTIONARY_URL),
        save_url=data.get("save_url", DEFAULT_SAVE_URL),
        timeout=timeout,
        source=config_path,
    )


def write_config(folder: Path, config: AnkiConfig) -> Path:
    """Write a configuration file to a folder."""
    config_path = folder / CONFIG_FILENAME
    data = {
        "cookies": config.cookies,
        "csrf_token": config.csrf_token,
        "mid": config.mid,
        "deck": config.deck,
        "user_agent": config.user_agent,
        "dictionary_url": config.dictionary_url,
        "save_url": config.save_url,
        "timeout": config.timeout,
    }
    folder.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return config_path


def template_config() -> AnkiConfig:
    """Placeholder config for `--init`; every value must be replaced by hand."""
    return AnkiConfig(
        cookies={"ankiweb": "<ankiweb session cookie>"},
        csrf_token="<csrf token from the note editor>",
        mid="<note type id>",
        deck="<deck id>",
    )


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_USER_AGENT",
    "DEFAULT_DICTIONARY_URL",
    "DEFAULT_SAVE_URL",
    "DEFAULT_TIMEOUT",
    "AnkiConfig",
    "default_config_folder",
    "load_config",
    "write_config",
    "template_config",
]
