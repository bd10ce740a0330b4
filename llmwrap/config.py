import os
import toml
import logging
from dataclasses import dataclass, field
from typing import Optional, Any

from .errors import InvalidInput

logger = logging.getLogger(__name__)

API_KEY_ENV = "LLMWRAP_OPENAI_API_KEY"
DEFAULT_API_BASE = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-5.1-codex-max"
DEFAULT_CONFIG_DIR = os.path.expanduser("~/.config/llmwrap")

_TRUE_VALUES = ("1", "true", "yes", "on")


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass
class Config:
    """Configuration handler for the llmwrap command."""

    api_key: Optional[str] = field(default_factory=lambda: os.environ.get(API_KEY_ENV))
    config_file: str = field(
        default_factory=lambda: os.environ.get(
            "LLMWRAP_CONFIG", os.path.join(DEFAULT_CONFIG_DIR, "config.toml")
        )
    )
    _file_config: dict = field(init=False, repr=False)

    # API
    api_base: str = field(init=False)
    model: str = field(init=False)
    request_timeout: Optional[float] = field(init=False)
    custom_prompt: Optional[str] = field(init=False)

    # Behavior
    default_yes: bool = field(init=False)
    shell: str = field(init=False)
    verbose: bool = field(init=False)
    log_file: Optional[str] = field(init=False)

    def __post_init__(self):
        """Post-initialization to resolve every setting."""
        self._file_config = self._load_config_from_file()
        self.api_base = self._get_config("LLMWRAP_OPENAI_BASE_URL", DEFAULT_API_BASE)
        self.model = self._get_config("LLMWRAP_MODEL", DEFAULT_MODEL)
        timeout = self._get_config("LLMWRAP_REQUEST_TIMEOUT")
        self.request_timeout = self._parse_timeout(timeout)
        self.custom_prompt = self._get_config("LLMWRAP_CUSTOM_PROMPT") or None
        answer = str(self._get_config("LLMWRAP_DEFAULT_ANSWER", "no")).strip().lower()
        self.default_yes = answer in ("y", "yes")
        self.shell = self._get_config("LLMWRAP_SHELL", "/bin/sh")
        self.verbose = _as_bool(self._get_config("LLMWRAP_VERBOSE", False))
        self.log_file = self._get_config("LLMWRAP_LOG_FILE") or None

    @staticmethod
    def _parse_timeout(value: Any) -> Optional[float]:
        if value in (None, ""):
            return None
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"LLMWRAP_REQUEST_TIMEOUT must be a number of seconds, got {value!r}") from e

    def _load_config_from_file(self) -> dict:
        """Loads configuration from the TOML file, if there is one."""
        if not os.path.exists(self.config_file):
            return {}
        try:
            with open(self.config_file, 'r') as f:
                return toml.load(f)
        except (toml.TomlDecodeError, IOError) as e:
            logger.warning(f"Could not read config file at {self.config_file}: {e}")
            return {}

    def _get_config(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get a configuration value, prioritizing environment variables,
        then the config file, and finally a default value.
        """
        # 1. Check environment variable
        value = os.environ.get(key)
        if value is not None:
            return value

        # 2. Check config file (top level or any table)
        if key in self._file_config and not isinstance(self._file_config[key], dict):
            return self._file_config[key]
        for section in self._file_config.values():
            if isinstance(section, dict) and key in section:
                return section[key]

        # 3. Return default
        return default

    def __str__(self) -> str:
        """Return string representation of the configuration."""
        config_dict = self.__dict__.copy()
        if self.api_key:
            config_dict['api_key'] = "****"
        del config_dict['_file_config']  # Don't print the raw file contents
        return str(config_dict)

    __repr__ = __str__
