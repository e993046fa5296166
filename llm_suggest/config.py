"""Configuration loading and management.

Settings live in one user-level TOML file as top-level keys::

    # ~/.config/llm-suggest/config.toml
    openai_model = "gpt-4o"
    timeout = 30

The file is looked up at ``$LLM_SUGGEST_CONFIG`` when that is set, otherwise
under ``$XDG_CONFIG_HOME`` (falling back to ``~/.config``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

CONFIG_PATH_ENV_VAR = "LLM_SUGGEST_CONFIG"
CONFIG_DIR_NAME = "llm-suggest"
CONFIG_FILE_NAME = "config.toml"


@dataclass
class LlmConfig:
    """Configuration for querying completion providers.

    Attributes:
        claude_model: Anthropic model used for Claude requests.
        openai_model: OpenAI chat model used for OpenAI requests.
        max_tokens: Upper bound on completion length (Claude and OpenAI).
        temperature: Sampling temperature sent to OpenAI.
        timeout: Seconds to wait for a provider response.
        anthropic_version: Value of the ``anthropic-version`` header.
        claude_api_url: Messages endpoint for Claude.
        openai_api_url: Chat completions endpoint for OpenAI.
        ollama_api_url: Generate endpoint of a local Ollama server.
        pass_key_name: Entry looked up with ``pass show`` when no Anthropic
            key is exported.

    Examples:
        LlmConfig(openai_model="gpt-4o", max_tokens=500)
    """

    # Models
    claude_model: str = "claude-sonnet-4-20250514"
    openai_model: str = "gpt-4o-mini"

    # Generation
    max_tokens: int = 1000
    temperature: float = 0.1

    # Transport
    timeout: float = 60.0
    anthropic_version: str = "2023-06-01"
    claude_api_url: str = "https://api.anthropic.com/v1/messages"
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    ollama_api_url: str = "http://localhost:11434/api/generate"

    # Credentials
    pass_key_name: str = "anthropic.com"


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_tokens` must be a positive integer")
    """


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return where the user configuration file is expected.

    Examples:
        default_config_path({"XDG_CONFIG_HOME": "/tmp/xdg"})
    """
    if environ is None:
        environ = os.environ

    explicit = environ.get(CONFIG_PATH_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    base = environ.get("XDG_CONFIG_HOME")
    config_home = Path(base).expanduser() if base else Path.home() / ".config"
    return config_home / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(path: Path | None = None) -> LlmConfig:
    """Load configuration from the user configuration file.

    A missing file yields the defaults. A file that exists but cannot be read,
    is not valid TOML, or names settings `LlmConfig` does not have is an error.

    Args:
        path: File to read; `default_config_path()` when omitted.

    Returns:
        LlmConfig: Loaded configuration with defaults for unset keys.

    Raises:
        ConfigError: If the file is unreadable, malformed, or has unknown keys.
    """
    if path is None:
        path = default_config_path()

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return LlmConfig()
    except OSError as error:
        raise ConfigError(f"Cannot read {path}: {error.strerror or error}") from error

    try:
        settings = tomllib.loads(text)
    except tomllib.TOMLDecodeError as error:
        raise ConfigError(f"Malformed TOML in {path}: {error}") from error

    unknown = sorted(settings.keys() - {field.name for field in fields(LlmConfig)})
    if unknown:
        raise ConfigError(f"Unknown setting(s) in {path}: {', '.join(unknown)}")

    return LlmConfig(**settings)


def validate_config(config: LlmConfig) -> None:
    """Validate an `LlmConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If numeric settings are out of range, model names or the
            pass entry are empty, or an endpoint is not an HTTP(S) URL.

    Examples:
        validate_config(LlmConfig(max_tokens=256))
    """
    if isinstance(config.max_tokens, bool) or not isinstance(config.max_tokens, int):
        raise ConfigError("`max_tokens` must be an integer")
    if config.max_tokens <= 0:
        raise ConfigError("`max_tokens` must be a positive integer")

    _ensure_number("temperature", config.temperature)
    if not 0 <= config.temperature <= 2:
        raise ConfigError("`temperature` must be between 0 and 2")

    _ensure_number("timeout", config.timeout)
    if config.timeout <= 0:
        raise ConfigError("`timeout` must be a positive number")

    _ensure_non_empty(
        {
            "claude_model": config.claude_model,
            "openai_model": config.openai_model,
            "anthropic_version": config.anthropic_version,
            "pass_key_name": config.pass_key_name,
        }
    )

    for key in ("claude_api_url", "openai_api_url", "ollama_api_url"):
        value = getattr(config, key)
        if not isinstance(value, str) or not value.startswith(("http://", "https://")):
            raise ConfigError(f"`{key}` must be an http:// or https:// URL")


def apply_overrides(config: LlmConfig, **overrides: object) -> LlmConfig:
    """Return a copy of `config` with every non-None override set.

    Raises:
        TypeError: If an override name is not defined on `LlmConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **changes)


def build_config(path: Path | None = None, **overrides: object) -> LlmConfig:
    """Read the configuration file, then apply command-line overrides and validate.

    Examples:
        config = build_config(timeout=10.0)
    """
    config = apply_overrides(load_config(path), **overrides)
    validate_config(config)
    return config


def _ensure_number(key: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"`{key}` must be a number")


def _ensure_non_empty(values: dict[str, object]) -> None:
    for key, value in values.items():
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"`{key}` must be a non-empty string")
