"""Provider selection and HTTP completion clients."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Callable, Mapping
from typing import Any

import requests

from .config import LlmConfig
from .constants import (
    ANTHROPIC_API_KEY_ENV_VAR,
    OLLAMA_MODEL_ENV_VAR,
    OPENAI_API_KEY_ENV_VAR,
    PASS_EXECUTABLE,
)
from .exceptions import EmptyCompletionError, MissingCredentialsError, ProviderRequestError
from .models import Provider, ProviderSelection

logger = logging.getLogger(__name__)


def get_pass_api_key(key_name: str) -> str | None:
    """Read an API key from the `pass` password store.

    Returns None when `pass` is not installed, the entry does not exist, or it
    is empty.
    """
    if shutil.which(PASS_EXECUTABLE) is None:
        logger.debug("%s not found on PATH", PASS_EXECUTABLE)
        return None

    try:
        result = subprocess.run(
            [PASS_EXECUTABLE, "show", key_name],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as error:
        logger.debug("Could not run %s: %s", PASS_EXECUTABLE, error)
        return None

    if result.returncode != 0:
        logger.debug("%s show %s exited with %d", PASS_EXECUTABLE, key_name, result.returncode)
        return None

    return result.stdout.strip() or None


def determine_provider(
    environ: Mapping[str, str] | None = None, pass_key_name: str = "anthropic.com"
) -> ProviderSelection:
    """Pick the provider to query from the environment.

    Priority order: ``ANTHROPIC_API_KEY``, an Anthropic key stored in `pass`
    under `pass_key_name`, ``OPENAI_API_KEY``, then ``OLLAMA_MODEL``.

    Args:
        environ: Environment to inspect. Defaults to `os.environ`.
        pass_key_name: Entry name passed to ``pass show``.

    Returns:
        ProviderSelection: Chosen provider and its credential.

    Raises:
        MissingCredentialsError: If none of the sources yields a credential.

    Examples:
        determine_provider({"OPENAI_API_KEY": "sk-..."})  # Provider.OPENAI
    """
    environ = os.environ if environ is None else environ

    api_key = environ.get(ANTHROPIC_API_KEY_ENV_VAR)
    if api_key:
        return ProviderSelection(Provider.CLAUDE, api_key)

    api_key = get_pass_api_key(pass_key_name)
    if api_key:
        logger.debug("Using Anthropic key from pass entry %s", pass_key_name)
        return ProviderSelection(Provider.CLAUDE, api_key)

    api_key = environ.get(OPENAI_API_KEY_ENV_VAR)
    if api_key:
        return ProviderSelection(Provider.OPENAI, api_key)

    model = environ.get(OLLAMA_MODEL_ENV_VAR)
    if model:
        return ProviderSelection(Provider.OLLAMA, model)

    raise MissingCredentialsError()


def _post_json(
    url: str, payload: dict[str, Any], headers: dict[str, str], timeout: float
) -> dict[str, Any]:
    """POST `payload` and return the decoded JSON body of a 200 response.

    Raises:
        ProviderRequestError: On transport failure, a non-200 status, a body
            that is not a JSON object, or an ``error`` object in the body.
    """
    logger.debug("POST %s", url)
    try:
        response = requests.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json", **headers},
            timeout=timeout,
        )
    except requests.RequestException as error:
        raise ProviderRequestError(f"failed to make request: {error}") from error

    logger.debug("%s responded with status %d", url, response.status_code)
    if response.status_code != requests.codes.ok:
        raise ProviderRequestError(
            f"API request failed with status {response.status_code}: {response.text}",
            status_code=response.status_code,
        )

    try:
        body = response.json()
    except ValueError as error:
        raise ProviderRequestError(f"failed to parse response: {error}") from error
    if not isinstance(body, dict):
        raise ProviderRequestError("failed to parse response: expected a JSON object")

    api_error = body.get("error")
    if api_error:
        message = api_error.get("message") if isinstance(api_error, dict) else api_error
        raise ProviderRequestError(f"API error: {message}")

    return body


def _first_entry(body: dict, key: str, missing_message: str) -> dict:
    entries = body.get(key)
    if not entries:
        raise ProviderRequestError(missing_message)
    if not isinstance(entries, list) or not isinstance(entries[0], dict):
        raise ProviderRequestError(f"failed to parse response: malformed `{key}` entry")
    return entries[0]


def _require_text(text: object) -> str:
    if not isinstance(text, str) or not text.strip():
        raise EmptyCompletionError()
    return text.strip()


def query_claude(api_key: str, prompt: str, config: LlmConfig) -> str:
    """Ask the Anthropic Messages API for a completion."""
    payload = {
        "model": config.claude_model,
        "max_tokens": config.max_tokens,
        "messages": [{"role": "user", "content": prompt}],
    }
    headers = {"x-api-key": api_key, "anthropic-version": config.anthropic_version}
    body = _post_json(config.claude_api_url, payload, headers, config.timeout)

    block = _first_entry(body, "content", "no content in response")
    return _require_text(block.get("text"))


def query_openai(api_key: str, prompt: str, config: LlmConfig) -> str:
    """Ask the OpenAI Chat Completions API for a completion."""
    payload = {
        "model": config.openai_model,
        "messages": [{"role": "user", "content": prompt}],
        "max_tokens": config.max_tokens,
        "temperature": config.temperature,
    }
    headers = {"Authorization": f"Bearer {api_key}"}
    body = _post_json(config.openai_api_url, payload, headers, config.timeout)

    choice = _first_entry(body, "choices", "no choices in response")
    message = choice.get("message") or {}
    if not isinstance(message, dict):
        raise ProviderRequestError("failed to parse response: malformed `message` entry")
    return _require_text(message.get("content"))


def query_ollama(model: str, prompt: str, config: LlmConfig) -> str:
    """Ask a local Ollama server for a completion using `model`."""
    payload = {"model": model, "prompt": prompt, "stream": False}
    body = _post_json(config.ollama_api_url, payload, {}, config.timeout)
    return _require_text(body.get("response"))


QUERY_FUNCTIONS: dict[Provider, Callable[[str, str, LlmConfig], str]] = {
    Provider.CLAUDE: query_claude,
    Provider.OPENAI: query_openai,
    Provider.OLLAMA: query_ollama,
}


def query_provider(selection: ProviderSelection, prompt: str, config: LlmConfig) -> str:
    """Send `prompt` to the selected provider and return its stripped answer.

    Raises:
        LlmError: If the request fails or the provider returns no text.
    """
    logger.debug("Querying %s", selection.provider.name.lower())
    return QUERY_FUNCTIONS[selection.provider](selection.credential, prompt, config)
