import pytest
from click.testing import CliRunner

import llm_suggest.providers as providers_module


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    """Removes provider credentials and points the user config at an empty directory."""
    for name in ("ANTHROPIC_API_KEY", "OPENAI_API_KEY", "OLLAMA_MODEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(providers_module, "get_pass_api_key", lambda key_name: None)
    monkeypatch.delenv("LLM_SUGGEST_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path
