"""
llm-suggest: ask an LLM for shell commands, code, or explanations.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    llm list files by size
    llm --explain what does chmod +x do

Library Usage:
    from llm_suggest import render_markdown

    print(render_markdown("# Title\\n- **bold** item"))
"""

__version__ = "1.0.0"

from .config import ConfigError, LlmConfig
from .exceptions import (
    EmptyCompletionError,
    LlmError,
    MissingCredentialsError,
    ProviderRequestError,
)
from .models import ClassifiedLine, LineKind, Mode, Provider, ProviderSelection, StyleCode
from .renderer import classify_line, render_line, render_markdown, transform_inline

__all__ = [
    # Core functionality
    "render_markdown",
    "render_line",
    "classify_line",
    "transform_inline",
    # Data models
    "ClassifiedLine",
    "LineKind",
    "Mode",
    "Provider",
    "ProviderSelection",
    "StyleCode",
    # Configuration
    "LlmConfig",
    # Exceptions
    "ConfigError",
    "EmptyCompletionError",
    "LlmError",
    "MissingCredentialsError",
    "ProviderRequestError",
    # Version
    "__version__",
]
