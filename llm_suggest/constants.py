"""Constants used across the llm-suggest package."""

from __future__ import annotations

import re
from types import MappingProxyType

from .models import StyleCode

# Block-level prefixes, checked in this order
HEADING_PREFIXES = (("### ", 3), ("## ", 2), ("# ", 1))
CODE_FENCE = "```"
BULLET_PREFIXES = ("- ", "* ")
BULLET_GLYPH = "• "
ORDERED_LIST_PATTERN = re.compile(r"^[0-9]+\. ")

HEADING_STYLES = MappingProxyType(
    {
        1: StyleCode.MAGENTA + StyleCode.BOLD,
        2: StyleCode.BLUE + StyleCode.BOLD,
        3: StyleCode.YELLOW + StyleCode.BOLD,
    }
)

# Inline span patterns. Captures never cross a newline or an escape code
# inserted by an earlier pattern.
# Bold may contain a lone delimiter so the italic pass can still see it.
BOLD_ASTERISK_PATTERN = re.compile(r"\*\*((?:[^*\n\x1b]|\*(?!\*))+?)\*\*")
BOLD_UNDERSCORE_PATTERN = re.compile(r"__((?:[^_\n\x1b]|_(?!_))+?)__")
ITALIC_ASTERISK_PATTERN = re.compile(r"\*([^*\n\x1b]+?)\*")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"_([^_\n\x1b]+?)_")
INLINE_CODE_PATTERN = re.compile(r"`([^`\n\x1b]+?)`")
# A "[" right after ESC belongs to an escape code, not a link label.
LINK_PATTERN = re.compile(r"(?<!\x1b)\[([^\]\n\x1b]+)\]\(([^)\n\x1b]+)\)")

# Provider credentials
ANTHROPIC_API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"
OPENAI_API_KEY_ENV_VAR = "OPENAI_API_KEY"
OLLAMA_MODEL_ENV_VAR = "OLLAMA_MODEL"
PASS_EXECUTABLE = "pass"

SETUP_HINT = (
    "Set one of the following environment variables:\n"
    "  export ANTHROPIC_API_KEY=your_claude_api_key\n"
    "  export OPENAI_API_KEY=your_openai_api_key\n"
    "  export OLLAMA_MODEL=your_ollama_model_name"
)
