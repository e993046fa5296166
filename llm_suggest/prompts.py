"""Prompt construction for each request mode."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

from .models import Mode

COMMAND_TEMPLATE = """\
You are a command-line assistant. The user is on {os_name} using {shell} shell and needs a command suggestion.

User request: {query}

Respond with ONLY the command(s) that would accomplish this task. Do not include explanations, markdown formatting, or extra text. If multiple commands are needed, put each on a separate line.

Examples:
- For "search for foo in directory" → "grep -R foo ."
- For "list files by size" → "ls -laSh"
- For "find large files" → "find . -type f -size +100M\""""

CODE_TEMPLATE = """\
You are a code-writing assistant. The user is on {os_name} using {shell} shell and needs a code snippet.

User request: {query}

Respond with ONLY the code that would accomplish this task. Do not include explanations, code comments, markdown formatting, or extra text. Write the most concise code possible, and prefer use of standard libraries to third parties.
"""

EXPLAIN_TEMPLATE = """\
You are a programming expert. The user is on {os_name} using {shell} shell and needs a brief explanation of a CLI command or a programming library or concept.

User request: {query}

Respond with ONLY a very brief, concise description of the concept or solution. The answer should not exceed 2 paragraphs.
"""

TEMPLATES = {
    Mode.COMMAND: COMMAND_TEMPLATE,
    Mode.CODE: CODE_TEMPLATE,
    Mode.EXPLAIN: EXPLAIN_TEMPLATE,
}


# sys.platform spellings that differ from the usual OS names.
OS_NAMES = {"win32": "windows", "cygwin": "windows"}


def get_os_name(platform: str | None = None) -> str:
    """Return the OS name shown to the model, e.g. ``linux``, ``darwin`` or ``windows``."""
    if platform is None:
        platform = sys.platform
    return OS_NAMES.get(platform, platform)


def get_shell(environ: Mapping[str, str] | None = None, platform: str | None = None) -> str:
    """Return the name of the user's shell.

    Uses the basename of ``$SHELL``. When it is unset or empty, falls back to
    ``cmd/powershell`` on Windows and ``sh`` elsewhere.

    Examples:
        get_shell({"SHELL": "/usr/bin/zsh"})  # "zsh"
        get_shell({}, platform="win32")  # "cmd/powershell"
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    shell = environ.get("SHELL", "")
    if not shell:
        return "cmd/powershell" if platform.startswith("win") else "sh"
    return shell.rsplit("/", 1)[-1]


def build_prompt(mode: Mode, query: str, os_name: str, shell: str) -> str:
    """Fill in the prompt template for `mode`.

    Args:
        mode: Kind of answer requested.
        query: The user's request, as typed on the command line.
        os_name: Operating system identifier, e.g. ``linux``.
        shell: Shell name, e.g. ``bash``.

    Returns:
        str: Prompt ready to send to a provider.
    """
    return TEMPLATES[mode].format(os_name=os_name, shell=shell, query=query)
