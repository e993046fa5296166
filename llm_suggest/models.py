"""Data models for llm-suggest."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, StrEnum, auto


class StyleCode(StrEnum):
    """ANSI SGR escape sequences used by the terminal renderer.

    Every code other than `RESET` must be closed by `RESET` on the same line.
    """

    RESET = "\033[0m"
    BOLD = "\033[1m"
    ITALIC = "\033[3m"
    UNDERLINE = "\033[4m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"


class LineKind(Enum):
    """Block-level categories a single line can fall into.

    Attributes:
        HEADING: ``#``, ``##`` or ``###`` heading.
        CODE_FENCE: Line opening or closing a fenced code block.
        BULLET: Unordered list item (``-`` or ``*``).
        ORDERED: Ordered list item (``1.``).
        PLAIN: Anything else; rendered with inline spans only.
    """

    HEADING = auto()
    CODE_FENCE = auto()
    BULLET = auto()
    ORDERED = auto()
    PLAIN = auto()


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classifying one line of Markdown.

    Attributes:
        kind: Block-level category of the line.
        body: Text left after the block prefix is removed. Fences and plain
            lines keep the whole line.
        level: Heading level (1-3), or 0 for non-headings.
        marker: List prefix as written (``"- "``, ``"12. "``), else empty.
    """

    kind: LineKind
    body: str
    level: int = 0
    marker: str = ""


@dataclass(frozen=True)
class InlineSpanRule:
    """A single inline substitution: every match of `pattern` is wrapped in `style`.

    The first capture group of `pattern` is the visible text; the delimiters
    and anything outside the group are dropped.
    """

    name: str
    pattern: re.Pattern[str]
    style: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(
            lambda match: f"{self.style}{match.group(1)}{StyleCode.RESET}", text
        )


class Provider(Enum):
    """Completion backends, in selection priority order."""

    CLAUDE = auto()
    OPENAI = auto()
    OLLAMA = auto()


@dataclass(frozen=True)
class ProviderSelection:
    """Provider chosen for a request.

    Attributes:
        provider: Backend to query.
        credential: API key for Claude and OpenAI; the model name for Ollama.
    """

    provider: Provider
    credential: str


class Mode(Enum):
    """What the user asked for."""

    COMMAND = auto()
    CODE = auto()
    EXPLAIN = auto()
