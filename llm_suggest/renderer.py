"""Markdown-to-terminal rendering.

Only a small, line-oriented subset of Markdown is understood: ``#``-``###``
headings, fence markers, bullet and ordered list items, and the inline spans
bold, italic, code and link. Each line is handled on its own; nothing carries
over from one line to the next, so every style opened on a line is reset on
that same line.
"""

from __future__ import annotations

from .constants import (
    BOLD_ASTERISK_PATTERN,
    BOLD_UNDERSCORE_PATTERN,
    BULLET_GLYPH,
    BULLET_PREFIXES,
    CODE_FENCE,
    HEADING_PREFIXES,
    HEADING_STYLES,
    INLINE_CODE_PATTERN,
    ITALIC_ASTERISK_PATTERN,
    ITALIC_UNDERSCORE_PATTERN,
    LINK_PATTERN,
    ORDERED_LIST_PATTERN,
)
from .models import ClassifiedLine, InlineSpanRule, LineKind, StyleCode

# Order matters: bold must consume doubled delimiters before italic sees them.
INLINE_RULES: tuple[InlineSpanRule, ...] = (
    InlineSpanRule("bold-asterisk", BOLD_ASTERISK_PATTERN, StyleCode.BOLD),
    InlineSpanRule("bold-underscore", BOLD_UNDERSCORE_PATTERN, StyleCode.BOLD),
    InlineSpanRule("italic-asterisk", ITALIC_ASTERISK_PATTERN, StyleCode.ITALIC),
    InlineSpanRule("italic-underscore", ITALIC_UNDERSCORE_PATTERN, StyleCode.ITALIC),
    InlineSpanRule("code", INLINE_CODE_PATTERN, StyleCode.CYAN),
    InlineSpanRule("link", LINK_PATTERN, StyleCode.BLUE + StyleCode.UNDERLINE),
)


def transform_inline(text: str) -> str:
    """Apply inline span styling to a single line of text.

    Runs every rule in `INLINE_RULES` over the output of the previous one.
    Unterminated delimiters are left as literal characters; link targets are
    dropped.

    Args:
        text: Line content without its trailing newline.

    Returns:
        str: Text with ANSI style/reset pairs around each recognised span.

    Examples:
        transform_inline("use **sudo** with `care`")
        transform_inline("see [docs](https://example.com)")  # label only
    """
    for rule in INLINE_RULES:
        text = rule.apply(text)
    return text


def classify_line(line: str) -> ClassifiedLine:
    """Decide which block-level construct a line is.

    Checks headings (``###`` before ``##`` before ``#``), fence markers,
    bullet items and ordered items in that order; the first match wins and
    everything else is plain text.

    Args:
        line: A single line of Markdown.

    Returns:
        ClassifiedLine: The line's kind together with its prefix and body.

    Examples:
        classify_line("## Usage")  # HEADING, level 2, body "Usage"
        classify_line("3. step")  # ORDERED, marker "3. ", body "step"
    """
    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return ClassifiedLine(LineKind.HEADING, line[len(prefix) :], level=level)

    if line.startswith(CODE_FENCE):
        return ClassifiedLine(LineKind.CODE_FENCE, line)

    for prefix in BULLET_PREFIXES:
        if line.startswith(prefix):
            return ClassifiedLine(LineKind.BULLET, line[len(prefix) :], marker=prefix)

    ordered_match = ORDERED_LIST_PATTERN.match(line)
    if ordered_match:
        marker = ordered_match.group(0)
        return ClassifiedLine(LineKind.ORDERED, line[len(marker) :], marker=marker)

    return ClassifiedLine(LineKind.PLAIN, line)


def render_line(line: str) -> str:
    """Render one line of Markdown for the terminal.

    Heading text and fence markers are styled as a whole without inline
    processing. List items get a styled marker followed by the inline-rendered
    body. Plain lines are inline-rendered only.
    """
    classified = classify_line(line)
    kind = classified.kind

    if kind is LineKind.HEADING:
        return f"{HEADING_STYLES[classified.level]}{classified.body}{StyleCode.RESET}"
    if kind is LineKind.CODE_FENCE:
        return f"{StyleCode.CYAN}{classified.body}{StyleCode.RESET}"
    if kind is LineKind.BULLET:
        bullet = f"{StyleCode.GREEN}{BULLET_GLYPH}{StyleCode.RESET}"
        return bullet + transform_inline(classified.body)
    if kind is LineKind.ORDERED:
        marker = f"{StyleCode.YELLOW}{classified.marker}{StyleCode.RESET}"
        return marker + transform_inline(classified.body)
    return transform_inline(classified.body)


def render_markdown(text: str) -> str:
    """Render a complete Markdown document for the terminal.

    The text is split on newlines, each line is rendered independently, and the
    lines are joined back together. A single trailing newline left by the join
    is removed.

    Args:
        text: Complete document, typically a provider's completion.

    Returns:
        str: The document with ANSI escape codes inserted.

    Examples:
        render_markdown("# Title\\n- **one**\\n- two")
    """
    rendered = "\n".join(render_line(line) for line in text.split("\n"))
    return rendered.removesuffix("\n")
