from __future__ import annotations

import pytest

from llm_suggest.models import ClassifiedLine, LineKind, StyleCode
from llm_suggest.renderer import classify_line, render_line, render_markdown, transform_inline

RESET = StyleCode.RESET
BOLD = StyleCode.BOLD
ITALIC = StyleCode.ITALIC
UNDERLINE = StyleCode.UNDERLINE
GREEN = StyleCode.GREEN
YELLOW = StyleCode.YELLOW
BLUE = StyleCode.BLUE
MAGENTA = StyleCode.MAGENTA
CYAN = StyleCode.CYAN


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("### Small", ClassifiedLine(LineKind.HEADING, "Small", level=3)),
        ("## Sub", ClassifiedLine(LineKind.HEADING, "Sub", level=2)),
        ("# Title", ClassifiedLine(LineKind.HEADING, "Title", level=1)),
        ("```bash", ClassifiedLine(LineKind.CODE_FENCE, "```bash")),
        ("- item", ClassifiedLine(LineKind.BULLET, "item", marker="- ")),
        ("* item", ClassifiedLine(LineKind.BULLET, "item", marker="* ")),
        ("12. twelfth", ClassifiedLine(LineKind.ORDERED, "twelfth", marker="12. ")),
        ("plain text", ClassifiedLine(LineKind.PLAIN, "plain text")),
        ("", ClassifiedLine(LineKind.PLAIN, "")),
    ],
)
def test_classify_line(line: str, expected: ClassifiedLine):
    assert classify_line(line) == expected


@pytest.mark.parametrize(
    "line", ["#### Deep", "#Title", "-item", "1.first", "1) first", "  - indented"]
)
def test_near_misses_are_plain(line: str):
    assert classify_line(line).kind is LineKind.PLAIN
    assert render_line(line) == line


def test_heading_levels_use_distinct_colors():
    assert render_markdown("# Title") == MAGENTA + BOLD + "Title" + RESET
    assert render_markdown("## Sub") == BLUE + BOLD + "Sub" + RESET
    assert render_markdown("### Small") == YELLOW + BOLD + "Small" + RESET


def test_heading_text_skips_inline_spans():
    assert render_markdown("# **Title**") == MAGENTA + BOLD + "**Title**" + RESET


def test_heading_keeps_trailing_whitespace():
    assert render_markdown("## spaced  ") == BLUE + BOLD + "spaced  " + RESET


def test_code_fence_marker_keeps_backticks():
    assert render_markdown("```python") == CYAN + "```python" + RESET


def test_code_fence_does_not_affect_following_lines():
    rendered = render_markdown("```\n**x**\n```")

    assert rendered.split("\n") == [
        CYAN + "```" + RESET,
        BOLD + "x" + RESET,
        CYAN + "```" + RESET,
    ]


@pytest.mark.parametrize("line", ["- item", "* item"])
def test_bullet_items(line: str):
    assert render_markdown(line) == GREEN + "• " + RESET + "item"


def test_bullet_body_gets_inline_spans():
    assert render_markdown("- **run** `ls`") == (
        GREEN + "• " + RESET + BOLD + "run" + RESET + " " + CYAN + "ls" + RESET
    )


def test_ordered_items():
    assert render_markdown("1. first") == YELLOW + "1. " + RESET + "first"
    assert render_markdown("10. *tenth*") == YELLOW + "10. " + RESET + ITALIC + "tenth" + RESET


def test_bold_forms():
    assert render_markdown("**bold**") == BOLD + "bold" + RESET
    assert render_markdown("__bold__") == BOLD + "bold" + RESET


def test_italic_forms():
    assert render_markdown("*italic*") == ITALIC + "italic" + RESET
    assert render_markdown("_italic_") == ITALIC + "italic" + RESET


def test_inline_code_preserves_whitespace():
    assert render_markdown("`code`") == CYAN + "code" + RESET
    assert render_markdown("` spaced `") == CYAN + " spaced " + RESET


def test_link_drops_target():
    assert render_markdown("[label](http://x)") == BLUE + UNDERLINE + "label" + RESET


def test_link_label_with_bold_stays_literal():
    assert render_markdown("[**docs**](https://example.com)") == (
        "[" + BOLD + "docs" + RESET + "](https://example.com)"
    )


def test_code_span_does_not_wrap_bold():
    assert transform_inline("`a **b** c`") == "`a " + BOLD + "b" + RESET + " c`"


@pytest.mark.parametrize("delimiter", ["*", "_"])
def test_italic_does_not_wrap_bold(delimiter: str):
    text = f"{delimiter}x **y** z{delimiter}"
    assert transform_inline(text) == f"{delimiter}x " + BOLD + "y" + RESET + f" z{delimiter}"


def test_link_label_does_not_wrap_code():
    assert transform_inline("[`ls`](x)") == "[" + CYAN + "ls" + RESET + "](x)"


def test_bold_wraps_nested_italic():
    assert render_markdown("**a *b* c**") == BOLD + "a " + ITALIC + "b" + RESET + " c" + RESET


def test_multiple_spans_on_one_line():
    assert transform_inline("**a** and **b**") == BOLD + "a" + RESET + " and " + BOLD + "b" + RESET


def test_spans_are_non_greedy():
    assert transform_inline("`a` b `c`") == CYAN + "a" + RESET + " b " + CYAN + "c" + RESET


def test_mixed_inline_spans():
    assert transform_inline("use `ls -la` to **list** [files](x)") == (
        "use "
        + CYAN
        + "ls -la"
        + RESET
        + " to "
        + BOLD
        + "list"
        + RESET
        + " "
        + BLUE
        + UNDERLINE
        + "files"
        + RESET
    )


@pytest.mark.parametrize(
    "text",
    ["*oops", "**oops", "oops_", "`open", "[label](http://x", "[label]", "****"],
)
def test_unterminated_delimiters_stay_literal(text: str):
    assert render_markdown(text) == text


def test_inserted_escape_codes_are_not_links():
    assert render_markdown("**bold**](x)") == BOLD + "bold" + RESET + "](x)"


def test_literal_escape_sequences_pass_through():
    text = "\x1b[31mred\x1b[0m"
    assert render_markdown(text) == text


def test_triple_delimiters_leave_stray_asterisks():
    # Bold takes the first pair; the leftover "*" on each side cannot reach
    # across the inserted codes, so both stay literal.
    assert render_markdown("***both***") == BOLD + "*both" + RESET + "*"
    assert render_markdown("___both___") == BOLD + "_both" + RESET + "_"


@pytest.mark.parametrize(
    "text",
    ["*a \x1b[1mb*", "_a \x1b[1mb_", "`a \x1b[1mb`", "[a \x1b[1mb](x)", "[a](x \x1b[1m)"],
)
def test_spans_never_contain_escape_codes(text: str):
    assert transform_inline(text) == text


def test_empty_and_blank_lines_pass_through():
    assert render_markdown("") == ""
    assert render_markdown("   ") == "   "
    assert render_markdown("a\n\nb") == "a\n\nb"


def test_single_trailing_newline_is_stripped():
    assert render_markdown("line\n") == "line"
    assert render_markdown("line\n\n") == "line\n"


def test_lines_are_rendered_independently():
    rendered = render_markdown("# Title\nplain text\n- item")

    assert rendered == "\n".join(
        [
            MAGENTA + BOLD + "Title" + RESET,
            "plain text",
            GREEN + "• " + RESET + "item",
        ]
    )


def test_spans_do_not_cross_lines():
    assert render_markdown("**open\nclose**") == "**open\nclose**"
    assert render_markdown("`a\nb`") == "`a\nb`"
