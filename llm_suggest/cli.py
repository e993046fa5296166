"""
Suggests shell commands, code snippets, or short explanations from an LLM.
Answers other than code are rendered from Markdown with ANSI styling.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from . import __version__
from .config import ConfigError, build_config
from .constants import SETUP_HINT
from .exceptions import LlmError, MissingCredentialsError
from .models import Mode
from .prompts import build_prompt, get_os_name, get_shell
from .providers import determine_provider, query_provider
from .renderer import render_markdown

__all__ = ["cli"]

logger = logging.getLogger(__name__)

EPILOG = """\
\b
Examples:
    llm search for foo in directory
    llm list files by size
    llm --code write a python function to diff a file
    llm --explain explain the cp command

\b
Set one of ANTHROPIC_API_KEY, OPENAI_API_KEY or OLLAMA_MODEL.
Priority order: Claude > OpenAI > Ollama.
"""


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.version_option(__version__, "-v", "--version", prog_name="llm")
@click.option("-c", "--code", "code_mode", is_flag=True, help="Code generation mode")
@click.option("-x", "--explain", "explain_mode", is_flag=True, help="Explanation mode")
@click.option("--max-tokens", type=int, help="Maximum completion length")
@click.option("--timeout", type=float, help="Request timeout in seconds")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read settings from this file instead of the user configuration",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Emit ANSI styling (on by default, even when piped)",
)
@click.option("--debug", is_flag=True, help="Log provider activity to stderr")
@click.argument("query", nargs=-1)
@click.pass_context
def cli(
    ctx: click.Context,
    query: tuple[str, ...],
    code_mode: bool = False,
    explain_mode: bool = False,
    max_tokens: int | None = None,
    timeout: float | None = None,
    config_path: Path | None = None,
    color: bool = True,
    debug: bool = False,
):
    """
    Ask an LLM for a shell command, a code snippet, or a brief explanation.

    Args:
        ctx: Click context, used to print help when no query is given.
        query: Words of the request; joined with single spaces.
        code_mode: Ask for code only and print it verbatim.
        explain_mode: Ask for a short explanation.
        max_tokens: Override for the configured completion length.
        timeout: Override for the configured request timeout.
        config_path: Configuration file to use instead of the default location.
        color: Keep ANSI styling in rendered answers.
        debug: Enable debug logging on stderr.

    Raises:
        click.UsageError: If both modes are requested.
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If no provider is configured or the request fails.

    Examples:
        llm --explain what does tar -xzf do
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not query:
        click.echo(ctx.get_help())
        ctx.exit(1)

    if code_mode and explain_mode:
        raise click.UsageError("--code and --explain cannot be combined")

    try:
        config = build_config(config_path, max_tokens=max_tokens, timeout=timeout)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        selection = determine_provider(pass_key_name=config.pass_key_name)
    except MissingCredentialsError as error:
        raise click.ClickException(f"{error}\n{SETUP_HINT}") from error

    mode = Mode.CODE if code_mode else Mode.EXPLAIN if explain_mode else Mode.COMMAND
    logger.debug("Mode %s, provider %s", mode.name.lower(), selection.provider.name.lower())
    prompt = build_prompt(mode, " ".join(query), get_os_name(), get_shell())

    try:
        completion = query_provider(selection, prompt, config)
    except LlmError as error:
        raise click.ClickException(str(error)) from error

    # Code is printed verbatim so it can be piped or pasted.
    if mode is Mode.CODE:
        click.echo(completion, color=color)
    else:
        click.echo(render_markdown(completion), color=color)


if __name__ == "__main__":
    cli()
