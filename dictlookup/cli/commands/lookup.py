"""Word lookup command."""

import asyncio
import logging

import typer
from rich.markup import escape

from dictlookup.cli.utils.console import error_console
from dictlookup.config import settings
from dictlookup.logging_config import setup_logging
from dictlookup.services.dictionary import (
    DictionaryApiBackend,
    DictionaryError,
    NotFoundError,
    render_entry,
)

logger = logging.getLogger(__name__)


def lookup(
    word: str = typer.Argument(..., metavar="WORD", help="Word to look up"),
    language_code: str = typer.Option(
        settings.default_language_code,
        "--language_code",
        "-l",
        metavar="CODE",
        help="Dictionary language code",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Look up WORD and print its first dictionary entry."""
    setup_logging("DEBUG" if verbose else None)

    try:
        text = asyncio.run(_lookup(word, language_code))
    except DictionaryError as e:
        error_console.print(f"[error]Error:[/] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(e.exit_code) from None

    typer.echo(text, nl=False)


async def _lookup(word: str, language_code: str) -> str:
    """Fetch the entries for a word and render the first one."""
    backend = DictionaryApiBackend()
    entries = await backend.lookup(word, language_code)
    if not entries:
        logger.debug(f"Empty entry list for '{word}'")
        raise NotFoundError(word, language_code)
    if len(entries) > 1:
        logger.debug(f"{len(entries)} entries for '{word}', rendering the first")
    return render_entry(entries[0])
