"""Main CLI application entry point."""

import typer

from dictlookup.cli.commands import lookup

app = typer.Typer(
    name="dictlookup",
    help="Look up a word in dictionaryapi.dev",
    rich_markup_mode="rich",
)

app.command(name="lookup", help="Look up a word and print its first entry")(lookup.lookup)


if __name__ == "__main__":
    app()
