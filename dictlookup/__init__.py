"""Command-line dictionary lookup backed by dictionaryapi.dev."""

__version__ = "0.1.0"
