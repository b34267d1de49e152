"""Dictionary entry model, rendering and API backend."""

from dictlookup.services.dictionary.api_backend import DictionaryApiBackend
from dictlookup.services.dictionary.base import (
    Definition,
    DictionaryBackend,
    Entry,
    Meaning,
    Phonetic,
    decode_entries,
)
from dictlookup.services.dictionary.errors import (
    ConnectionFailedError,
    DictionaryError,
    MalformedResponseError,
    NotFoundError,
    UnknownError,
)
from dictlookup.services.dictionary.render import render_entry

__all__ = [
    "ConnectionFailedError",
    "Definition",
    "DictionaryApiBackend",
    "DictionaryBackend",
    "DictionaryError",
    "Entry",
    "MalformedResponseError",
    "Meaning",
    "NotFoundError",
    "Phonetic",
    "UnknownError",
    "decode_entries",
    "render_entry",
]
