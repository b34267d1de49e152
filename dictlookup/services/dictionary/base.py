"""Base classes and dataclasses for dictionary entries."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from dictlookup.services.dictionary.errors import MalformedResponseError

_MISSING = object()


def _required(data: dict[str, Any], key: str, kind: type, where: str) -> Any:
    """Return data[key], raising MalformedResponseError if missing or mistyped."""
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise MalformedResponseError(f"{where}: missing required field '{key}'")
    if not isinstance(value, kind):
        raise MalformedResponseError(
            f"{where}: field '{key}' should be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _optional(data: dict[str, Any], key: str, kind: type, where: str) -> Any:
    """Return data[key] or None when absent; a present value must have the right type."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind):
        raise MalformedResponseError(
            f"{where}: field '{key}' should be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _as_object(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedResponseError(f"{where}: expected an object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Phonetic:
    """One pronunciation of a word."""

    text: str | None = None  # IPA transcription
    audio: str | None = None  # URL to a recording

    @classmethod
    def from_dict(cls, data: Any) -> "Phonetic":
        obj = _as_object(data, "phonetic")
        return cls(
            text=_optional(obj, "text", str, "phonetic"),
            audio=_optional(obj, "audio", str, "phonetic"),
        )


@dataclass(frozen=True)
class Definition:
    """A single sense of a word."""

    definition: str
    synonyms: tuple[str, ...] | None = None
    example: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Definition":
        obj = _as_object(data, "definition")
        synonyms = _optional(obj, "synonyms", list, "definition")
        if synonyms is not None and not all(isinstance(s, str) for s in synonyms):
            raise MalformedResponseError("definition: 'synonyms' must contain only strings")
        return cls(
            definition=_required(obj, "definition", str, "definition"),
            synonyms=tuple(synonyms) if synonyms is not None else None,
            example=_optional(obj, "example", str, "definition"),
        )


@dataclass(frozen=True)
class Meaning:
    """Definitions grouped under one part of speech."""

    part_of_speech: str
    definitions: tuple[Definition, ...]

    @classmethod
    def from_dict(cls, data: Any) -> "Meaning":
        obj = _as_object(data, "meaning")
        return cls(
            part_of_speech=_required(obj, "partOfSpeech", str, "meaning"),
            definitions=tuple(
                Definition.from_dict(d) for d in _required(obj, "definitions", list, "meaning")
            ),
        )


@dataclass(frozen=True)
class Entry:
    """One dictionary result for a word."""

    word: str
    meanings: tuple[Meaning, ...]
    phonetics: tuple[Phonetic, ...] | None = None
    origin: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Entry":
        """
        Build an Entry from one element of the API response array.

        Raises:
            MalformedResponseError: A required field is missing or any field
                has the wrong type
        """
        obj = _as_object(data, "entry")
        phonetics = _optional(obj, "phonetics", list, "entry")
        return cls(
            word=_required(obj, "word", str, "entry"),
            meanings=tuple(Meaning.from_dict(m) for m in _required(obj, "meanings", list, "entry")),
            phonetics=(
                tuple(Phonetic.from_dict(p) for p in phonetics) if phonetics is not None else None
            ),
            origin=_optional(obj, "origin", str, "entry"),
        )


def decode_entries(payload: Any) -> list[Entry]:
    """Decode a full API response (a JSON array of entries), keeping its order."""
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"response: expected an array of entries, got {type(payload).__name__}"
        )
    return [Entry.from_dict(item) for item in payload]


class DictionaryBackend(ABC):
    """Abstract base class for dictionary backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this dictionary backend."""
        ...  # pragma: no cover

    @abstractmethod
    async def lookup(self, word: str, language_code: str) -> list[Entry]:
        """
        Look up a word and return every entry the dictionary has for it.

        Args:
            word: The word to look up
            language_code: Dictionary language, e.g. "en_US"

        Returns:
            The decoded entries in response order (may be empty)

        Raises:
            DictionaryError: One of its subclasses, depending on the failure
        """
        ...  # pragma: no cover
