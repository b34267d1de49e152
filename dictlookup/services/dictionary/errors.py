"""Failure kinds raised by dictionary lookups."""


class DictionaryError(Exception):
    """Base class for every lookup failure."""

    exit_code = 1


class ConnectionFailedError(DictionaryError):
    """The dictionary API could not be reached (DNS, refused, TLS, timeout)."""

    exit_code = 2


class NotFoundError(DictionaryError):
    """The dictionary has no entry for the requested word."""

    exit_code = 1

    def __init__(self, word: str, language_code: str) -> None:
        self.word = word
        self.language_code = language_code
        super().__init__(f"No definitions found for '{word}' ({language_code})")


class MalformedResponseError(DictionaryError):
    """The response body does not match the expected entry shape."""

    exit_code = 3


class UnknownError(DictionaryError):
    """Any other failure, such as an unexpected HTTP status."""

    exit_code = 4

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
