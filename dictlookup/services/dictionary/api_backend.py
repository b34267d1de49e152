"""dictionaryapi.dev backend."""

import logging
from urllib.parse import quote

import httpx

from dictlookup.config import settings
from dictlookup.services.dictionary.base import DictionaryBackend, Entry, decode_entries
from dictlookup.services.dictionary.errors import (
    ConnectionFailedError,
    MalformedResponseError,
    NotFoundError,
    UnknownError,
)

logger = logging.getLogger(__name__)


class DictionaryApiBackend(DictionaryBackend):
    """Look up words through the free dictionaryapi.dev entries endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the backend.

        Args:
            base_url: Entries endpoint. Defaults to settings.dictionary_api_url
            timeout: Request timeout in seconds. Defaults to settings.request_timeout
            transport: Optional httpx transport, mainly for tests
        """
        self.base_url = (base_url or settings.dictionary_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    @property
    def name(self) -> str:
        return "dictionaryapi"

    def build_url(self, word: str, language_code: str) -> str:
        """Substitute language code and word as single encoded path segments."""
        return f"{self.base_url}/{quote(language_code, safe='')}/{quote(word, safe='')}"

    async def lookup(self, word: str, language_code: str) -> list[Entry]:
        url = self.build_url(word, language_code)
        logger.debug(f"GET {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.TransportError as e:
            logger.warning(f"Could not reach {self.name} for '{word}': {e!r}")
            raise ConnectionFailedError(f"Could not reach the dictionary API: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Request to {self.name} failed for '{word}': {e!r}")
            raise UnknownError(f"Request failed: {e}") from e
        except httpx.InvalidURL as e:
            logger.warning(f"Could not build a request URL for '{word}': {e}")
            raise UnknownError(f"Invalid request URL: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug(f"'{word}' not found in {self.name} ({language_code})")
            raise NotFoundError(word, language_code)

        if not response.is_success:
            logger.warning(f"Unexpected status {response.status_code} from {self.name}")
            raise UnknownError(
                f"Dictionary API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except (ValueError, RecursionError) as e:
            raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

        entries = decode_entries(payload)
        logger.debug(f"Decoded {len(entries)} entries for '{word}'")
        return entries
