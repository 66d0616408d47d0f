from typing import List
import logging

from pydantic import ValidationError

from shortly.core.exceptions import InvalidArgument, NotFound
from shortly.schemas import ShortenerConfig, URLInfoResponse, PaginatedURLList
from shortly.services.id_generator import IdGenerator
from shortly.services.registry import Registry
from shortly.utils.encoding import to_digits, from_digits, encode_digits, decode_code
from shortly.utils.url import extract_path


logger = logging.getLogger(__name__)


class ShortenerSession:
    """
    One shortening session: an id counter and a registry sharing one alphabet
    and protocol. Sessions never share state with each other.
    """

    def __init__(self, config: ShortenerConfig):
        self.config = config
        self._ids = IdGenerator(config.start_id)
        self._registry = Registry()

    @classmethod
    def create(cls, alphabet: str, protocol: str, start_id: int) -> "ShortenerSession":
        try:
            config = ShortenerConfig(alphabet=alphabet, protocol=protocol, start_id=start_id)
        except ValidationError as e:
            logger.error(f"Rejected shortener configuration: {e}")
            raise InvalidArgument(str(e)) from e
        return cls(config)

    @classmethod
    def from_settings(cls, settings) -> "ShortenerSession":
        return cls.create(settings.ALPHABET, settings.PROTOCOL, settings.START_ID)

    @property
    def alphabet(self) -> str:
        return self.config.alphabet

    @property
    def protocol(self) -> str:
        return self.config.protocol

    @property
    def radix(self) -> int:
        return len(self.config.alphabet)

    def next_id(self) -> int:
        return self._ids.next_id()

    def digits(self, number: int) -> List[int]:
        return to_digits(number, self.radix)

    def path(self, url: str) -> str:
        return extract_path(url)

    def short_code(self, number: int) -> str:
        return encode_digits(self.digits(number), self.alphabet)

    def shorten(self, long_url: str) -> str:
        identifier = self.next_id()
        code = self.short_code(identifier)
        self._registry.add(identifier, long_url)
        logger.info("Shortened %s... to %s (id=%d)", long_url[:50], code, identifier)
        return self.protocol + code

    def expand(self, short_url: str) -> str:
        code = self.path(short_url)
        digits = decode_code(code, self.alphabet)
        # only canonical codes, i.e. ones shorten could have produced, resolve
        if not digits or (len(digits) > 1 and digits[0] == 0):
            logger.warning(f"Expand 404: Short code not issued: {code!r}")
            raise NotFound(f"Short URL not found: {short_url}")

        identifier = from_digits(digits, self.radix)
        try:
            return self._registry.get(identifier)
        except NotFound:
            logger.warning(f"Expand 404: Short code not found: {code}")
            raise NotFound(f"Short URL not found: {short_url}") from None

    def list_urls(self, skip: int = 0, limit: int = 100) -> PaginatedURLList:
        total, page = self._registry.get_all(skip, limit)
        url_responses = [
            URLInfoResponse(
                id=identifier,
                short_code=self.short_code(identifier),
                short_url=self.protocol + self.short_code(identifier),
                original_url=original_url,
            ) for identifier, original_url in page
        ]
        return PaginatedURLList(
            total=total,
            skip=skip,
            limit=limit,
            urls=url_responses
        )

    def __len__(self):
        return len(self._registry)
