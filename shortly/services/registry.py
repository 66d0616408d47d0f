import logging
from typing import Dict, List, Tuple

from shortly.core.exceptions import InvalidArgument, NotFound

logger = logging.getLogger(__name__)


class Registry:
    """
    In-memory association from identifier to the original long URL.

    Entries are only ever added: no update, no delete, no expiry. Shortening
    the same long URL twice stores it under two identifiers.
    """
    _entries: Dict[int, str]

    def __init__(self):
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, identifier):
        return identifier in self._entries

    def add(self, identifier: int, original_url: str):
        self._entries[identifier] = original_url
        logger.debug("Registered id %d -> %s", identifier, original_url[:50])

    def get(self, identifier: int) -> str:
        try:
            return self._entries[identifier]
        except KeyError:
            raise NotFound(f"No URL registered for id {identifier}") from None

    def get_all(self, skip: int = 0, limit: int = 100) -> Tuple[int, List[Tuple[int, str]]]:
        """Total count plus one page of (identifier, original_url), in issuance order."""
        if skip < 0:
            raise InvalidArgument("skip must be non-negative")
        if limit < 1:
            raise InvalidArgument("limit must be at least 1")
        page = list(self._entries.items())[skip:skip + limit]
        return len(self._entries), page
