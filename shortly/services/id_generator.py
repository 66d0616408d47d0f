import logging

from shortly.core.exceptions import InvalidArgument

logger = logging.getLogger(__name__)


class IdGenerator:
    """Hands out a strictly increasing sequence of integers starting at `start`."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise InvalidArgument(f"start id must be non-negative, got {start}")
        self._next = start

    @property
    def current(self) -> int:
        return self._next

    def next_id(self) -> int:
        issued = self._next
        self._next += 1
        logger.debug("Issued id %d", issued)
        return issued
