# re-export common schemas for simpler imports
from .ShortenerConfig import ShortenerConfig
from .URLInfoResponse import URLInfoResponse
from .PaginatedURLList import PaginatedURLList

__all__ = [
    "ShortenerConfig",
    "URLInfoResponse",
    "PaginatedURLList",
]
