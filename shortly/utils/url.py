from shortly.core.exceptions import InvalidArgument

# scheme, empty, host, path
PATH_FIELD = 3


def extract_path(url: str) -> str:
    """Return the segment after the third slash, e.g. 'bef' for 'http://short.ly/bef'."""
    parts = url.split("/")
    if len(parts) <= PATH_FIELD:
        raise InvalidArgument(f"URL has no path segment: {url!r}")
    return parts[PATH_FIELD]
