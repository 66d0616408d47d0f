import sys

from shortly.core.config import settings
from shortly.core.exceptions import ShortlyError
from shortly.core.logging_config import configure_logging
from shortly.services.shortener import ShortenerSession


def main(argv=None) -> int:
    """Shorten every URL given on the command line, then check each one expands back."""
    logger = configure_logging(settings.LOG_LEVEL)
    long_urls = sys.argv[1:] if argv is None else list(argv)
    if not long_urls:
        print("usage: python -m shortly.main URL [URL ...]", file=sys.stderr)
        return 2

    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
    try:
        session = ShortenerSession.from_settings(settings)
        pairs = [(long_url, session.shorten(long_url)) for long_url in long_urls]
    except ShortlyError as e:
        logger.error(f"Failed to shorten: {e}")
        return 1

    failed = 0
    for long_url, short_url in pairs:
        print(f"{long_url} -> {short_url}")
        try:
            expanded = session.expand(short_url)
        except ShortlyError:
            logger.exception("Round trip failed for %s", short_url)
            failed += 1
            continue
        if expanded != long_url:
            logger.error("Round trip mismatch: %s expanded to %s", short_url, expanded)
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
