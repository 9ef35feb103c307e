"""
Feed dialects.

Detects whether a document is Atom or RSS 2.0 and maps dialect tag names
onto unified model field names.
"""

from enum import Enum

from .exceptions import InvalidDocument


class Dialect(str, Enum):
    """Supported source vocabularies."""

    ATOM = "atom"
    RSS2 = "rss2"


class ContextKind(str, Enum):
    """Which alias table applies to the tags under a frame."""

    FEED = "feed"
    ENTRY = "entry"


RSS_FEED_FIELDS: dict[str, str] = {
    "description": "subtitle",
    "pubDate": "updated",
    "lastBuildDate": "updated",
    "item": "entry",
    "managingEditor": "author",
    "image": "logo",
}

RSS_ENTRY_FIELDS: dict[str, str] = {
    "description": "content",
    "pubDate": "updated",
    "guid": "id",
    "item": "entry",
}

_RSS_TABLES = {
    ContextKind.FEED: RSS_FEED_FIELDS,
    ContextKind.ENTRY: RSS_ENTRY_FIELDS,
}

_ROOT_TAGS = {
    "feed": Dialect.ATOM,
    # RSS versions are not distinguished
    "rss": Dialect.RSS2,
}


def detect_dialect(root_tag: str) -> Dialect:
    """
    Classify a document by its root tag.

    Args:
        root_tag: Name of the first open tag of the document.

    Returns:
        The detected dialect.

    Raises:
        InvalidDocument: If the root tag is neither ``feed`` nor ``rss``.
    """
    try:
        return _ROOT_TAGS[root_tag]
    except KeyError:
        raise InvalidDocument(
            f"Invalid feed type '{root_tag}'. Root tag must be feed or rss."
        ) from None


def resolve_field(dialect: Dialect, context: ContextKind, tag_name: str) -> str:
    """
    Map a dialect tag name to a unified field name.

    Atom tag names are already unified field names. RSS tags are looked up
    in the alias table for ``context``; unknown tags map to themselves.
    """
    if dialect is Dialect.ATOM:
        return tag_name
    return _RSS_TABLES[context].get(tag_name, tag_name)
