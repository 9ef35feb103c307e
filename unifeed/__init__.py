"""
Unified feed package.

Normalizes Atom and RSS 2.0 documents into one object model.
"""

__version__ = "0.1.0"

from .builder import FeedBuilder, FeedReader
from .config import FeederSettings
from .dialects import ContextKind, Dialect, detect_dialect, resolve_field
from .exceptions import FeederError, InvalidDocument, InvalidScheme, MalformedXml, TransportError
from .fetcher import fetch_xml, get_feed
from .logging_config import get_logger, init_logging
from .models import Author, Entry, Feed, Link, Source
from .parser import parse_feed, tokenize

__all__ = [
    "Author",
    "ContextKind",
    "Dialect",
    "Entry",
    "Feed",
    "FeedBuilder",
    "FeedReader",
    "FeederError",
    "FeederSettings",
    "InvalidDocument",
    "InvalidScheme",
    "Link",
    "MalformedXml",
    "Source",
    "TransportError",
    "detect_dialect",
    "fetch_xml",
    "get_feed",
    "get_logger",
    "init_logging",
    "parse_feed",
    "resolve_field",
    "tokenize",
]
