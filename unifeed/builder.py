"""
Event-driven feed builder.

Consumes low-level XML parse events and builds the unified model without
materializing a parse tree. A stack of frames tracks which model object
owns the tags currently open.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from .dialects import ContextKind, Dialect, detect_dialect, resolve_field
from .exceptions import FeederError, InvalidDocument, MalformedXml
from .logging_config import get_logger
from .models import Author, Entry, Feed, Link, Source

logger = get_logger(__name__)


class NodeKind(str, Enum):
    """Model object held by a frame."""

    FEED = "feed"
    ENTRY = "entry"
    LINK = "link"
    AUTHOR = "author"
    SOURCE = "source"


Node = Feed | Entry | Link | Author | Source


def _set_feed_title(feed: Feed, value: str) -> None:
    if feed.title is None:
        feed.title = value


def _set_feed_subtitle(feed: Feed, value: str) -> None:
    if feed.subtitle is None:
        feed.subtitle = value


def _set_feed_updated(feed: Feed, value: str) -> None:
    if feed.updated is None:
        feed.updated = value


def _set_feed_id(feed: Feed, value: str) -> None:
    if feed.id is None:
        feed.id = value


def _set_feed_contributor(feed: Feed, value: str) -> None:
    if feed.contributor is None:
        feed.contributor = value


def _set_feed_generator(feed: Feed, value: str) -> None:
    if feed.generator is None:
        feed.generator = value


def _set_feed_icon(feed: Feed, value: str) -> None:
    if feed.icon is None:
        feed.icon = value


def _set_feed_logo(feed: Feed, value: str) -> None:
    if feed.logo is None:
        feed.logo = value


def _set_feed_rights(feed: Feed, value: str) -> None:
    if feed.rights is None:
        feed.rights = value


def _set_entry_id(entry: Entry, value: str) -> None:
    if entry.id is None:
        entry.id = value


def _set_entry_title(entry: Entry, value: str) -> None:
    if entry.title is None:
        entry.title = value


def _set_entry_updated(entry: Entry, value: str) -> None:
    if entry.updated is None:
        entry.updated = value


def _set_entry_content(entry: Entry, value: str) -> None:
    if entry.content is None:
        entry.content = value


def _set_entry_summary(entry: Entry, value: str) -> None:
    if entry.summary is None:
        entry.summary = value


def _set_entry_published(entry: Entry, value: str) -> None:
    if entry.published is None:
        entry.published = value


def _set_entry_rights(entry: Entry, value: str) -> None:
    if entry.rights is None:
        entry.rights = value


def _set_link_rel(link: Link, value: str) -> None:
    if link.rel is None:
        link.rel = value


def _set_link_href(link: Link, value: str) -> None:
    if link.href is None:
        link.href = value


def _set_author_name(author: Author, value: str) -> None:
    if author.name is None:
        author.name = value


def _set_author_email(author: Author, value: str) -> None:
    if author.email is None:
        author.email = value


def _set_author_uri(author: Author, value: str) -> None:
    if author.uri is None:
        author.uri = value


def _set_source_id(source: Source, value: str) -> None:
    if source.id is None:
        source.id = value


def _set_source_title(source: Source, value: str) -> None:
    if source.title is None:
        source.title = value


def _set_source_updated(source: Source, value: str) -> None:
    if source.updated is None:
        source.updated = value


def _add_category(node: Feed | Entry, value: str) -> None:
    node.category.append(value)


def _add_entry_contributor(entry: Entry, value: str) -> None:
    entry.contributor.append(value)


# Scalar fields that accept text, per node kind. First write wins.
_SETTERS: dict[NodeKind, dict[str, Callable[..., None]]] = {
    NodeKind.FEED: {
        "title": _set_feed_title,
        "subtitle": _set_feed_subtitle,
        "updated": _set_feed_updated,
        "id": _set_feed_id,
        "contributor": _set_feed_contributor,
        "generator": _set_feed_generator,
        "icon": _set_feed_icon,
        "logo": _set_feed_logo,
        "rights": _set_feed_rights,
    },
    NodeKind.ENTRY: {
        "id": _set_entry_id,
        "title": _set_entry_title,
        "updated": _set_entry_updated,
        "content": _set_entry_content,
        "summary": _set_entry_summary,
        "published": _set_entry_published,
        "rights": _set_entry_rights,
    },
    NodeKind.LINK: {"rel": _set_link_rel, "href": _set_link_href},
    NodeKind.AUTHOR: {"name": _set_author_name, "email": _set_author_email, "uri": _set_author_uri},
    NodeKind.SOURCE: {
        "id": _set_source_id,
        "title": _set_source_title,
        "updated": _set_source_updated,
    },
}

# String-list fields, one item per element occurrence
_APPENDERS: dict[NodeKind, dict[str, Callable[..., None]]] = {
    NodeKind.FEED: {"category": _add_category},
    NodeKind.ENTRY: {"category": _add_category, "contributor": _add_entry_contributor},
}


@dataclass
class _Frame:
    node: Node
    kind: NodeKind
    tag: str | None
    context: ContextKind


class _ChildRule(NamedTuple):
    kind: NodeKind
    parents: frozenset[NodeKind]
    create: Callable[[Mapping[str, str]], Node]
    attach: Callable[..., None]
    context: ContextKind = ContextKind.FEED


def _attach_author(parent: Feed | Entry, author: Author) -> None:
    parent.author.append(author)


def _attach_link(parent: Feed | Entry, link: Link) -> None:
    parent.link.append(link)


def _attach_source(parent: Entry, source: Source) -> None:
    parent.source = source


def _attach_entry(parent: Feed, entry: Entry) -> None:
    parent.entries.append(entry)


_FEED_OR_ENTRY = frozenset({NodeKind.FEED, NodeKind.ENTRY})

# Resolved field names that open a new model object
_CHILD_RULES: dict[str, _ChildRule] = {
    "author": _ChildRule(NodeKind.AUTHOR, _FEED_OR_ENTRY, lambda attrs: Author(), _attach_author),
    "link": _ChildRule(
        NodeKind.LINK,
        _FEED_OR_ENTRY,
        lambda attrs: Link(rel=attrs.get("rel"), href=attrs.get("href")),
        _attach_link,
    ),
    "source": _ChildRule(
        NodeKind.SOURCE, frozenset({NodeKind.ENTRY}), lambda attrs: Source(), _attach_source
    ),
    "entry": _ChildRule(
        NodeKind.ENTRY,
        frozenset({NodeKind.FEED}),
        lambda attrs: Entry(),
        _attach_entry,
        ContextKind.ENTRY,
    ),
}


class FeedBuilder:
    """
    Builds a Feed from the events of one document body.

    The root tag is not fed to the builder; the first event it sees is
    the first child of the root. One builder is used per document.
    """

    def __init__(self, dialect: Dialect):
        self.dialect = dialect
        self.feed = Feed()
        self._stack: list[_Frame] = [_Frame(self.feed, NodeKind.FEED, None, ContextKind.FEED)]
        self._attributes: dict[str, str] = {}
        self._field: str | None = None
        self._field_filled = False
        self._error: FeederError | None = None

    @property
    def failed(self) -> bool:
        """True once an error event was received; later events are ignored."""
        return self._error is not None

    @property
    def depth(self) -> int:
        """Number of frames on the context stack, the Feed included."""
        return len(self._stack)

    def attribute(self, name: str, value: str) -> None:
        if self._error is not None:
            return
        self._attributes[name] = value

    def open_tag(self, name: str, attributes: Mapping[str, str] | None = None) -> None:
        if self._error is not None:
            return
        if attributes:
            self._attributes.update(attributes)

        top = self._stack[-1]
        field = resolve_field(self.dialect, top.context, name)
        rule = _CHILD_RULES.get(field)
        if rule is not None and top.kind in rule.parents:
            child = rule.create(self._attributes)
            rule.attach(top.node, child)
            self._stack.append(_Frame(child, rule.kind, name, rule.context))

        self._field = field
        self._field_filled = False

    def text(self, content: str) -> None:
        if self._error is not None:
            return
        top = self._stack[-1]
        # RSS links carry their URL as element text
        if self.dialect is Dialect.RSS2 and self._field == "link" and top.kind is NodeKind.LINK:
            top.node.href = content
            return
        self._assign(content)

    def cdata(self, content: str) -> None:
        if self._error is not None:
            return
        self._assign(content)

    def close_tag(self, name: str) -> None:
        if self._error is not None:
            return
        if name == self._stack[-1].tag:
            self._stack.pop()
        self._attributes.clear()

    def error(self, detail: str) -> None:
        if self._error is not None:
            return
        logger.warning("Aborting feed build", extra={"detail": detail})
        self._error = MalformedXml(detail)

    def close(self) -> Feed:
        """
        Finish the build.

        Returns:
            The root Feed.

        Raises:
            MalformedXml: If an error event was received.
        """
        if self._error is not None:
            raise self._error
        return self.feed

    def _assign(self, content: str) -> None:
        field = self._field
        if field is None:
            return
        top = self._stack[-1]
        setter = _SETTERS[top.kind].get(field)
        if setter is not None:
            setter(top.node, content)
            return
        append = _APPENDERS.get(top.kind, {}).get(field)
        if append is not None and not self._field_filled:
            append(top.node, content)
            self._field_filled = True


class FeedReader:
    """
    Event sink for a complete document.

    Detects the dialect from the root tag, then hands every later event
    to a ``FeedBuilder`` for that dialect.
    """

    def __init__(self) -> None:
        self.dialect: Dialect | None = None
        self._builder: FeedBuilder | None = None
        self._error: FeederError | None = None

    @property
    def failed(self) -> bool:
        """True once detection or the build has failed."""
        if self._error is not None:
            return True
        return self._builder is not None and self._builder.failed

    def attribute(self, name: str, value: str) -> None:
        # Root attributes are dropped
        if self._builder is not None:
            self._builder.attribute(name, value)

    def open_tag(self, name: str, attributes: Mapping[str, str] | None = None) -> None:
        if self._error is not None:
            return
        if self._builder is not None:
            self._builder.open_tag(name, attributes)
            return
        try:
            self.dialect = detect_dialect(name)
        except InvalidDocument as e:
            logger.warning("Unrecognized feed root tag", extra={"tag": name})
            self._error = e
            return
        logger.debug("Detected feed dialect", extra={"dialect": self.dialect.value})
        self._builder = FeedBuilder(self.dialect)

    def text(self, content: str) -> None:
        if self._builder is not None:
            self._builder.text(content)

    def cdata(self, content: str) -> None:
        if self._builder is not None:
            self._builder.cdata(content)

    def close_tag(self, name: str) -> None:
        if self._builder is not None:
            self._builder.close_tag(name)

    def error(self, detail: str) -> None:
        if self._builder is not None:
            self._builder.error(detail)
        elif self._error is None:
            logger.warning("Aborting feed build", extra={"detail": detail})
            self._error = MalformedXml(detail)

    def close(self) -> Feed:
        """
        Finish the document.

        Returns:
            The root Feed.

        Raises:
            InvalidDocument: If the root tag was not recognized or never seen.
            MalformedXml: If the tokenizer reported an error.
        """
        if self._error is not None:
            raise self._error
        if self._builder is None:
            raise InvalidDocument("Document has no root element. Root tag must be feed or rss.")
        return self._builder.close()
