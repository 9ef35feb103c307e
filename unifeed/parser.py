"""
XML feed parser.

Turns raw XML text into builder events with the standard library SAX
reader and returns the unified Feed.
"""

import io
import xml.sax
from typing import Protocol
from xml.sax.handler import ContentHandler, LexicalHandler
from xml.sax.xmlreader import AttributesImpl

from .builder import FeedReader
from .logging_config import get_logger
from .models import Feed

logger = get_logger(__name__)


class EventSink(Protocol):
    """Receiver of tokenizer events."""

    def attribute(self, name: str, value: str) -> None: ...

    def open_tag(self, name: str, attributes: dict[str, str] | None = None) -> None: ...

    def text(self, content: str) -> None: ...

    def cdata(self, content: str) -> None: ...

    def close_tag(self, name: str) -> None: ...

    def error(self, detail: str) -> None: ...


class _EventAdapter(ContentHandler, LexicalHandler):
    """Forwards SAX callbacks to an event sink."""

    def __init__(self, sink: EventSink):
        super().__init__()
        self.sink = sink
        self._text: list[str] = []
        self._cdata: list[str] | None = None

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        self._flush_text()
        attributes = dict(attrs.items())
        for key, value in attributes.items():
            self.sink.attribute(key, value)
        self.sink.open_tag(name, attributes)

    def endElement(self, name: str) -> None:
        self._flush_text()
        self.sink.close_tag(name)

    def characters(self, content: str) -> None:
        if self._cdata is not None:
            self._cdata.append(content)
        else:
            self._text.append(content)

    def startCDATA(self) -> None:
        self._flush_text()
        self._cdata = []

    def endCDATA(self) -> None:
        content = "".join(self._cdata or [])
        self._cdata = None
        self.sink.cdata(content)

    def endDocument(self) -> None:
        self._flush_text()

    def _flush_text(self) -> None:
        if not self._text:
            return
        content = "".join(self._text)
        self._text = []
        # Whitespace between elements is not content
        if content.strip():
            self.sink.text(content)


def tokenize(content: str, sink: EventSink) -> None:
    """
    Feed the events of an XML document to ``sink``.

    Syntax errors are reported through ``sink.error`` rather than raised.

    Args:
        content: Complete XML document.
        sink: Receiver of the events.
    """
    adapter = _EventAdapter(sink)
    reader = xml.sax.make_parser()
    reader.setFeature(xml.sax.handler.feature_namespaces, False)
    reader.setFeature(xml.sax.handler.feature_external_ges, False)
    reader.setContentHandler(adapter)
    reader.setProperty(xml.sax.handler.property_lexical_handler, adapter)

    source = xml.sax.InputSource()
    source.setCharacterStream(io.StringIO(content))
    try:
        reader.parse(source)
    except xml.sax.SAXParseException as e:
        sink.error(str(e))


def parse_feed(content: str) -> Feed:
    """
    Parse an Atom or RSS 2.0 document.

    Args:
        content: Feed XML content.

    Returns:
        Parsed feed.

    Raises:
        InvalidDocument: If the root tag is neither feed nor rss.
        MalformedXml: If the document is not well-formed XML.
    """
    reader = FeedReader()
    tokenize(content, reader)
    feed = reader.close()
    logger.debug(
        "Parsed feed",
        extra={"dialect": reader.dialect.value, "entries": len(feed.entries)},
    )
    return feed
