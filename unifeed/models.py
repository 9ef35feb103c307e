"""
Unified feed models.

Atom and RSS 2.0 documents are both normalized into these models.
Scalar fields stay ``None`` until the document sets them; list fields
are always present and keep document order.
"""

from pydantic import BaseModel, Field


class Link(BaseModel):
    """A link owned by a feed or an entry."""

    rel: str | None = None  # Atom only
    href: str | None = None


class Author(BaseModel):
    """A person construct owned by a feed or an entry."""

    name: str | None = None
    email: str | None = None
    uri: str | None = None


class Source(BaseModel):
    """The feed an entry was copied from."""

    id: str | None = None
    title: str | None = None
    updated: str | None = None


class Entry(BaseModel):
    """A single entry (Atom) or item (RSS) of a feed."""

    id: str | None = None
    title: str | None = None
    link: list[Link] = Field(default_factory=list)
    updated: str | None = None
    author: list[Author] = Field(default_factory=list)
    # May hold HTML delivered through a CDATA section
    content: str | None = None
    summary: str | None = None
    category: list[str] = Field(default_factory=list)
    contributor: list[str] = Field(default_factory=list)
    published: str | None = None
    rights: str | None = None
    source: Source | None = None


class Feed(BaseModel):
    """Root of a parsed document."""

    title: str | None = None
    subtitle: str | None = None
    link: list[Link] = Field(default_factory=list)
    updated: str | None = None
    id: str | None = None
    entries: list[Entry] = Field(default_factory=list)
    author: list[Author] = Field(default_factory=list)
    category: list[str] = Field(default_factory=list)
    contributor: str | None = None
    generator: str | None = None
    icon: str | None = None
    logo: str | None = None
    rights: str | None = None
