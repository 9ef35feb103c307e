"""
Feed errors.

Every failure of the fetch and parse path is a ``FeederError``. It
subclasses ``ValueError`` so existing ``except ValueError`` handlers keep
working.
"""


class FeederError(ValueError):
    """Base error for fetching and parsing feeds."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidScheme(FeederError):
    """URL does not start with http or https."""


class TransportError(FeederError):
    """Network failure while fetching a feed."""


class InvalidDocument(FeederError):
    """Root tag is neither ``feed`` nor ``rss``."""


class MalformedXml(FeederError):
    """Tokenizer reported a syntax error."""
