"""Error taxonomy for the link forwarder."""


class LinkForwarderError(Exception):
    """Base class for link forwarder errors."""


class ValidationError(LinkForwarderError, ValueError):
    """A required field is missing or empty."""


class NotFoundError(LinkForwarderError, LookupError):
    """The shortcode has no stored link."""

    def __init__(self, shortcode: str):
        super().__init__("shortcode not found")
        self.shortcode = shortcode


class StoreError(LinkForwarderError):
    """The persistent store failed (I/O, constraint, lost connection)."""
