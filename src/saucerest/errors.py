class SauceRESTError(Exception):
    """Base class for errors raised by saucerest itself.

    Transport failures are not wrapped: httpx errors reach the caller as raised by httpx.
    """


class MissingResponseError(SauceRESTError):
    """The server returned a response without a body."""


class LogFormatError(SauceRESTError, ValueError):
    """A log asset was not a JSON array of entries."""
