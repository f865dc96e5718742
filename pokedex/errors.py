"""Exceptions raised by the fetch, record and command layers."""

from typing import Optional


class PokedexError(Exception):
    """Base class for errors that are reported to the user."""


class FetchError(PokedexError):
    """A request to the catalog service failed or returned a non-200 status."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(PokedexError):
    """A response body could not be decoded into the expected record."""


class CommandError(PokedexError):
    """A REPL command was used incorrectly or cannot proceed."""


class ExitRequested(Exception):
    """Raised by the ``exit`` command to end the REPL loop."""
