"""Errors raised by the client.

Transport failures (DNS, TLS, connection resets, timeouts) are not wrapped:
they surface as the ``requests`` exceptions they are.
"""

from __future__ import annotations


class EsendexError(RuntimeError):
    """Base class for errors raised by this package."""


class ClientError(EsendexError):
    """The API answered with a status code the call did not expect."""

    def __init__(self, method: str, path: str, code: int) -> None:
        self.method = method
        self.path = path
        self.code = code
        super().__init__(f"{method} {path}: {code}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClientError):
            return NotImplemented
        return (self.method, self.path, self.code) == (other.method, other.path, other.code)

    def __hash__(self) -> int:
        return hash((self.method, self.path, self.code))

    def __reduce__(self):
        return (type(self), (self.method, self.path, self.code))


class DecodeError(EsendexError, ValueError):
    """A response body was not the XML document we expected."""


class InvalidURLError(EsendexError, ValueError):
    """A request URL could not be built from the base URL and path."""
