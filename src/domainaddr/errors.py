"""domainaddr exception hierarchy.

All library-specific exceptions inherit from :class:`AddressError`.
Parse errors and composition errors are also :class:`ValueError` so callers
that only care about "bad input" can catch the builtin.
"""

from __future__ import annotations


class AddressError(Exception):
    """Base exception for all domainaddr errors."""


class ParseError(AddressError, ValueError):
    """Raised when a string cannot be parsed into a value type.

    The rejected input is kept on :attr:`value`.
    """

    def __init__(self, message: str = "", value: object = None) -> None:
        super().__init__(message)
        self.value = value


class SubdomainParseError(ParseError):
    """Raised when a string is not a valid subdomain label."""


class SLDParseError(ParseError):
    """Raised when a string is not a valid second-level domain label."""


class TLDParseError(ParseError):
    """Raised when a string is not a valid top-level domain label."""


class DomainParseError(ParseError):
    """Raised when a string is not a valid domain name."""


class PortParseError(ParseError):
    """Raised when a string or number is not a valid port."""


class IPv4ParseError(ParseError):
    """Raised when a string or octet sequence is not a valid IPv4 address."""


class IPv6ParseError(ParseError):
    """Raised when a string or group sequence is not a valid IPv6 address."""


class AddressParseError(ParseError):
    """Raised when a string is not a domain, IPv4 or IPv6 address."""


class HostParseError(ParseError):
    """Raised when a string is not a valid ``address[:port]`` host."""


class EmailParseError(ParseError):
    """Raised when a string is not a valid ``local@domain`` e-mail address."""


class InvalidDomainError(AddressError, ValueError):
    """Raised when already-typed parts cannot be composed into a domain."""
