"""An address paired with an optional port.

Accepted forms::

    example.com          example.com:8080
    192.168.0.1          192.168.0.1:8080
    ::1                  [::1]:8080
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from domainaddr.address import Address
from domainaddr.domain import Domain
from domainaddr.errors import AddressParseError, HostParseError
from domainaddr.ip import IPv4Address, IPv6Address
from domainaddr.port import Port

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


def address_type(
    raw: object,
) -> type[Domain] | type[IPv4Address] | type[IPv6Address] | None:
    """Return the address class that accepts *raw*, or None.

    Brackets or more than one ``:`` mean IPv6; otherwise IPv4 is tried before
    a domain name.  The two never overlap since a TLD cannot be numeric.
    """
    if not isinstance(raw, str) or not raw:
        return None
    if raw.startswith("[") or raw.count(":") > 1:
        return IPv6Address if IPv6Address.validate(raw) else None
    if IPv4Address.validate(raw):
        return IPv4Address
    if Domain.validate(raw):
        return Domain
    return None


def parse_address(raw: str) -> Address:
    """Parse *raw* as whichever address type accepts it, dropping any port.

    Raises:
        AddressParseError: If no address type accepts *raw*.
    """
    kind = address_type(raw)
    if kind is None:
        raise AddressParseError(f"cannot parse {raw!r} as a valid address", value=raw)
    return kind.parse(raw)


def _port_text(raw: str, kind: type[Address]) -> str | None:
    if kind is IPv6Address:
        if raw.startswith("[") and "]:" in raw:
            return raw.rsplit("]:", 1)[1]
        return None
    _, sep, port = raw.partition(":")
    return port if sep else None


@dataclass(frozen=True)
class Host:
    """An immutable ``address[:port]`` pair."""

    address: Address
    port: Port | None = None

    @staticmethod
    def validate(raw: object) -> bool:
        """Return True if *raw* is a valid ``address[:port]`` string."""
        return address_type(raw) is not None

    @classmethod
    def parse(cls, raw: str) -> Host:
        """Parse an ``address[:port]`` string, keeping the port.

        Raises:
            HostParseError: If *raw* is not a valid host.
        """
        try:
            address = parse_address(raw)
        except AddressParseError as exc:
            raise HostParseError(
                f"cannot parse {raw!r} as a valid host", value=raw
            ) from exc
        port = _port_text(raw, type(address))
        return cls(address=address, port=Port.parse(port) if port is not None else None)

    @classmethod
    def from_url(cls, url: str) -> Host:
        """Parse the host part of an ``http(s)://host[:port]/path`` URL.

        The scheme is optional; the path, query and fragment are ignored.

        Raises:
            HostParseError: If the URL does not contain a valid host.
        """
        rest = url
        for scheme in _URL_SCHEMES:
            if url[: len(scheme)].lower() == scheme:
                rest = url[len(scheme):]
                break
        for stop in "/?#":
            rest = rest.split(stop, 1)[0]
        logger.debug("Extracted host %r from URL %r", rest, url)
        return cls.parse(rest)

    @classmethod
    def create(cls, address: Address, port: Port | None = None) -> Host:
        return cls(address=address, port=port)

    def with_port(self, port: Port | None) -> Host:
        """Return a copy of this host with *port* replacing the current one."""
        return replace(self, port=port)

    def to_url(self, secure: bool = False) -> str:
        return self.address.to_url(secure, self.port)

    def __str__(self) -> str:
        if self.port is None:
            return str(self.address)
        return self.address.to_string(self.port)
