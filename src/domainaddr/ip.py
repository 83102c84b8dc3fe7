"""IPv4 and IPv6 address literals.

Octet and group parsing is delegated to :mod:`ipaddress`; these types add
the optional ``:port`` suffix (``[addr]:port`` for IPv6) and the
:class:`~domainaddr.address.Address` contract.
"""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass
from typing import Iterable

from domainaddr.address import Address
from domainaddr.errors import IPv4ParseError, IPv6ParseError
from domainaddr.port import Port

logger = logging.getLogger(__name__)

# RFC 1918 blocks only; loopback and link-local are reported separately.
_PRIVATE_V4 = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)

_MAX_V4 = 2**32 - 1
_MAX_V6 = 2**128 - 1


def _parse_ipv4(raw: object) -> ipaddress.IPv4Address:
    """Parse ``a.b.c.d[:port]``; the port is checked, then dropped.

    Raises:
        IPv4ParseError: With the reason the input was rejected.
    """

    def reject(reason: str) -> IPv4ParseError:
        logger.debug("Rejected IPv4 address %r: %s", raw, reason)
        return IPv4ParseError(
            f"cannot parse {raw!r} as a valid IPv4 address: {reason}", value=raw
        )

    if not isinstance(raw, str):
        raise reject("not a string")
    host, sep, port = raw.partition(":")
    if sep and not Port.validate(port):
        raise reject(f"invalid port {port!r}")
    try:
        return ipaddress.IPv4Address(host)
    except ValueError as exc:
        raise reject(str(exc)) from exc


def _parse_ipv6(raw: object) -> ipaddress.IPv6Address:
    """Parse ``addr`` or ``[addr][:port]``; the port is checked, then dropped.

    Raises:
        IPv6ParseError: With the reason the input was rejected.
    """

    def reject(reason: str) -> IPv6ParseError:
        logger.debug("Rejected IPv6 address %r: %s", raw, reason)
        return IPv6ParseError(
            f"cannot parse {raw!r} as a valid IPv6 address: {reason}", value=raw
        )

    if not isinstance(raw, str):
        raise reject("not a string")
    host = raw
    if raw.startswith("["):
        host, sep, rest = raw[1:].partition("]")
        if not sep:
            raise reject("missing closing ']'")
        if rest and (not rest.startswith(":") or not Port.validate(rest[1:])):
            raise reject(f"invalid port suffix {rest!r}")
    if "%" in host:
        raise reject("zone identifiers are not supported")
    try:
        return ipaddress.IPv6Address(host)
    except ValueError as exc:
        raise reject(str(exc)) from exc


@dataclass(frozen=True)
class IPv4Address(Address):
    """An immutable IPv4 address held as four octets."""

    octets: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "octets", tuple(self.octets))
        if len(self.octets) != 4 or not all(
            isinstance(o, int) and not isinstance(o, bool) and 0 <= o <= 255
            for o in self.octets
        ):
            raise IPv4ParseError(
                f"an IPv4 address needs four octets in 0-255, got {self.octets!r}",
                value=self.octets,
            )

    @staticmethod
    def validate(raw: object) -> bool:
        """Return True if *raw* is a valid ``a.b.c.d[:port]`` string.

        Leading zeros (``01.2.3.4``) are rejected.  Never raises.
        """
        try:
            _parse_ipv4(raw)
        except IPv4ParseError:
            return False
        return True

    @classmethod
    def parse(cls, raw: str) -> IPv4Address:
        """Parse ``a.b.c.d[:port]``.  The port is checked, then dropped.

        Raises:
            IPv4ParseError: If *raw* is not a valid IPv4 address.
        """
        return cls(tuple(_parse_ipv4(raw).packed))

    @classmethod
    def create(cls, octets: Iterable[int]) -> IPv4Address:
        return cls(tuple(octets))

    @classmethod
    def from_int(cls, value: int) -> IPv4Address:
        if not 0 <= value <= _MAX_V4:
            raise IPv4ParseError(f"{value} is not a 32-bit address", value=value)
        return cls(tuple(value.to_bytes(4, "big")))

    def to_int(self) -> int:
        return int.from_bytes(bytes(self.octets), "big")

    @property
    def _ip(self) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(bytes(self.octets))

    # ------------------------------------------------------------------
    # Address contract
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Dotted-decimal form, e.g. ``192.168.0.1``."""
        return ".".join(str(octet) for octet in self.octets)

    def to_bytes(self) -> bytes:
        return self.name.encode("utf-8")

    def to_string(self, port: Port) -> str:
        return f"{self.name}:{port}"

    def is_local(self) -> bool:
        """Return True for the 127.0.0.0/8 loopback block."""
        return self._ip.is_loopback

    # ------------------------------------------------------------------
    # Classification and subnets
    # ------------------------------------------------------------------

    def is_private(self) -> bool:
        return any(self._ip in network for network in _PRIVATE_V4)

    def is_multicast(self) -> bool:
        return self._ip.is_multicast

    def is_publicly_routable(self) -> bool:
        return not (self.is_private() or self.is_local() or self.is_multicast())

    def network_address(self, mask: IPv4Address) -> IPv4Address:
        """Apply the subnet *mask*, e.g. 255.255.255.0."""
        return IPv4Address(tuple(o & m for o, m in zip(self.octets, mask.octets)))

    def broadcast_address(self, mask: IPv4Address) -> IPv4Address:
        return IPv4Address(
            tuple(o | (~m & 0xFF) for o, m in zip(self.octets, mask.octets))
        )

    def is_broadcast(self, mask: IPv4Address) -> bool:
        return self == self.broadcast_address(mask)

    def is_within_range(self, start: IPv4Address, end: IPv4Address) -> bool:
        """Return True if ``start <= self <= end`` numerically."""
        return start.to_int() <= self.to_int() <= end.to_int()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IPv6Address(Address):
    """An immutable IPv6 address held as eight 16-bit groups."""

    groups: tuple[int, int, int, int, int, int, int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))
        if len(self.groups) != 8 or not all(
            isinstance(g, int) and not isinstance(g, bool) and 0 <= g <= 0xFFFF
            for g in self.groups
        ):
            raise IPv6ParseError(
                f"an IPv6 address needs eight groups in 0-ffff, got {self.groups!r}",
                value=self.groups,
            )

    @staticmethod
    def validate(raw: object) -> bool:
        """Return True if *raw* is ``addr`` or ``[addr][:port]``.  Never raises."""
        try:
            _parse_ipv6(raw)
        except IPv6ParseError:
            return False
        return True

    @classmethod
    def parse(cls, raw: str) -> IPv6Address:
        """Parse ``addr`` or ``[addr][:port]``.  The port is checked, then dropped.

        Raises:
            IPv6ParseError: If *raw* is not a valid IPv6 address.
        """
        return cls.from_int(int(_parse_ipv6(raw)))

    @classmethod
    def create(cls, groups: Iterable[int]) -> IPv6Address:
        return cls(tuple(groups))

    @classmethod
    def from_int(cls, value: int) -> IPv6Address:
        if not 0 <= value <= _MAX_V6:
            raise IPv6ParseError(f"{value} is not a 128-bit address", value=value)
        return cls(tuple((value >> (112 - 16 * i)) & 0xFFFF for i in range(8)))

    def to_int(self) -> int:
        value = 0
        for group in self.groups:
            value = (value << 16) | group
        return value

    @property
    def _ip(self) -> ipaddress.IPv6Address:
        return ipaddress.IPv6Address(self.to_int())

    # ------------------------------------------------------------------
    # Address contract
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Compressed form, e.g. ``2001:db8::1``."""
        return self._ip.compressed

    @property
    def raw_name(self) -> str:
        """Fully expanded form with four hex digits per group."""
        return self._ip.exploded

    def to_bytes(self) -> bytes:
        return self.name.encode("utf-8")

    def to_string(self, port: Port) -> str:
        return f"[{self.name}]:{port}"

    def to_url(self, secure: bool = False, port: Port | None = None) -> str:
        scheme = "https://" if secure else "http://"
        target = self.to_string(port) if port is not None else f"[{self.name}]"
        return f"{scheme}{target}/"

    def is_local(self) -> bool:
        """Return True for the ``::1`` loopback address."""
        return self._ip.is_loopback

    # ------------------------------------------------------------------
    # Subnets
    # ------------------------------------------------------------------

    def network_address(self, mask: IPv6Address) -> IPv6Address:
        return IPv6Address(tuple(g & m for g, m in zip(self.groups, mask.groups)))

    def broadcast_address(self, mask: IPv6Address) -> IPv6Address:
        return IPv6Address(
            tuple(g | (~m & 0xFFFF) for g, m in zip(self.groups, mask.groups))
        )

    def is_within_range(self, start: IPv6Address, end: IPv6Address) -> bool:
        return start.to_int() <= self.to_int() <= end.to_int()

    def __str__(self) -> str:
        return self.name
