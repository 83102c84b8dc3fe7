"""TCP/UDP port numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from domainaddr.errors import PortParseError

MIN_PORT = 0
MAX_PORT = 65535

_PORT_RE = re.compile(r"[0-9]{1,5}")


class PortType(str, Enum):
    """IANA port ranges.

    Using ``str, Enum`` so that ``PortType.WELL_KNOWN == "well-known"`` is True.
    """

    WELL_KNOWN = "well-known"
    REGISTERED = "registered"
    DYNAMIC_PRIVATE = "dynamic-private"


@dataclass(frozen=True, order=True)
class Port:
    """A port number between 0 and 65535 inclusive."""

    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise PortParseError(
                f"port must be an integer, got {self.number!r}", value=self.number
            )
        if not MIN_PORT <= self.number <= MAX_PORT:
            raise PortParseError(
                f"port number {self.number} is out of range "
                f"({MIN_PORT}-{MAX_PORT})",
                value=self.number,
            )

    @staticmethod
    def validate(text: object) -> bool:
        """Return True if *text* is a decimal port string in range.

        Only ASCII digits are accepted; signs, whitespace and underscores
        that :func:`int` would tolerate are rejected.
        """
        if not isinstance(text, str) or not _PORT_RE.fullmatch(text):
            return False
        return MIN_PORT <= int(text) <= MAX_PORT

    @classmethod
    def parse(cls, text: str) -> Port:
        """Parse a decimal port string.

        Raises:
            PortParseError: If *text* is not a valid port.
        """
        if not cls.validate(text):
            raise PortParseError(f"cannot parse {text!r} as a valid port", value=text)
        return cls(int(text))

    @classmethod
    def create(cls, number: int) -> Port:
        return cls(number)

    def is_well_known(self) -> bool:
        return self.is_in_range(0, 1023)

    def is_registered(self) -> bool:
        return self.is_in_range(1024, 49151)

    def is_dynamic_private(self) -> bool:
        return self.is_in_range(49152, 65535)

    def is_in_range(self, low: int, high: int) -> bool:
        """Return True if ``low <= number <= high``."""
        return low <= self.number <= high

    @property
    def port_type(self) -> PortType:
        if self.is_well_known():
            return PortType.WELL_KNOWN
        if self.is_registered():
            return PortType.REGISTERED
        return PortType.DYNAMIC_PRIVATE

    def __int__(self) -> int:
        return self.number

    def __index__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return str(self.number)
