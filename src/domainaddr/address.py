"""Abstract address contract."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domainaddr.port import Port


class Address(abc.ABC):
    """Something a client can connect to.

    Implementations must be immutable values.  :class:`~domainaddr.domain.Domain`
    is the only implementation shipped here; IP literals are out of scope.
    """

    @abc.abstractmethod
    def to_bytes(self) -> bytes:
        """Return the UTF-8 encoding of the canonical text form."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Return the short name of the address."""

    @abc.abstractmethod
    def to_string(self, port: Port) -> str:
        """Return the canonical text form followed by ``:port``."""

    @abc.abstractmethod
    def is_local(self) -> bool:
        """Return True if the address refers to the local machine."""

    def is_remote(self) -> bool:
        return not self.is_local()

    def to_url(self, secure: bool = False, port: Port | None = None) -> str:
        """Return an ``http(s)://`` URL for this address, ending in ``/``."""
        scheme = "https://" if secure else "http://"
        target = self.to_string(port) if port is not None else str(self)
        return f"{scheme}{target}/"
