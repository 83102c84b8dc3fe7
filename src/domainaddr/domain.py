"""Domain name parsing, validation and composition.

A domain has the form ``[subdomain.]*sld[.tld][:port]``, e.g.
``www.example.com:8080``.  The TLD is absent only for ``localhost`` names
such as ``api.localhost``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable

from domainaddr.address import Address
from domainaddr.errors import (
    DomainParseError,
    InvalidDomainError,
    SLDParseError,
    SubdomainParseError,
    TLDParseError,
)
from domainaddr.label import (
    SLD_POLICY,
    SUBDOMAIN_POLICY,
    TLD_POLICY,
    WILDCARD,
    Label,
)
from domainaddr.port import Port

logger = logging.getLogger(__name__)

LOCALHOST = "localhost"


class Subdomain(Label):
    """A label to the left of the SLD, or the ``*`` wildcard."""

    policy = SUBDOMAIN_POLICY
    error = SubdomainParseError
    kind = "subdomain"

    WWW: ClassVar[Subdomain]

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD


Subdomain.WWW = Subdomain("www")


class SLD(Label):
    """The second-level name, e.g. ``example`` in ``example.com``."""

    policy = SLD_POLICY
    error = SLDParseError
    kind = "SLD"


class TLD(Label):
    """The top-level name, e.g. ``com``.  Letters only."""

    policy = TLD_POLICY
    error = TLDParseError
    kind = "TLD"


@dataclass(frozen=True)
class _Parts:
    """Raw labels extracted from a domain string, already validated."""

    subdomains: tuple[str, ...]
    sld: str
    tld: str | None
    port: str | None


def _classify(raw: object) -> _Parts:
    """Split *raw* into its labels and check every one of them.

    Shared by :meth:`Domain.validate` and :meth:`Domain.parse`.

    Raises:
        DomainParseError: With the reason the input was rejected.
    """

    def reject(reason: str) -> DomainParseError:
        logger.debug("Rejected domain %r: %s", raw, reason)
        return DomainParseError(
            f"cannot parse {raw!r} as a valid domain: {reason}", value=raw
        )

    if not isinstance(raw, str):
        raise reject("not a string")

    segments = raw.split(":")
    if len(segments) > 2:
        raise reject("too many ':' separators")
    host = segments[0]
    port = segments[1] if len(segments) == 2 else None
    if port is not None and not Port.validate(port):
        raise reject(f"invalid port {port!r}")

    # A single trailing dot marks a fully-qualified name; it is not a label.
    if host.endswith(".") and host != ".":
        host = host[:-1]
    if not host:
        raise reject("empty host")
    labels = host.split(".")

    if labels[-1].lower() == LOCALHOST:
        sld, tld = labels[-1], None
        subdomains = labels[:-1]
    else:
        if len(labels) < 2:
            raise reject("missing top-level domain")
        if not TLD.validate(labels[-1]):
            raise reject(f"invalid TLD {labels[-1]!r}")
        if not SLD.validate(labels[-2]):
            raise reject(f"invalid SLD {labels[-2]!r}")
        sld, tld = labels[-2], labels[-1]
        subdomains = labels[:-2]

    for label in subdomains:
        if not Subdomain.validate(label):
            raise reject(f"invalid subdomain {label!r}")
    if WILDCARD in subdomains and len(subdomains) > 1:
        raise reject("a wildcard subdomain cannot be combined with others")

    return _Parts(subdomains=tuple(subdomains), sld=sld, tld=tld, port=port)


@dataclass(frozen=True)
class Domain(Address):
    """An immutable domain name.

    Equality and hashing are structural and case-sensitive: the subdomain
    sequence is compared element by element, in order.
    """

    subdomains: tuple[Subdomain, ...]
    sld: SLD
    tld: TLD | None = None

    def __post_init__(self) -> None:
        # Copy so a caller's list can't be mutated behind our back.
        object.__setattr__(self, "subdomains", tuple(self.subdomains))

        for subdomain in self.subdomains:
            if not isinstance(subdomain, Subdomain):
                raise TypeError(f"expected Subdomain, got {type(subdomain).__name__}")
        if not isinstance(self.sld, SLD):
            raise TypeError(f"expected SLD, got {type(self.sld).__name__}")
        if self.tld is not None and not isinstance(self.tld, TLD):
            raise TypeError(f"expected TLD or None, got {type(self.tld).__name__}")

        if self.tld is None and not self.sld.equals_ignore_case(LOCALHOST):
            raise InvalidDomainError(
                f"only {LOCALHOST!r} may omit the TLD, got SLD {str(self.sld)!r}"
            )
        # "x.localhost" always reads back as a localhost name, never as a TLD.
        if self.tld is not None and self.tld.equals_ignore_case(LOCALHOST):
            raise InvalidDomainError(f"{LOCALHOST!r} cannot be used as a TLD")
        if len(self.subdomains) > 1 and any(s.is_wildcard for s in self.subdomains):
            raise InvalidDomainError(
                "a wildcard subdomain cannot be combined with other subdomains"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def validate(raw: object) -> bool:
        """Return True if *raw* is a valid ``domain[:port]`` string.

        Never raises.
        """
        try:
            _classify(raw)
        except DomainParseError:
            return False
        return True

    @classmethod
    def parse(cls, raw: str) -> Domain:
        """Parse a ``domain[:port]`` string.  The port is checked, then dropped.

        Raises:
            DomainParseError: If *raw* is not a valid domain.
        """
        parts = _classify(raw)
        return cls(
            subdomains=tuple(Subdomain(label) for label in parts.subdomains),
            sld=SLD(parts.sld),
            tld=TLD(parts.tld) if parts.tld is not None else None,
        )

    @classmethod
    def create(
        cls,
        subdomains: Iterable[Subdomain],
        sld: SLD,
        tld: TLD | None = None,
    ) -> Domain:
        """Compose a domain from already-validated parts.

        Raises:
            InvalidDomainError: If the wildcard is combined with other
                subdomains, the TLD is missing on a non-localhost name,
                or the TLD is ``localhost``.
            TypeError: If a part is not of the expected label type.
        """
        return cls(subdomains=tuple(subdomains), sld=sld, tld=tld)

    # ------------------------------------------------------------------
    # Address contract
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """``sld[.tld]``, without subdomains."""
        if self.tld is None:
            return str(self.sld)
        return f"{self.sld}.{self.tld}"

    def is_localhost(self) -> bool:
        """Return True for ``localhost`` names, which carry no TLD."""
        return self.tld is None and self.sld.equals_ignore_case(LOCALHOST)

    def is_local(self) -> bool:
        """Same as :meth:`is_localhost`; domains have no other local form."""
        return self.is_localhost()

    def has_wildcard(self) -> bool:
        """Return True if the only subdomain is the ``*`` wildcard."""
        return any(s.is_wildcard for s in self.subdomains)

    def to_bytes(self) -> bytes:
        """UTF-8 encoding of the canonical text form."""
        return str(self).encode("utf-8")

    def to_string(self, port: Port) -> str:
        """Canonical text form followed by ``:port``."""
        return f"{self}:{port}"

    def __str__(self) -> str:
        prefix = "".join(f"{subdomain}." for subdomain in self.subdomains)
        return prefix + self.name
