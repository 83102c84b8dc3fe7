"""E-mail addresses of the form ``local@domain``.

The local part is the common unquoted subset (``[A-Za-z0-9._%+-]``, at most
64 characters); the domain must be a full ``sld.tld`` name with no port,
wildcard or ``localhost``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator

from domainaddr.domain import Domain
from domainaddr.errors import DomainParseError, EmailParseError

logger = logging.getLogger(__name__)

_LOCAL_PART_RE = re.compile(r"[A-Za-z0-9._%+-]{1,64}")

MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """An immutable e-mail address; behaves like a read-only string."""

    local_part: str
    domain: Domain

    def __post_init__(self) -> None:
        if not isinstance(self.domain, Domain):
            raise TypeError(f"expected Domain, got {type(self.domain).__name__}")
        if not isinstance(self.local_part, str) or not _LOCAL_PART_RE.fullmatch(
            self.local_part
        ):
            raise EmailParseError(
                f"invalid e-mail local part {self.local_part!r}", value=self.local_part
            )
        if self.domain.tld is None or self.domain.has_wildcard():
            raise EmailParseError(
                f"{str(self.domain)!r} cannot receive e-mail", value=str(self.domain)
            )
        if len(str(self)) > MAX_EMAIL_LENGTH:
            raise EmailParseError(
                f"e-mail address exceeds {MAX_EMAIL_LENGTH} characters", value=str(self)
            )

    @classmethod
    def validate(cls, raw: object) -> bool:
        """Return True if *raw* is a valid ``local@domain`` string.  Never raises."""
        try:
            cls.parse(raw)  # type: ignore[arg-type]
        except EmailParseError:
            return False
        return True

    @classmethod
    def parse(cls, raw: str) -> Email:
        """Parse a ``local@domain`` string.

        Raises:
            EmailParseError: If *raw* is not a valid e-mail address.
        """
        if not isinstance(raw, str):
            raise EmailParseError(f"cannot parse {raw!r} as an e-mail address", value=raw)
        if len(raw) > MAX_EMAIL_LENGTH:
            raise EmailParseError(
                f"e-mail address exceeds {MAX_EMAIL_LENGTH} characters", value=raw
            )
        local_part, sep, host = raw.partition("@")
        if not sep or "@" in host:
            raise EmailParseError(f"{raw!r} needs exactly one '@'", value=raw)
        if ":" in host:
            raise EmailParseError(f"{raw!r} cannot carry a port", value=raw)
        try:
            domain = Domain.parse(host)
        except DomainParseError as exc:
            logger.debug("Rejected e-mail %r: %s", raw, exc)
            raise EmailParseError(
                f"cannot parse {raw!r} as an e-mail address", value=raw
            ) from exc
        return cls(local_part=local_part, domain=domain)

    @classmethod
    def create(cls, local_part: str, domain: Domain) -> Email:
        return cls(local_part=local_part, domain=domain)

    def __str__(self) -> str:
        return f"{self.local_part}@{self.domain}"

    def __len__(self) -> int:
        return len(str(self))

    def __getitem__(self, index: int | slice) -> str:
        return str(self)[index]

    def __iter__(self) -> Iterator[str]:
        return iter(str(self))
