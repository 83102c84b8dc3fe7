"""Label grammar shared by every dot-separated segment of a domain name.

A label is 1-63 characters from ``[A-Za-z0-9-]`` that starts and ends with an
alphanumeric character.  Each label-like value type (subdomain, SLD, TLD)
validates against a :class:`LabelPolicy`; the policies differ in length bounds,
allowed characters and extra literals such as the ``*`` wildcard.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import ClassVar, Iterator, TypeVar

from domainaddr.errors import ParseError

logger = logging.getLogger(__name__)

# Alphanumeric, optionally followed by alphanumerics/hyphens, ending alphanumeric.
# Length is enforced by the policy, not the pattern.
_LABEL_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_ALPHA_RE = re.compile(r"[A-Za-z]+")

MAX_LABEL_LENGTH = 63
WILDCARD = "*"

_L = TypeVar("_L", bound="Label")


@dataclass(frozen=True)
class LabelPolicy:
    """Validation rules for one kind of label."""

    min_length: int = 1
    max_length: int = MAX_LABEL_LENGTH
    pattern: re.Pattern[str] = _LABEL_RE
    literals: frozenset[str] = frozenset()


DEFAULT_POLICY = LabelPolicy()
SUBDOMAIN_POLICY = LabelPolicy(literals=frozenset({WILDCARD}))
SLD_POLICY = DEFAULT_POLICY
TLD_POLICY = LabelPolicy(min_length=2, pattern=_ALPHA_RE)


def is_valid_label(text: object, policy: LabelPolicy = DEFAULT_POLICY) -> bool:
    """Return True if *text* is a legal label under *policy*.

    Never raises; anything that is not a ``str`` is simply invalid.
    """
    if not isinstance(text, str):
        return False
    if text in policy.literals:
        return True
    if not policy.min_length <= len(text) <= policy.max_length:
        return False
    return policy.pattern.fullmatch(text) is not None


@dataclass(frozen=True)
class Label:
    """Abstract base of the immutable, validated label types.

    Concrete label types set :attr:`policy`, :attr:`error` and :attr:`kind`;
    ``Label`` itself cannot be instantiated.
    Instances behave like a read-only character sequence and compare equal
    only to instances of the same type with identical (case-sensitive) text.
    """

    value: str

    policy: ClassVar[LabelPolicy] = DEFAULT_POLICY
    error: ClassVar[type[ParseError]] = ParseError
    kind: ClassVar[str] = "label"

    def __post_init__(self) -> None:
        if type(self) is Label:
            raise TypeError("Label is abstract; use Subdomain, SLD or TLD")
        if not is_valid_label(self.value, self.policy):
            logger.debug("Rejected %s: %r", self.kind, self.value)
            raise self.error(
                f"cannot parse {self.value!r} as a valid {self.kind}",
                value=self.value,
            )

    @classmethod
    def validate(cls, text: object) -> bool:
        """Return True if *text* can be turned into this label type."""
        return is_valid_label(text, cls.policy)

    @classmethod
    def create(cls: type[_L], text: str) -> _L:
        """Build a label from *text*, raising :attr:`error` if invalid."""
        return cls(text)

    parse = create

    def equals_ignore_case(self, other: object) -> bool:
        """Compare against a string or label, ignoring ASCII case."""
        if isinstance(other, Label):
            other = other.value
        if not isinstance(other, str):
            return False
        return self.value.lower() == other.lower()

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __getitem__(self, index: int | slice) -> str:
        return self.value[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.value)
