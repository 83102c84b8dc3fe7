"""domainaddr -- structured domain names, IP addresses, hosts and e-mail addresses.

Public API re-exports::

    from domainaddr import Domain, Host, Port
    Domain.parse("www.example.com")
"""

__version__ = "0.1.0"

from domainaddr.errors import (
    AddressError,
    ParseError,
    SubdomainParseError,
    SLDParseError,
    TLDParseError,
    DomainParseError,
    PortParseError,
    IPv4ParseError,
    IPv6ParseError,
    AddressParseError,
    HostParseError,
    EmailParseError,
    InvalidDomainError,
)

from domainaddr.label import (
    DEFAULT_POLICY,
    SUBDOMAIN_POLICY,
    SLD_POLICY,
    TLD_POLICY,
    WILDCARD,
    Label,
    LabelPolicy,
    is_valid_label,
)

from domainaddr.port import Port, PortType
from domainaddr.address import Address
from domainaddr.domain import LOCALHOST, Domain, SLD, Subdomain, TLD
from domainaddr.ip import IPv4Address, IPv6Address
from domainaddr.host import Host, address_type, parse_address
from domainaddr.email import Email

__all__ = [
    "__version__",
    # Errors
    "AddressError",
    "ParseError",
    "SubdomainParseError",
    "SLDParseError",
    "TLDParseError",
    "DomainParseError",
    "PortParseError",
    "IPv4ParseError",
    "IPv6ParseError",
    "AddressParseError",
    "HostParseError",
    "EmailParseError",
    "InvalidDomainError",
    # Labels
    "DEFAULT_POLICY",
    "SUBDOMAIN_POLICY",
    "SLD_POLICY",
    "TLD_POLICY",
    "WILDCARD",
    "Label",
    "LabelPolicy",
    "is_valid_label",
    # Port
    "Port",
    "PortType",
    # Address
    "Address",
    "LOCALHOST",
    "Domain",
    "Subdomain",
    "SLD",
    "TLD",
    "IPv4Address",
    "IPv6Address",
    # Host and e-mail
    "Host",
    "address_type",
    "parse_address",
    "Email",
]
