"""Tests for domainaddr.address module."""

from __future__ import annotations

import pytest

from domainaddr.address import Address
from domainaddr.domain import Domain
from domainaddr.ip import IPv4Address, IPv6Address
from domainaddr.port import Port


class TestContract:
    def test_domain_is_address(self, example_domain):
        assert isinstance(example_domain, Address)

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Address()  # type: ignore[abstract]

    def test_local_and_remote(self, example_domain, localhost_domain):
        assert localhost_domain.is_local()
        assert not localhost_domain.is_remote()
        assert example_domain.is_remote()
        assert not example_domain.is_local()


class TestUrl:
    def test_http(self, example_domain):
        assert example_domain.to_url() == "http://www.example.com/"

    def test_https(self, example_domain):
        assert example_domain.to_url(secure=True) == "https://www.example.com/"

    def test_with_port(self, localhost_domain):
        assert localhost_domain.to_url(port=Port(8000)) == "http://localhost:8000/"

    def test_https_with_port(self):
        domain = Domain.parse("api.example.com")
        assert domain.to_url(True, Port(8443)) == "https://api.example.com:8443/"

    def test_ipv6_is_bracketed(self):
        ip = IPv6Address.parse("::1")
        assert ip.to_url() == "http://[::1]/"
        assert ip.to_url(port=Port(8080)) == "http://[::1]:8080/"

    def test_ipv4_uses_default(self):
        assert IPv4Address.parse("10.0.0.1").to_url(True) == "https://10.0.0.1/"
