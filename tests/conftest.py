"""Shared test fixtures for domainaddr tests."""

from __future__ import annotations

import pytest

from domainaddr.domain import Domain, SLD, Subdomain, TLD
from domainaddr.port import Port


@pytest.fixture()
def example_domain() -> Domain:
    return Domain.parse("www.example.com")


@pytest.fixture()
def localhost_domain() -> Domain:
    return Domain.parse("localhost")


@pytest.fixture()
def port_8080() -> Port:
    return Port(8080)


@pytest.fixture()
def labels() -> tuple[Subdomain, SLD, TLD]:
    """Return the typed parts of ``api.example.com``."""
    return Subdomain("api"), SLD("example"), TLD("com")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep DOMAINADDR_* settings from the caller's shell out of tests."""
    for var in ("DOMAINADDR_LOG_LEVEL", "DOMAINADDR_DEBUG", "DOMAINADDR_JSON"):
        monkeypatch.delenv(var, raising=False)
