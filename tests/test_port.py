"""Tests for domainaddr.port module."""

from __future__ import annotations

import pytest

from domainaddr.errors import PortParseError
from domainaddr.port import Port, PortType


class TestValidate:
    @pytest.mark.parametrize("text", ["0", "80", "8080", "65535", "00080"])
    def test_valid(self, text):
        assert Port.validate(text)

    @pytest.mark.parametrize(
        "text", ["", "65536", "99999", "123456", "-1", "+80", " 80", "8_0", "abc", "8a"]
    )
    def test_invalid(self, text):
        assert not Port.validate(text)

    def test_non_string(self):
        assert not Port.validate(80)
        assert not Port.validate(None)


class TestParse:
    def test_parse(self):
        port = Port.parse("8080")
        assert port.number == 8080
        assert int(port) == 8080
        assert str(port) == "8080"

    def test_parse_out_of_range(self):
        with pytest.raises(PortParseError, match="99999"):
            Port.parse("99999")

    def test_parse_non_numeric(self):
        with pytest.raises(PortParseError) as info:
            Port.parse("abc")
        assert info.value.value == "abc"

    def test_create(self):
        assert Port.create(443) == Port(443)

    @pytest.mark.parametrize("number", [-1, 65536])
    def test_create_out_of_range(self, number):
        with pytest.raises(PortParseError):
            Port.create(number)

    @pytest.mark.parametrize("number", ["80", 80.0, True])
    def test_create_rejects_non_int(self, number):
        with pytest.raises(PortParseError):
            Port(number)  # type: ignore[arg-type]


class TestClassification:
    def test_well_known(self):
        assert Port(0).port_type is PortType.WELL_KNOWN
        assert Port(1023).is_well_known()

    def test_registered(self):
        assert Port(1024).port_type is PortType.REGISTERED
        assert Port(49151).is_registered()

    def test_dynamic_private(self):
        assert Port(49152).port_type is PortType.DYNAMIC_PRIVATE
        assert Port(65535).is_dynamic_private()

    def test_in_range(self):
        assert Port(8080).is_in_range(8000, 9000)
        assert not Port(8080).is_in_range(0, 1023)

    def test_port_type_equals_string(self):
        assert PortType.WELL_KNOWN == "well-known"


class TestValueSemantics:
    def test_ordering(self):
        assert sorted([Port(443), Port(80), Port(8080)]) == [Port(80), Port(443), Port(8080)]

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Port(80).number = 81  # type: ignore[misc]

    def test_hashable(self):
        assert len({Port(80), Port(80), Port(443)}) == 2
