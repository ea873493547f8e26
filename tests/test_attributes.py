import pytest

from radiuskit.attribute import NoAttributeError
from radiuskit.attributes import (
    TYPE_INVALID,
    AttributeParseError,
    Attributes,
    parse_attributes,
)


@pytest.mark.parametrize(
    "wire, message",
    [
        (b"\x01", "short buffer"),
        (b"\x01\xff", "invalid attribute length"),
        (b"\x01\x01", "invalid attribute length"),
    ],
)
def test_parse_attributes_invalid(wire, message):
    with pytest.raises(AttributeParseError, match=message):
        parse_attributes(wire)


def test_parse_attributes_max_length():
    typ = 0x10
    b = bytearray(255)
    b[0] = typ
    b[1] = 0xFF
    attrs = parse_attributes(bytes(b))
    assert len(attrs[typ]) == 1
    assert attrs[typ][0] == bytes(b[2:])


def test_attributes_all():
    a = Attributes()
    a.add(1, b"A")
    a.add(1, b"A.A")
    a.add(3, b"C")
    a.add(TYPE_INVALID, b"Invalid")

    assert a.get(1) == b"A"
    assert a.get(2) is None
    with pytest.raises(NoAttributeError):
        a.lookup(2)

    a.delete(1)

    assert a.wire_size() == 3
    assert a.encode() == b"\x03\x03C"


def test_attributes_encode_deterministic():
    def build():
        a = Attributes()
        a.add(83, b"C")
        a.add(1, b"A")
        a.add(1, b"A.A")
        a.add(3, b"C")
        return a.encode()

    base = build()
    assert all(build() == base for _ in range(200))
    assert base == b"\x01\x03A\x01\x05A.A\x03\x03C\x53\x03C"


def test_set_replaces_all_values():
    a = Attributes()
    a.add(5, b"one")
    a.add(5, b"two")
    a.set(5, b"three")
    assert a[5] == [b"three"]
    assert a.lookup(5) == b"three"


def test_delete_missing_type_leaves_mapping_unchanged():
    a = Attributes()
    a.add(4, b"x")
    a.delete(9)
    assert dict(a) == {4: [b"x"]}


def test_round_trip_through_wire():
    a = Attributes()
    a.add(1, b"user")
    a.add(4, b"\x0a\x00\x00\x01")
    a.add(1, b"")
    parsed = parse_attributes(a.encode())
    assert dict(parsed) == {1: [b"user", b""], 4: [b"\x0a\x00\x00\x01"]}
    assert parsed.wire_size() == len(a.encode())


def test_wire_size_rejects_oversized_value():
    a = Attributes()
    a.add(1, b"x" * 256)
    with pytest.raises(ValueError):
        a.wire_size()


def test_encode_skips_oversized_value():
    a = Attributes()
    a.add(1, b"x" * 256)
    a.add(2, b"y")
    assert a.encode() == b"\x02\x03y"