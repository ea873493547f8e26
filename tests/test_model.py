import pytest

from radiuskit.dictionary.model import (
    OID,
    Attribute,
    AttributeType,
    Dictionary,
    Vendor,
)


@pytest.mark.parametrize(
    "member, expected",
    [
        (AttributeType.IPV6PREFIX, "ipv6prefix"),
        (AttributeType.INTEGER64, "integer64"),
        (AttributeType.STRING, "string"),
    ],
)
def test_attribute_type_str(member, expected):
    looked_up = AttributeType(member.value)
    assert looked_up is member
    assert str(looked_up) == expected


def test_oid_str():
    assert str(OID([123, 1, 55])) == "123.1.55"
    assert str(OID([])) == ""


def test_oid_equality():
    assert OID([1, 2]) == OID((1, 2))
    assert not OID([1, 2]) == OID([1])


def test_attribute_coerces_oid():
    attr = Attribute("Mode", [127], AttributeType.INTEGER)
    assert isinstance(attr.oid, OID) and attr.oid == (127,)


def test_has_tag():
    assert Attribute("A", OID([1]), AttributeType.STRING, flag_has_tag=True).has_tag() is True
    assert Attribute("A", OID([1]), AttributeType.STRING).has_tag() is False


def test_attribute_equality():
    a = Attribute("User-Password", OID([2]), AttributeType.OCTETS, flag_encrypt=1)
    b = Attribute("User-Password", OID([2]), AttributeType.OCTETS, flag_encrypt=1)
    c = Attribute("User-Password", OID([2]), AttributeType.OCTETS)
    assert a == b
    assert not a == c


def test_vendor_octets_defaults():
    vendor = Vendor("Test", 32473)
    assert vendor.effective_type_octets() == 1
    assert vendor.effective_length_octets() == 1


def test_vendor_octets_declared():
    vendor = Vendor("Test", 32473, type_octets=4, length_octets=0)
    assert vendor.effective_type_octets() == 4
    assert vendor.effective_length_octets() == 0


def test_dictionary_lists_are_independent():
    d1 = Dictionary()
    d2 = Dictionary()
    d1.attributes.append(Attribute("A", OID([1]), AttributeType.STRING))
    assert d2.attributes == []
    assert len(d1.attributes) == 1