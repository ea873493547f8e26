"""Data model of a parsed RADIUS dictionary."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable

ENCRYPT_USER_PASSWORD = 1
ENCRYPT_TUNNEL_PASSWORD = 2
ENCRYPT_ASCEND_PROPRIETARY_PASSWORD = 3


class AttributeType(enum.IntEnum):
    """Value types an attribute can be declared with."""

    STRING = 1
    OCTETS = 2
    IPADDR = 3
    DATE = 4
    INTEGER = 5
    IPV6ADDR = 6
    IPV6PREFIX = 7
    IFID = 8
    INTEGER64 = 9
    VSA = 10
    ETHER = 11
    ABINARY = 12
    BYTE = 13
    SHORT = 14
    SIGNED = 15
    TLV = 16
    IPV4PREFIX = 17

    def __str__(self) -> str:
        return self.name.lower()


class OID(tuple):
    """A dotted attribute identifier such as 26.9.1."""

    def __new__(cls, parts: Iterable[int] = ()) -> "OID":
        return super().__new__(cls, (int(part) for part in parts))

    def __str__(self) -> str:
        return ".".join(str(part) for part in self)

    def __repr__(self) -> str:
        return f"OID({list(self)!r})"


@dataclass
class Attribute:
    """An ATTRIBUTE definition."""

    name: str
    oid: OID
    type: AttributeType
    size: int | None = None
    flag_encrypt: int | None = None
    flag_has_tag: bool | None = None
    flag_concat: bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.oid, OID):
            self.oid = OID(self.oid)

    def has_tag(self) -> bool:
        """Return whether the attribute carries a tag."""
        return self.flag_has_tag is True


@dataclass
class Value:
    """A VALUE definition naming one number of an attribute."""

    attribute: str
    name: str
    number: int


@dataclass
class Vendor:
    """A VENDOR definition with the attributes and values declared for it."""

    name: str
    number: int
    type_octets: int | None = None
    length_octets: int | None = None
    attributes: list[Attribute] = field(default_factory=list)
    values: list[Value] = field(default_factory=list)

    def effective_type_octets(self) -> int:
        """Width of the vendor attribute type field; 1 when not declared."""
        return 1 if self.type_octets is None else self.type_octets

    def effective_length_octets(self) -> int:
        """Width of the vendor attribute length field; 1 when not declared."""
        return 1 if self.length_octets is None else self.length_octets


@dataclass
class Dictionary:
    """All attributes, values and vendors of one or more dictionary files."""

    attributes: list[Attribute] = field(default_factory=list)
    values: list[Value] = field(default_factory=list)
    vendors: list[Vendor] = field(default_factory=list)