"""Human-readable dumps of RADIUS packets."""

from __future__ import annotations

import io
import ipaddress
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TextIO

from radiuskit.attribute import user_password
from radiuskit.code import code_name
from radiuskit.dictionary.helpers import attribute_by_oid, values_by_attribute
from radiuskit.dictionary.model import (
    ENCRYPT_USER_PASSWORD,
    OID,
    Attribute,
    AttributeType,
    Dictionary,
)
from radiuskit.packet import Packet

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


@dataclass
class Config:
    """Settings for dumping packets."""

    dictionary: Dictionary


def _quote(data: bytes) -> str:
    out = ['"']
    for ch in bytes(data).decode("utf-8", errors="surrogateescape"):
        code = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif 0xDC80 <= code <= 0xDCFF:
            out.append(f"\\x{code - 0xDC00:02x}")
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x20 or code == 0x7F:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def _format_ip(value: bytes) -> str:
    if len(value) == 4:
        return str(ipaddress.IPv4Address(value))
    address = ipaddress.IPv6Address(value)
    mapped = address.ipv4_mapped
    return str(mapped) if mapped is not None else str(address)


def _format_value(
    attr: Attribute, value: bytes, packet: Packet, dictionary: Dictionary
) -> str:
    kind = attr.type
    if kind in (AttributeType.STRING, AttributeType.OCTETS):
        if attr.flag_encrypt == ENCRYPT_USER_PASSWORD:
            try:
                return _quote(
                    user_password(value, packet.secret, bytes(packet.authenticator))
                )
            except ValueError:
                pass
        return _quote(value)

    if kind is AttributeType.DATE and len(value) == 4:
        moment = datetime.fromtimestamp(int.from_bytes(value, "big"), tz=timezone.utc)
        return moment.strftime("%Y-%m-%dT%H:%M:%SZ")

    if kind is AttributeType.INTEGER:
        if len(value) == 4:
            number = int.from_bytes(value, "big")
            names = sorted(
                v.name
                for v in values_by_attribute(dictionary.values, attr.name)
                if v.number == number
            )
            return " / ".join(names) if names else str(number)
        if len(value) == 8:
            return str(int.from_bytes(value, "big", signed=True))

    if kind in (AttributeType.IPADDR, AttributeType.IPV6ADDR) and len(value) in (4, 16):
        return _format_ip(value)

    if kind is AttributeType.IFID and len(value) == 8:
        return ":".join(f"{octet:02x}" for octet in value)

    return ""


def _dump_attributes(w: TextIO, config: Config, packet: Packet) -> None:
    dictionary = config.dictionary
    for typ, values in sorted(packet.attributes.items()):
        for value in values:
            value = bytes(value)
            attr = attribute_by_oid(dictionary.attributes, OID([typ]))
            if attr is not None:
                name = attr.name
                text = _format_value(attr, value, packet, dictionary)
            else:
                name = f"#{typ}"
                text = ""
            if not text:
                text = "0x" + value.hex()
            w.write(f"  {name} = {text}\n")


def dump(w: TextIO, config: Config, packet: Packet) -> None:
    """Write a readable description of the packet, one attribute per line."""
    w.write(f"{code_name(packet.code)} Id {packet.identifier}\n")
    _dump_attributes(w, config, packet)


def dump_string(config: Config, packet: Packet) -> str:
    """Return the description written by dump, without the final newline."""
    buffer = io.StringIO()
    dump(buffer, config, packet)
    return buffer.getvalue()[:-1]