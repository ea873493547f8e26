"""Encoding and decoding of RADIUS attribute values."""

from __future__ import annotations

import hashlib
import ipaddress
import math
from datetime import datetime, timezone

_MAX_UINT32 = 0xFFFFFFFF


class NoAttributeError(LookupError):
    """Raised when an attribute was expected but not found."""

    def __init__(self, message: str = "radius: attribute not found") -> None:
        super().__init__(message)


def _require_length(a: bytes, length: int) -> None:
    if len(a) != length:
        raise ValueError("invalid length")


def _xor(data: bytes, key: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(data, key))


def _md5(*parts: bytes) -> bytes:
    digest = hashlib.md5()
    for part in parts:
        digest.update(part)
    return digest.digest()


def _check_secret(secret: bytes) -> None:
    if not secret:
        raise ValueError("empty secret")


def _check_authenticator(request_authenticator: bytes) -> None:
    if len(request_authenticator) != 16:
        raise ValueError(
            f"invalid request authenticator length ({len(request_authenticator)})"
        )


def _unsigned(i: int, size: int) -> bytes:
    if not 0 <= i < 1 << (8 * size):
        raise ValueError("value out of range")
    return i.to_bytes(size, "big")


def integer(a: bytes) -> int:
    """Decode a 4-byte big-endian unsigned integer."""
    _require_length(a, 4)
    return int.from_bytes(a, "big")


def new_integer(i: int) -> bytes:
    """Encode an unsigned 32-bit integer."""
    return _unsigned(i, 4)


def string(a: bytes) -> str:
    """Decode an attribute as text."""
    return bytes(a).decode("utf-8", errors="surrogateescape")


def new_string(s: str) -> bytes:
    """Encode text; at most 253 bytes are allowed."""
    encoded = s.encode("utf-8", errors="surrogateescape")
    if len(encoded) > 253:
        raise ValueError("string too long")
    return encoded


def to_bytes(a: bytes) -> bytes:
    """Return the attribute as an independent bytes value."""
    return bytes(a)


def new_bytes(b: bytes) -> bytes:
    """Build an attribute from raw bytes; at most 253 bytes are allowed."""
    if len(b) > 253:
        raise ValueError("value too long")
    return bytes(b)


def _as_address(addr) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    if isinstance(addr, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return addr
    return ipaddress.ip_address(addr)


def ip_addr(a: bytes) -> ipaddress.IPv4Address:
    """Decode a 4-byte IPv4 address."""
    _require_length(a, 4)
    return ipaddress.IPv4Address(bytes(a))


def new_ip_addr(addr) -> bytes:
    """Encode an IPv4 address (or an IPv4-mapped IPv6 address)."""
    address = _as_address(addr)
    if isinstance(address, ipaddress.IPv6Address):
        mapped = address.ipv4_mapped
        if mapped is None:
            raise ValueError("invalid IPv4 address")
        address = mapped
    return address.packed


def ipv6_addr(a: bytes) -> ipaddress.IPv6Address:
    """Decode a 16-byte IPv6 address."""
    _require_length(a, 16)
    return ipaddress.IPv6Address(bytes(a))


def new_ipv6_addr(addr) -> bytes:
    """Encode an address in 16-byte form; IPv4 addresses become IPv4-mapped."""
    address = _as_address(addr)
    if isinstance(address, ipaddress.IPv4Address):
        return b"\x00" * 10 + b"\xff\xff" + address.packed
    return address.packed


def ifid(a: bytes) -> bytes:
    """Decode an 8-byte interface identifier."""
    _require_length(a, 8)
    return bytes(a)


def new_ifid(addr: bytes) -> bytes:
    """Encode an 8-byte interface identifier."""
    _require_length(addr, 8)
    return bytes(addr)


def user_password(a: bytes, secret: bytes, request_authenticator: bytes) -> bytes:
    """Decrypt an RFC 2865 User-Password value and return the plaintext."""
    a = bytes(a)
    if not 16 <= len(a) <= 128 or len(a) % 16:
        raise ValueError(f"invalid attribute length ({len(a)})")
    _check_secret(secret)
    _check_authenticator(request_authenticator)

    plaintext = bytearray()
    previous = bytes(request_authenticator)
    for start in range(0, len(a), 16):
        block = a[start : start + 16]
        plaintext += _xor(block, _md5(bytes(secret), previous))
        previous = block

    end = plaintext.find(0)
    if end >= 0:
        del plaintext[end:]
    return bytes(plaintext)


def new_user_password(
    plaintext: bytes, secret: bytes, request_authenticator: bytes
) -> bytes:
    """Encrypt a plaintext as an RFC 2865 User-Password value."""
    if len(plaintext) > 128:
        raise ValueError("plaintext longer than 128 characters")
    _check_secret(secret)
    _check_authenticator(request_authenticator)

    chunks = max(1, (len(plaintext) + 15) // 16)
    padded = bytes(plaintext).ljust(chunks * 16, b"\x00")

    encrypted = bytearray()
    previous = bytes(request_authenticator)
    for start in range(0, len(padded), 16):
        cipher = _xor(padded[start : start + 16], _md5(bytes(secret), previous))
        encrypted += cipher
        previous = cipher
    return bytes(encrypted)


def date(a: bytes) -> datetime:
    """Decode a 4-byte UNIX timestamp as an aware UTC datetime."""
    _require_length(a, 4)
    return datetime.fromtimestamp(int.from_bytes(a, "big"), tz=timezone.utc)


def new_date(t: datetime) -> bytes:
    """Encode a datetime as a 4-byte UNIX timestamp."""
    seconds = math.floor(t.timestamp())
    if not 0 <= seconds <= _MAX_UINT32:
        raise ValueError("time out of range")
    return seconds.to_bytes(4, "big")


def vendor_specific(a: bytes) -> tuple[int, bytes]:
    """Split a Vendor-Specific value into its vendor ID and payload."""
    if len(a) < 5:
        raise ValueError("invalid length")
    return int.from_bytes(a[:4], "big"), bytes(a[4:])


def new_vendor_specific(vendor_id: int, value: bytes) -> bytes:
    """Build a Vendor-Specific value from a vendor ID and payload."""
    if len(value) > 249:
        raise ValueError("value too long")
    return _unsigned(vendor_id, 4) + bytes(value)


def integer64(a: bytes) -> int:
    """Decode an 8-byte big-endian unsigned integer."""
    _require_length(a, 8)
    return int.from_bytes(a, "big")


def new_integer64(i: int) -> bytes:
    """Encode an unsigned 64-bit integer."""
    return _unsigned(i, 8)


def integer16(a: bytes) -> int:
    """Decode a 2-byte big-endian unsigned integer."""
    _require_length(a, 2)
    return int.from_bytes(a, "big")


def new_integer16(i: int) -> bytes:
    """Encode an unsigned 16-bit integer."""
    return _unsigned(i, 2)


def tlv(a: bytes) -> tuple[int, bytes]:
    """Split a Type-Length-Value attribute into its type and value."""
    if len(a) < 3 or len(a) > 255 or a[1] != len(a):
        raise ValueError("invalid length")
    return a[0], bytes(a[2:])


def new_tlv(tlv_type: int, tlv_value: bytes) -> bytes:
    """Build a Type-Length-Value attribute."""
    if not 1 <= len(tlv_value) <= 253:
        raise ValueError("invalid value length")
    return bytes([tlv_type, 2 + len(tlv_value)]) + bytes(tlv_value)


def new_tunnel_password(
    password: bytes, salt: bytes, secret: bytes, request_authenticator: bytes
) -> bytes:
    """Encrypt an RFC 2868 Tunnel-Password; the tag is not included."""
    if len(password) > 249:
        raise ValueError("invalid password length")
    if len(salt) != 2:
        raise ValueError("invalid salt length")
    if not salt[0] & 0x80:
        raise ValueError("invalid salt")
    _check_secret(secret)
    _check_authenticator(request_authenticator)

    chunks = max(1, (1 + len(password) + 15) // 16)
    plaintext = (bytes([len(password)]) + bytes(password)).ljust(chunks * 16, b"\x00")

    encrypted = bytearray(salt)
    previous = bytes(request_authenticator) + bytes(salt)
    for start in range(0, len(plaintext), 16):
        cipher = _xor(plaintext[start : start + 16], _md5(bytes(secret), previous))
        encrypted += cipher
        previous = cipher
    return bytes(encrypted)


def tunnel_password(
    a: bytes, secret: bytes, request_authenticator: bytes
) -> tuple[bytes, bytes]:
    """Decrypt an untagged RFC 2868 Tunnel-Password; return (password, salt)."""
    a = bytes(a)
    if len(a) > 252 or len(a) < 18 or (len(a) - 2) % 16:
        raise ValueError("invalid length")
    _check_secret(secret)
    _check_authenticator(request_authenticator)
    salt = a[:2]
    if not salt[0] & 0x80:
        raise ValueError("invalid salt")

    plaintext = bytearray()
    previous = bytes(request_authenticator) + salt
    for start in range(2, len(a), 16):
        block = a[start : start + 16]
        plaintext += _xor(block, _md5(bytes(secret), previous))
        previous = block

    length = plaintext[0]
    if length > len(plaintext) - 1:
        raise ValueError("invalid password length")
    return bytes(plaintext[1 : 1 + length]), salt


def new_ipv6_prefix(prefix) -> bytes:
    """Encode an IPv6 network as an IPv6-Prefix value."""
    if prefix is None:
        raise ValueError("nil prefix")
    if isinstance(prefix, str):
        prefix = ipaddress.ip_network(prefix, strict=False)
    if not isinstance(prefix, ipaddress.IPv6Network):
        raise ValueError("IP is not IPv6")

    ones = prefix.prefixlen
    value = bytearray([0, ones])
    value += prefix.network_address.packed[: (ones + 7) // 8]
    if ones % 8:
        value[-1] &= (0xFF << (8 - ones % 8)) & 0xFF
    return bytes(value)


def ipv6_prefix(a: bytes) -> ipaddress.IPv6Network:
    """Decode an IPv6-Prefix value into an IPv6 network."""
    if len(a) < 2 or len(a) > 18:
        raise ValueError("invalid length")
    prefix_length = a[1]
    if (len(a) - 2) * 8 < prefix_length:
        raise ValueError("invalid prefix length")

    ip = bytearray(a[2:]).ljust(16, b"\x00")
    if prefix_length % 8:
        ip[prefix_length // 8] &= (0xFF << (8 - prefix_length % 8)) & 0xFF
    return ipaddress.IPv6Network(
        (ipaddress.IPv6Address(bytes(ip)), prefix_length), strict=False
    )