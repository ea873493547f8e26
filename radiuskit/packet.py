"""RADIUS packets and their wire format."""

from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field

from radiuskit.attributes import Attributes, parse_attributes
from radiuskit.code import Code

MAX_PACKET_LENGTH = 4095
"""Maximum wire length of a RADIUS packet."""

_REQUEST_AUTHENTICATOR_CODES = frozenset({Code.ACCESS_REQUEST, Code.STATUS_SERVER})
_NULL_AUTHENTICATOR_CODES = frozenset(
    {Code.ACCOUNTING_REQUEST, Code.DISCONNECT_REQUEST, Code.COA_REQUEST}
)
_RESPONSE_AUTHENTICATOR_CODES = frozenset(
    {
        Code.ACCESS_ACCEPT,
        Code.ACCESS_REJECT,
        Code.ACCOUNTING_RESPONSE,
        Code.ACCESS_CHALLENGE,
        Code.DISCONNECT_ACK,
        Code.DISCONNECT_NAK,
        Code.COA_ACK,
        Code.COA_NAK,
    }
)


class PacketError(ValueError):
    """Raised when a packet cannot be parsed or encoded."""


def _to_code(value: int) -> int:
    try:
        return Code(value)
    except ValueError:
        return int(value)


def _md5(*parts: bytes) -> bytes:
    digest = hashlib.md5()
    for part in parts:
        digest.update(part)
    return digest.digest()


@dataclass
class Packet:
    """A RADIUS packet."""

    code: int
    identifier: int = 0
    authenticator: bytes = bytes(16)
    secret: bytes = b""
    attributes: Attributes = field(default_factory=Attributes)

    def response(self, code: int) -> "Packet":
        """Return an empty packet sharing identifier, secret and authenticator."""
        return Packet(
            code=_to_code(code),
            identifier=self.identifier,
            authenticator=bytes(self.authenticator),
            secret=self.secret,
        )

    def encode(self) -> bytes:
        """Encode the packet to wire format, computing its authenticator."""
        try:
            attributes_size = self.attributes.wire_size()
        except ValueError:
            raise PacketError("invalid packet attribute length") from None
        size = 20 + attributes_size
        if size > MAX_PACKET_LENGTH:
            raise PacketError("encoded packet is too long")

        header = bytes([int(self.code) & 0xFF, self.identifier]) + size.to_bytes(2, "big")
        body = self.attributes.encode()
        secret = bytes(self.secret)

        if self.code in _REQUEST_AUTHENTICATOR_CODES:
            authenticator = bytes(self.authenticator)
        elif self.code in _NULL_AUTHENTICATOR_CODES:
            authenticator = _md5(header, bytes(16), body, secret)
        elif self.code in _RESPONSE_AUTHENTICATOR_CODES:
            authenticator = _md5(header, bytes(self.authenticator), body, secret)
        else:
            raise PacketError("radius: unknown Packet Code")
        return header + authenticator + body


def new(code: int, secret: bytes) -> Packet:
    """Create a packet with a random identifier and authenticator."""
    random = secrets.token_bytes(17)
    return Packet(
        code=_to_code(code),
        identifier=random[0],
        authenticator=random[1:],
        secret=secret,
    )


def parse(b: bytes, secret: bytes) -> Packet:
    """Parse a wire-encoded RADIUS packet."""
    b = bytes(b)
    if len(b) < 20:
        raise PacketError("radius: packet not at least 20 bytes long")
    length = int.from_bytes(b[2:4], "big")
    if length < 20 or length > MAX_PACKET_LENGTH or len(b) != length:
        raise PacketError("radius: invalid packet length")
    attrs = parse_attributes(b[20:])
    return Packet(
        code=_to_code(b[0]),
        identifier=b[1],
        authenticator=b[4:20],
        secret=secret,
        attributes=attrs,
    )


def is_authentic_response(response: bytes, request: bytes, secret: bytes) -> bool:
    """Return whether a wire response authentically answers a wire request."""
    if len(response) < 20 or len(request) < 20 or not secret:
        return False
    expected = _md5(
        bytes(response[:4]), bytes(request[4:20]), bytes(response[20:]), bytes(secret)
    )
    return hmac.compare_digest(expected, bytes(response[4:20]))


def is_authentic_request(request: bytes, secret: bytes) -> bool:
    """Return whether a wire request is authentic under the given secret."""
    if len(request) < 20 or not secret:
        return False
    code = request[0]
    if code in _REQUEST_AUTHENTICATOR_CODES:
        return True
    if code in _NULL_AUTHENTICATOR_CODES:
        expected = _md5(
            bytes(request[:4]), bytes(16), bytes(request[20:]), bytes(secret)
        )
        return hmac.compare_digest(expected, bytes(request[4:20]))
    return False