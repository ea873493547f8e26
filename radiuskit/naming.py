"""Conversion of dictionary names into identifiers."""

from __future__ import annotations

import re

_FIRST_CHARACTER_REPLACEMENTS = {
    "0": "Zero",
    "1": "One",
    "2": "Two",
    "3": "Three",
    "4": "Four",
    "5": "Five",
    "6": "Six",
    "7": "Seven",
    "8": "Eight",
    "9": "Nine",
}

_COMMON_INITIALISMS = frozenset(
    {
        "ACL", "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML",
        "HTTP", "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS",
        "RPC", "SLA", "SMTP", "SQL", "SSH", "TCP", "TLS", "TTL", "UDP",
        "UI", "UID", "UUID", "URI", "URL", "UTF8", "VM", "XML", "XMPP",
        "XSRF", "XSS",
    }
)

_WORD = re.compile(r"[^\W_]+")


def identifier(name: str) -> str:
    """Turn a dictionary name such as "3GPP-RAT-Type" into "ThreeGPPRATType"."""
    if not name:
        return ""
    replacement = _FIRST_CHARACTER_REPLACEMENTS.get(name[0])
    if replacement is not None:
        name = replacement + name[1:]
    name = name.replace("+", "Plus")

    parts = []
    for word in _WORD.findall(name):
        upper = word.upper()
        if upper in _COMMON_INITIALISMS:
            parts.append(upper)
        else:
            parts.append(word[:1].upper() + word[1:])
    return "".join(parts)