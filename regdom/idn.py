"""IDN label conversion and IP literal detection.

Both conversions work label by label and never raise: a label that cannot be
converted is returned unchanged, so mixed or invalid input degrades to plain
string matching instead of failing the lookup.
"""

from __future__ import annotations

import ipaddress

import idna

ACE_PREFIX = "xn--"


def _label_to_ascii(label: str) -> str:
    if label.isascii():
        return label.lower()
    try:
        return idna.encode(label, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError):
        return label


def _label_to_unicode(label: str) -> str:
    if not label.lower().startswith(ACE_PREFIX):
        return label
    try:
        return idna.decode(label)
    except (idna.IDNAError, UnicodeError):
        return label


def to_ascii(host: str) -> str:
    """Convert a host to its ASCII (punycode) form."""
    if not host:
        return ""
    return ".".join(_label_to_ascii(label) for label in host.split("."))


def to_unicode(host: str) -> str:
    """Convert a host's punycode labels back to Unicode."""
    if not host:
        return ""
    return ".".join(_label_to_unicode(label) for label in host.split("."))


def is_ip_literal(value: str) -> bool:
    """Return True for dotted IPv4 or IPv6 (bracketed or not) literals."""
    candidate = (value or "").strip()
    if candidate.startswith("[") and candidate.endswith("]"):
        candidate = candidate[1:-1]
    if not candidate:
        return False
    try:
        ipaddress.ip_address(candidate)
    except ValueError:
        return False
    return True
