"""Host normalization for suffix lookups and cookie domain matching."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from .idn import is_ip_literal, to_ascii, to_unicode

_PORT_RE = re.compile(r":\d+$")


def _host_from_url(raw: str) -> str:
    candidate = raw if "://" in raw or raw.startswith("//") else f"//{raw}"
    try:
        netloc = urlsplit(candidate).netloc
    except ValueError:
        return ""
    # Drop user info; the host is whatever follows the last "@".
    return netloc.rpartition("@")[2]


def _strip_decorations(host: str) -> str:
    host = host.strip().rstrip(".")
    if host.startswith("["):
        host = host.lstrip("[")
        end = host.find("]")
        if end != -1:
            host = host[:end]
    elif host.count(":") == 1:
        host = _PORT_RE.sub("", host)
    return host.strip().rstrip(".")


def normalize_host(value: str) -> str:
    """
    Normalize a host, host:port or URL to a bare host.

    - Extract the host when the value looks like a URL (contains "/")
    - Lowercase (Unicode-aware)
    - Strip IPv6 brackets, then any ":port"
    - Strip trailing dots

    The stripping repeats until nothing changes, so the result is stable
    under a second call. It keeps Unicode labels; callers convert to ASCII
    when matching.
    """
    raw = (value or "").strip()
    if not raw:
        return ""

    host = _host_from_url(raw) if "/" in raw else raw
    host = host.lower()
    previous = None
    while host != previous:
        previous, host = host, _strip_decorations(host)
    return host


@dataclass(frozen=True)
class NormalizedHost:
    """A host prepared for matching: display text plus its ASCII form."""

    text: str
    ascii: str
    is_ip: bool = False

    @classmethod
    def parse(cls, value: str) -> "NormalizedHost":
        text = normalize_host(value)
        if not text:
            return cls(text="", ascii="")
        # Full-width digits and dots only become an address after mapping.
        ascii_host = to_ascii(text)
        is_ip = is_ip_literal(text) or is_ip_literal(ascii_host)
        return cls(text=text, ascii=ascii_host, is_ip=is_ip)

    @property
    def labels(self) -> list[str]:
        if not self.ascii:
            return []
        return self.ascii.split(".")

    @property
    def unicode(self) -> str:
        return to_unicode(self.ascii)

    def __bool__(self) -> bool:
        return bool(self.text)
