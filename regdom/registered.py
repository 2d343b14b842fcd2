"""Registrable domain extraction and cookie domain matching."""

from __future__ import annotations

import logging
from typing import Optional

from .idn import to_unicode
from .normalize import NormalizedHost
from .suffix import PublicSuffixList

logger = logging.getLogger(__name__)

LOCALHOST = "localhost"


class RegisteredDomain:
    """Registrable domain helper built on a PublicSuffixList.

    ``enforce_psl`` controls the public suffix checks of ``domain_matches``
    (normally taken from ``Config.enforce_psl``).
    """

    def __init__(self, psl: PublicSuffixList, enforce_psl: bool = True):
        self.psl = psl
        self.enforce_psl = enforce_psl

    def _registered_ascii(self, host: NormalizedHost) -> Optional[str]:
        if not host or host.is_ip:
            return None

        suffix = self.psl.get_public_suffix(host.ascii)
        if suffix is None or suffix == host.ascii:
            return None

        remainder = host.ascii[: -len(suffix) - 1]
        label = remainder.rsplit(".", 1)[-1]
        if not label:
            return None
        return f"{label}.{suffix}"

    def get_registered_domain(self, host: str, prefer_unicode: bool = True) -> Optional[str]:
        """
        Return the registrable domain of a host or URL.

        Returns None for empty input, IP literals and hosts that are
        themselves public suffixes. With ``prefer_unicode`` punycode labels
        are rendered back to Unicode; otherwise the ASCII form is returned.
        """
        registered = self._registered_ascii(NormalizedHost.parse(host))
        if registered is None:
            return None
        return to_unicode(registered) if prefer_unicode else registered

    def domain_matches(self, host: str, domain: str) -> bool:
        """
        Check whether a cookie ``Domain`` attribute may be used for ``host``.

        An empty domain is a host-only cookie and always matches. ``localhost``
        and IP literals never match through a domain attribute. With PSL
        enforcement a public suffix is rejected as a domain, as is a domain
        whose registrable domain differs from the host's.
        """
        domain = domain or ""
        if domain.startswith("."):
            domain = domain[1:]

        host_n = NormalizedHost.parse(host)
        domain_n = NormalizedHost.parse(domain)

        if not domain_n:
            return True
        if domain_n.ascii == LOCALHOST:
            return False
        if host_n.is_ip or domain_n.is_ip:
            return False

        if self.enforce_psl:
            if self.psl.is_public_suffix(domain_n.ascii):
                logger.debug("Rejecting cookie domain %s: public suffix", domain_n.text)
                return False
            host_reg = self._registered_ascii(host_n)
            domain_reg = self._registered_ascii(domain_n)
            if host_reg and domain_reg and host_reg != domain_reg:
                return False

        host_ascii = host_n.ascii
        domain_ascii = domain_n.ascii
        if host_ascii == domain_ascii:
            return True
        return len(host_ascii) > len(domain_ascii) and host_ascii.endswith(f".{domain_ascii}")
