"""Process-wide active public suffix list and module-level shortcuts.

The provider holds a single reference to the active ``RegisteredDomain``
helper (and through it the ``PublicSuffixList``). ``refresh()`` builds a
complete replacement first and only then swaps the reference, so queries never
see a partially built list and never need a lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from .cache import PslCache
from .config import Config, load_config
from .exceptions import PslCacheNotFoundError, PslDownloadError
from .registered import RegisteredDomain
from .rules import Rule, iter_rules, load_rules, parse_rules
from .suffix import PublicSuffixList

logger = logging.getLogger(__name__)


class SuffixListProvider:
    """Loads the configured list and keeps the active resolver."""

    def __init__(self, config: Config, cache: Optional[PslCache] = None):
        self.config = config
        self.cache = cache or PslCache(config.data_dir)
        self._active: Optional[RegisteredDomain] = None
        self._swap_lock = threading.Lock()

    def _read_rules(self, force_download: bool = False) -> list[Rule]:
        if self.config.psl_file is not None:
            rules = load_rules(self.config.psl_file)
        else:
            stale = force_download or self.cache.needs_update(self.config.cache_max_age_days)
            if stale and (self.config.auto_download or force_download):
                try:
                    self.cache.fetch(self.config.psl_url, timeout=self.config.download_timeout)
                except PslDownloadError as e:
                    if not self.cache.exists():
                        raise PslCacheNotFoundError(f"No public suffix list available: {e}") from e
                    if force_download:
                        raise
                    logger.warning("Public suffix list refresh failed, using cached copy: %s", e)
            rules = parse_rules(self.cache.read_text())

        if self.config.extra_rules:
            rules.extend(iter_rules(self.config.extra_rules))
        return rules

    def build(self, force_download: bool = False) -> RegisteredDomain:
        """Build a fresh resolver from the configured source without activating it."""
        psl = PublicSuffixList.from_rules(self._read_rules(force_download=force_download))
        counts = psl.metadata()["rule_counts"]
        logger.info(
            "Built public suffix tree: %d normal, %d wildcard, %d exception rules",
            counts["normal"],
            counts["wildcard"],
            counts["exception"],
        )
        return RegisteredDomain(psl, enforce_psl=self.config.enforce_psl)

    def get(self) -> RegisteredDomain:
        """Return the active resolver, loading it on first use."""
        active = self._active
        if active is None:
            with self._swap_lock:
                if self._active is None:
                    self._active = self.build()
                active = self._active
        return active

    def refresh(self, force_download: bool = False) -> RegisteredDomain:
        """Build a new resolver and make it the active one."""
        replacement = self.build(force_download=force_download)
        with self._swap_lock:
            self._active = replacement
        return replacement

    def metadata(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.config.psl_file is not None:
            data["active_cache"] = str(self.config.psl_file)
        else:
            data.update(self.cache.metadata(self.config.cache_max_age_days))
        data.update(self.get().psl.metadata())
        return data


_provider: Optional[SuffixListProvider] = None
_provider_lock = threading.Lock()


def get_provider() -> SuffixListProvider:
    """Return the process-wide provider, creating it from ``load_config()``."""
    global _provider
    provider = _provider
    if provider is None:
        with _provider_lock:
            if _provider is None:
                _provider = SuffixListProvider(load_config())
            provider = _provider
    return provider


def set_provider(provider: Optional[SuffixListProvider]) -> None:
    """Replace the process-wide provider (None resets to lazy default)."""
    global _provider
    with _provider_lock:
        _provider = provider


def is_public_suffix(host: str) -> bool:
    """Return True when ``host`` is a public suffix of the active list."""
    return get_provider().get().psl.is_public_suffix(host)


def get_public_suffix(host: str) -> Optional[str]:
    """Return the public suffix of ``host`` from the active list, or None."""
    return get_provider().get().psl.get_public_suffix(host)


def get_registered_domain(host: str, prefer_unicode: bool = True) -> Optional[str]:
    """Return the registrable domain of ``host`` from the active list, or None."""
    return get_provider().get().get_registered_domain(host, prefer_unicode=prefer_unicode)


def domain_matches(host: str, domain: str) -> bool:
    """Return True when a cookie for ``domain`` may be set or sent for ``host``."""
    return get_provider().get().domain_matches(host, domain)


def metadata() -> dict[str, Any]:
    """Return cache and rule-count metadata for the active list."""
    return get_provider().metadata()
