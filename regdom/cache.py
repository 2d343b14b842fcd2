"""On-disk cache for the downloaded public suffix list.

Keeps two files under the data directory:
- public_suffix_list.dat: the raw list text
- psl_meta.json: where and when it was fetched

The cache only stores and reports on the list; building resolvers from it is
the provider's job.
"""

import json
import logging
import threading
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import httpx

from .exceptions import PslCacheNotFoundError, PslDownloadError
from .rules import parse_rules

logger = logging.getLogger(__name__)

LIST_FILENAME = "public_suffix_list.dat"
META_FILENAME = "psl_meta.json"
SECONDS_PER_DAY = 86400


class PslCache:
    """
    Public suffix list cache.

    Usage:
        cache = PslCache(Path("data"))
        if cache.needs_update(max_age_days=7):
            cache.fetch("https://publicsuffix.org/list/public_suffix_list.dat")
        text = cache.read_text()
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._lock = threading.RLock()

    @property
    def list_path(self) -> Path:
        return self.data_dir / LIST_FILENAME

    @property
    def meta_path(self) -> Path:
        return self.data_dir / META_FILENAME

    def exists(self) -> bool:
        return self.list_path.exists()

    def read_text(self) -> str:
        """Return the cached list text, raising PslCacheNotFoundError if absent."""
        try:
            return self.list_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PslCacheNotFoundError(f"No cached public suffix list at {self.list_path}") from e

    def load_metadata(self) -> Dict[str, Any]:
        """Read cache metadata; missing or unreadable metadata yields {}."""
        if not self.meta_path.exists():
            return {}
        try:
            with open(self.meta_path, "r") as f:
                data = json.load(f)
        except Exception as e:
            logger.debug(f"Failed to read PSL cache metadata: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def last_updated(self) -> Optional[float]:
        """Unix timestamp of the last successful store, if known."""
        timestamp = self.load_metadata().get("timestamp")
        if isinstance(timestamp, (int, float)):
            return float(timestamp)
        if self.exists():
            return self.list_path.stat().st_mtime
        return None

    def days_old(self, now: Optional[float] = None) -> Optional[int]:
        updated = self.last_updated()
        if updated is None:
            return None
        current = time.time() if now is None else now
        return max(0, int((current - updated) // SECONDS_PER_DAY))

    def needs_update(self, max_age_days: int, now: Optional[float] = None) -> bool:
        age = self.days_old(now)
        return age is None or age >= max_age_days

    def store(self, text: str, source_url: str = "") -> int:
        """Write list text and metadata. Returns the number of rules in the text."""
        rule_count = len(parse_rules(text))
        if rule_count == 0:
            raise PslDownloadError("Refusing to cache a public suffix list with no rules")

        timestamp = time.time()
        with self._lock:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path = self.list_path.with_suffix(".tmp")
            tmp_path.write_text(text, encoding="utf-8")
            tmp_path.replace(self.list_path)
            with open(self.meta_path, "w") as f:
                json.dump(
                    {
                        "source_url": source_url,
                        "timestamp": timestamp,
                        "cached_at": datetime.fromtimestamp(timestamp, timezone.utc).isoformat(),
                        "rule_count": rule_count,
                    },
                    f,
                )
        return rule_count

    def fetch(self, url: str, timeout: int = 30, client: Optional[httpx.Client] = None) -> int:
        """Download the list from ``url`` and store it. Returns the rule count."""
        try:
            if client is None:
                resp = httpx.get(url, timeout=timeout, follow_redirects=True)
            else:
                resp = client.get(url, timeout=timeout, follow_redirects=True)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise PslDownloadError(f"Failed to download public suffix list from {url}: {e}") from e

        rule_count = self.store(resp.text, source_url=url)
        logger.info("Cached public suffix list from %s (%d rules)", url, rule_count)
        return rule_count

    def clear(self, cache_only: bool = False) -> None:
        """Remove cached metadata, and the list itself unless ``cache_only``."""
        with self._lock:
            paths = [self.meta_path] if cache_only else [self.meta_path, self.list_path]
            for path in paths:
                try:
                    path.unlink()
                except FileNotFoundError:
                    pass

    def metadata(self, max_age_days: int) -> Dict[str, Any]:
        updated = self.last_updated()
        return {
            "active_cache": str(self.list_path) if self.exists() else None,
            "last_updated": (
                datetime.fromtimestamp(updated, timezone.utc).isoformat() if updated is not None else None
            ),
            "days_old": self.days_old(),
            "needs_update": self.needs_update(max_age_days),
        }
