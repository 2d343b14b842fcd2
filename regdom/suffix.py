"""Public suffix resolution over an immutable RuleTree."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

from .normalize import NormalizedHost
from .rules import Rule, load_rules, parse_rules
from .tree import RuleTree


class PublicSuffixList:
    """Answers public suffix questions for hosts against one rule tree.

    Usage:
        psl = PublicSuffixList.from_text(Path("public_suffix_list.dat").read_text())
        psl.get_public_suffix("www.example.co.uk")   # "co.uk"
        psl.is_public_suffix("co.uk")                # True

    Every method accepts any string (host, host:port, URL, Unicode or
    punycode) and never raises; negative answers are None/False.
    """

    def __init__(self, tree: RuleTree):
        self.tree = tree

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> "PublicSuffixList":
        return cls(RuleTree.from_rules(rules))

    @classmethod
    def from_text(cls, text: str) -> "PublicSuffixList":
        return cls.from_rules(parse_rules(text))

    @classmethod
    def from_file(cls, path: Path | str) -> "PublicSuffixList":
        return cls.from_rules(load_rules(path))

    @staticmethod
    def _labels(host: str) -> list[str]:
        normalized = NormalizedHost.parse(host)
        if not normalized or normalized.is_ip:
            return []
        ascii_host = normalized.ascii.lstrip(".")
        return ascii_host.split(".") if ascii_host else []

    def get_public_suffix(self, host: str) -> Optional[str]:
        """Return the ASCII public suffix of ``host``, or None for empty input and IP literals."""
        labels = self._labels(host)
        if not labels:
            return None
        depth = self.tree.match_depth(labels)
        if depth == 0:
            return None
        return ".".join(labels[-depth:])

    def is_public_suffix(self, host: str) -> bool:
        """Return True when ``host`` is itself a public suffix."""
        labels = self._labels(host)
        if not labels:
            return False
        return self.tree.match_depth(labels) == len(labels)

    def is_exception(self, host: str) -> bool:
        """Return True when ``host`` is named by an exception rule (e.g. ``www.ck``)."""
        labels = self._labels(host)
        if not labels:
            return False
        node = self.tree.find(labels)
        return node is not None and node.is_exception

    def metadata(self) -> dict[str, Any]:
        return {"rule_counts": self.tree.rule_counts()}
