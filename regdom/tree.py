"""Immutable label trie built from public suffix list rules."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from .rules import Rule, RuleKind


class RuleNode:
    """A trie node. ``children`` is keyed by the next label towards the left."""

    __slots__ = ("children", "is_terminal", "is_wildcard", "is_exception")

    def __init__(self):
        self.children: Mapping[str, RuleNode] = {}
        self.is_terminal = False
        self.is_wildcard = False
        self.is_exception = False

    def __repr__(self) -> str:
        flags = [
            name
            for name, on in (
                ("terminal", self.is_terminal),
                ("wildcard", self.is_wildcard),
                ("exception", self.is_exception),
            )
            if on
        ]
        return f"<RuleNode children={len(self.children)} flags={','.join(flags) or '-'}>"


class RuleTree:
    """
    Suffix rule trie rooted at the TLD.

    Built once with ``from_rules`` and never modified afterwards: child maps
    are frozen into read-only mappings, so a tree can be shared by any number
    of threads. To pick up a new list, build a new tree.
    """

    __slots__ = ("_root",)

    def __init__(self, root: RuleNode):
        self._root = root

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> "RuleTree":
        root = RuleNode()
        for rule in rules:
            _insert(root, rule)
        _freeze(root)
        return cls(root)

    @property
    def root(self) -> RuleNode:
        return self._root

    def match_depth(self, labels: Sequence[str]) -> int:
        """
        Return how many rightmost labels of ``labels`` form the public suffix.

        ``labels`` are ASCII labels in written order. An exception node met on
        the way stops the walk and drops its own label; otherwise the deepest
        terminal or wildcard-satisfied position wins. When no rule applies the
        default ``*`` rule makes the last label a suffix on its own.
        """
        if not labels:
            return 0

        node = self._root
        depth = 0
        for consumed, label in enumerate(reversed(labels)):
            child = node.children.get(label)
            if child is not None and child.is_exception:
                return consumed
            if node.is_wildcard:
                depth = consumed + 1
            if child is None:
                break
            node = child
            if node.is_terminal:
                depth = consumed + 1

        return depth or 1

    def find(self, labels: Sequence[str]) -> RuleNode | None:
        """Return the node at the exact path for ``labels`` (written order)."""
        node = self._root
        for label in reversed(labels):
            node = node.children.get(label)
            if node is None:
                return None
        return node

    def iter_nodes(self) -> Iterator[RuleNode]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children.values())

    def rule_counts(self) -> dict[str, int]:
        counts = {RuleKind.NORMAL.value: 0, RuleKind.WILDCARD.value: 0, RuleKind.EXCEPTION.value: 0}
        for node in self.iter_nodes():
            if node.is_terminal:
                counts[RuleKind.NORMAL.value] += 1
            if node.is_wildcard:
                counts[RuleKind.WILDCARD.value] += 1
            if node.is_exception:
                counts[RuleKind.EXCEPTION.value] += 1
        return counts

    def __contains__(self, suffix: str) -> bool:
        node = self.find(suffix.split("."))
        return node is not None and node.is_terminal


def _insert(root: RuleNode, rule: Rule) -> None:
    labels = rule.labels[1:] if rule.kind is RuleKind.WILDCARD else rule.labels
    node = root
    for label in reversed(labels):
        children = node.children
        child = children.get(label)
        if child is None:
            child = RuleNode()
            children[label] = child  # type: ignore[index]
        node = child

    if rule.kind is RuleKind.WILDCARD:
        node.is_wildcard = True
    elif rule.kind is RuleKind.EXCEPTION:
        node.is_exception = True
    else:
        node.is_terminal = True


def _freeze(root: RuleNode) -> None:
    stack = [root]
    while stack:
        node = stack.pop()
        node.children = MappingProxyType(dict(node.children))
        stack.extend(node.children.values())
