"""Public suffix list rules and the suffix-list text parser."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from .idn import to_ascii

logger = logging.getLogger(__name__)

WILDCARD_LABEL = "*"
EXCEPTION_PREFIX = "!"


class RuleKind(str, Enum):
    """Kind of a suffix list rule."""

    NORMAL = "normal"  # co.uk
    WILDCARD = "wildcard"  # *.ck
    EXCEPTION = "exception"  # !www.ck


@dataclass(frozen=True)
class Rule:
    """One rule of the public suffix list.

    ``labels`` are stored in written order (``co.uk`` -> ``("co", "uk")``),
    lowercase and in ASCII/punycode form. Wildcard rules keep the leading
    ``*`` label; exception rules do not keep the ``!``.
    """

    labels: tuple[str, ...]
    kind: RuleKind = RuleKind.NORMAL

    @property
    def suffix_labels(self) -> tuple[str, ...]:
        """Labels of the suffix this rule defines (exceptions drop the leftmost)."""
        if self.kind is RuleKind.EXCEPTION:
            return self.labels[1:]
        return self.labels

    def __str__(self) -> str:
        text = ".".join(self.labels)
        if self.kind is RuleKind.EXCEPTION:
            return f"{EXCEPTION_PREFIX}{text}"
        return text


def parse_rule(line: str) -> Rule | None:
    """Parse a single rule line. Returns None for comments, blanks and malformed rules."""
    stripped = (line or "").strip()
    if not stripped or stripped.startswith("//"):
        return None

    # Only the first token of a line is significant.
    token = stripped.split()[0]

    kind = RuleKind.NORMAL
    if token.startswith(EXCEPTION_PREFIX):
        kind = RuleKind.EXCEPTION
        token = token[1:]

    labels = tuple(to_ascii(token.lower()).split("."))
    if not all(labels):
        logger.warning("Skipping suffix rule with empty label: %r", line.strip())
        return None

    if WILDCARD_LABEL in labels:
        if kind is RuleKind.EXCEPTION:
            logger.warning("Skipping exception rule with wildcard: %r", line.strip())
            return None
        if labels[0] != WILDCARD_LABEL or WILDCARD_LABEL in labels[1:] or len(labels) < 2:
            logger.warning("Skipping rule with misplaced wildcard: %r", line.strip())
            return None
        kind = RuleKind.WILDCARD

    if kind is RuleKind.EXCEPTION and len(labels) < 2:
        logger.warning("Skipping single-label exception rule: %r", line.strip())
        return None

    return Rule(labels=labels, kind=kind)


def iter_rules(lines: Iterable[str]) -> Iterator[Rule]:
    """Yield rules from suffix-list lines, skipping comments and malformed entries."""
    for line in lines:
        rule = parse_rule(line)
        if rule is not None:
            yield rule


def parse_rules(text: str) -> list[Rule]:
    """Parse the full text of a public suffix list."""
    return list(iter_rules((text or "").splitlines()))


def load_rules(path: Path | str) -> list[Rule]:
    """Load rules from a public suffix list file on disk."""
    with open(path, "r", encoding="utf-8") as f:
        rules = list(iter_rules(f))
    logger.info("Loaded %d suffix rules from %s", len(rules), path)
    return rules
