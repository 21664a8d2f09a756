from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import product
from typing import Iterable, Iterator, Optional

from kata_toolkit.core.errors import MalformedPatternError
from kata_toolkit.core.model import BraceGroup

logger = logging.getLogger(__name__)


def expand_braces(pattern: str) -> Iterator[str]:
    """Expand every brace group in ``pattern``.

    Returns a lazy iterator over the expansions in generation order, each
    distinct string once (first occurrence wins). A pattern without braces
    yields itself.

    Raises MalformedPatternError right away, before anything is yielded,
    when the braces do not balance.
    """

    check_balanced(pattern)
    return _unique(_expand(pattern))


def check_balanced(pattern: str) -> None:
    depth = 0
    opened_at: list[int] = []
    for i, ch in enumerate(pattern):
        if ch == "{":
            depth += 1
            opened_at.append(i)
        elif ch == "}":
            if depth == 0:
                raise MalformedPatternError(
                    code="E_UNMATCHED_CLOSE",
                    message="closing brace has no matching opening brace",
                    source=pattern,
                    path=f"offset {i}",
                )
            depth -= 1
            opened_at.pop()

    if depth > 0:
        raise MalformedPatternError(
            code="E_UNMATCHED_OPEN",
            message=f"{depth} opening brace(s) never closed",
            source=pattern,
            path=f"offset {opened_at[0]}",
        )


def find_first_group(pattern: str) -> Optional[BraceGroup]:
    """Locate the first top-level brace group and split its alternatives.

    Returns None when the pattern has no braces at all.
    """

    start = pattern.find("{")
    if start < 0:
        return None

    depth = 0
    for i in range(start, len(pattern)):
        ch = pattern[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                inner = pattern[start + 1 : i]
                return BraceGroup(
                    start=start,
                    end=i + 1,
                    alternatives=tuple(split_alternatives(inner)),
                )

    raise MalformedPatternError(
        code="E_UNMATCHED_OPEN",
        message="opening brace never closed",
        source=pattern,
        path=f"offset {start}",
    )


def split_alternatives(inner: str) -> list[str]:
    """Split group content on commas that are not inside a nested group."""
    out: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in inner:
        if ch == "," and depth == 0:
            out.append("".join(current))
            current = []
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current.append(ch)
    out.append("".join(current))
    return out


@dataclass
class _Frame:
    # Expansions of the alternative being scanned, and of those already closed.
    results: list[str] = field(default_factory=lambda: [""])
    closed: list[str] = field(default_factory=list)
    literal: list[str] = field(default_factory=list)

    def flush(self) -> None:
        if self.literal:
            text = "".join(self.literal)
            self.results = [r + text for r in self.results]
            self.literal = []


def _expand(pattern: str) -> list[str]:
    """Expand a balanced pattern in one left-to-right scan.

    Each open group gets a frame on an explicit stack. Closing a group folds
    its choices into the enclosing frame with a cartesian product, so results
    keep written order and nesting depth is bounded only by memory.
    """

    stack: list[_Frame] = [_Frame()]
    groups = 0
    for i, ch in enumerate(pattern):
        top = stack[-1]
        if ch == "{":
            top.flush()
            stack.append(_Frame())
        elif ch == "," and len(stack) > 1:
            top.flush()
            top.closed.extend(top.results)
            top.results = [""]
        elif ch == "}":
            if len(stack) == 1:
                raise MalformedPatternError(
                    code="E_UNMATCHED_CLOSE",
                    message="closing brace has no matching opening brace",
                    source=pattern,
                    path=f"offset {i}",
                )
            top.flush()
            top.closed.extend(top.results)
            stack.pop()
            parent = stack[-1]
            parent.results = [
                head + choice for head, choice in product(parent.results, top.closed)
            ]
            groups += 1
        else:
            top.literal.append(ch)

    if len(stack) > 1:
        raise MalformedPatternError(
            code="E_UNMATCHED_OPEN",
            message="opening brace never closed",
            source=pattern,
        )

    root = stack[0]
    root.flush()
    logger.debug("expanded %d group(s) into %d result(s)", groups, len(root.results))
    return root.results


def _unique(values: Iterable[str]) -> Iterator[str]:
    seen: set[str] = set()
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        yield v
