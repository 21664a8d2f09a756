from __future__ import annotations

import logging
from collections import defaultdict, deque
from typing import Any, Iterable, Optional

from kata_toolkit.core.errors import InputValidationError
from kata_toolkit.core.model import Domino

logger = logging.getLogger(__name__)


def can_dominoes_make_row(dominoes: Iterable[Domino]) -> bool:
    """Return True if every tile can be laid in a single row.

    Tiles may be flipped ([i, j] is the same tile as [j, i]). Treating pip
    values as vertices and tiles as edges, a row exists exactly when the
    multigraph has an Eulerian path: 0 or 2 odd-degree vertices and one
    connected component.

    [[0, 1], [1, 1]]                          => True
    [[1, 1], [2, 2], [1, 5], [5, 6], [6, 3]]  => False
    """

    adjacency: dict[int, list[int]] = defaultdict(list)
    for a, b in dominoes:
        adjacency[a].append(b)
        adjacency[b].append(a)

    if not adjacency:
        return True

    odd = sum(1 for neighbours in adjacency.values() if len(neighbours) % 2 == 1)
    logger.debug("domino graph: %d value(s), %d odd-degree", len(adjacency), odd)
    if odd not in (0, 2):
        return False

    return _is_connected(adjacency)


def validate_dominoes(raw: Any) -> tuple[Optional[list[Domino]], list[InputValidationError]]:
    """Check a loaded document is a list of [int, int] pairs.

    Returns (dominoes, errors). Dominoes is None when errors exist.
    """

    if not isinstance(raw, list):
        return None, [
            InputValidationError(
                code="E_INVALID_TYPE",
                message="dominoes must be an array of [a, b] pairs",
                path="dominoes",
            )
        ]

    errors: list[InputValidationError] = []
    out: list[Domino] = []
    for i, item in enumerate(raw):
        if (
            not isinstance(item, list)
            or len(item) != 2
            or not all(isinstance(x, int) and not isinstance(x, bool) for x in item)
        ):
            errors.append(
                InputValidationError(
                    code="E_INVALID_DOMINO",
                    message=f"domino must be a pair of integers, got {item!r}",
                    path=f"dominoes[{i}]",
                )
            )
            continue
        out.append((item[0], item[1]))

    if errors:
        return None, errors
    return out, []


def _is_connected(adjacency: dict[int, list[int]]) -> bool:
    start = next(iter(adjacency))
    q: deque[int] = deque([start])
    seen: set[int] = set()
    while q:
        cur = q.popleft()
        if cur in seen:
            continue
        seen.add(cur)
        for nxt in adjacency[cur]:
            if nxt not in seen:
                q.append(nxt)
    return len(seen) == len(adjacency)
