from __future__ import annotations

from kata_toolkit.core.errors import InputValidationError


def zigzag_matrix(n: int) -> list[list[int]]:
    """Return an n x n matrix numbered along the JPEG zig-zag path.

    3 => [[0, 1, 5],
          [2, 4, 6],
          [3, 7, 8]]
    """

    if n < 0:
        raise InputValidationError(
            code="E_NEGATIVE_SIZE",
            message=f"matrix size must be >= 0, got {n}",
            path="n",
        )

    out = [[0] * n for _ in range(n)]
    row, col = 0, 0
    for num in range(n * n):
        out[row][col] = num
        if (row + col) % 2 == 0:
            # moving up-right
            if col + 1 < n:
                col += 1
            else:
                row += 2
            if row > 0:
                row -= 1
        else:
            # moving down-left
            if row + 1 < n:
                row += 1
            else:
                col += 2
            if col > 0:
                col -= 1
    return out
