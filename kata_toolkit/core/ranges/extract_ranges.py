from __future__ import annotations

from typing import Sequence


# Runs shorter than this stay as individual numbers.
MIN_RANGE_LENGTH = 3


def extract_ranges(nums: Sequence[int]) -> str:
    """Render an ordered list of integers in range notation.

    [0, 1, 2, 5, 7, 8, 9] => "0-2,5,7-9"
    [1, 2, 4, 5]          => "1,2,4,5"
    """

    parts: list[str] = []
    i = 0
    while i < len(nums):
        j = i
        while j + 1 < len(nums) and nums[j + 1] == nums[j] + 1:
            j += 1
        if j - i + 1 >= MIN_RANGE_LENGTH:
            parts.append(f"{nums[i]}-{nums[j]}")
            i = j + 1
        else:
            parts.append(str(nums[i]))
            i += 1
    return ",".join(parts)
