from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

__all__ = ['quicksort']


def quicksort(items: Iterable[Any], key: Optional[Callable[[Any], Any]] = None) -> List[Any]:
    """Return a new list with ``items`` sorted in non-decreasing order.

    Lomuto partition around the last element of each range.  Ranges are kept
    on an explicit stack so long inputs do not hit the recursion limit.
    """

    out = list(items)
    keys = [key(x) for x in out] if key is not None else out

    def swap(i: int, j: int) -> None:
        out[i], out[j] = out[j], out[i]
        if keys is not out:
            keys[i], keys[j] = keys[j], keys[i]

    stack = [(0, len(out) - 1)]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi:
            continue
        pivot = keys[hi]
        i = lo - 1
        for j in range(lo, hi):
            if keys[j] <= pivot:
                i += 1
                swap(i, j)
        swap(i + 1, hi)
        p = i + 1
        stack.append((lo, p - 1))
        stack.append((p + 1, hi))
    return out
