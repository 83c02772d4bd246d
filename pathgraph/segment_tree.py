"""Range-sum segment tree with point updates.

The tree is stored bottom-up in a flat list of ``2 * n`` slots: leaves live at
``n .. 2n - 1`` and every internal slot ``i`` holds ``tree[2i] + tree[2i + 1]``.
Build, query and update are all loops, so the tree depth never touches the
interpreter's recursion limit.

Example:
    >>> tree = SegmentTree([1, 3, 5, 7, 9, 11])
    >>> tree.range_sum(0, 1)
    4
    >>> tree.point_update(1, 9)
    >>> tree.range_sum(0, 1)
    10
"""

from __future__ import annotations

from typing import Iterable, List, Union

from pathgraph.errors import OutOfRange
from pathgraph.logging import get_logger

logger = get_logger(__name__)

Number = Union[int, float]


class SegmentTree:
    """Sums over inclusive index ranges of a fixed-length sequence."""

    def __init__(self, values: Iterable[Number]) -> None:
        """Build the tree in O(n).

        Args:
            values: Initial values. Their length fixes the size of the tree.
        """
        leaves = list(values)
        self._size = len(leaves)
        self._tree: List[Number] = [0] * self._size + leaves
        for i in range(self._size - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]
        logger.debug(f"Built segment tree over {self._size} values")

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.values!r})"

    @property
    def values(self) -> List[Number]:
        """Current values, as a new list."""
        return self._tree[self._size :]

    def _check_index(self, index: int) -> None:
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < self._size
        ):
            raise OutOfRange(index, self._size)

    def range_sum(self, start: int, end: int) -> Number:
        """Return ``values[start] + ... + values[end]`` (both inclusive).

        Raises:
            OutOfRange: If ``start`` or ``end`` is not a valid index.
            ValueError: If ``start > end``.
        """
        self._check_index(start)
        self._check_index(end)
        if start > end:
            raise ValueError(f"Range start {start} is greater than end {end}")

        total: Number = 0
        lo = start + self._size
        hi = end + self._size + 1
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo >>= 1
            hi >>= 1
        return total

    def point_update(self, index: int, new_value: Number) -> None:
        """Replace ``values[index]`` with ``new_value``.

        Raises:
            OutOfRange: If ``index`` is not a valid index.
        """
        self._check_index(index)
        pos = index + self._size
        self._tree[pos] = new_value
        pos >>= 1
        while pos >= 1:
            self._tree[pos] = self._tree[2 * pos] + self._tree[2 * pos + 1]
            pos >>= 1
