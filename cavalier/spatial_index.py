"""Packed Hilbert R-tree for static sets of axis aligned bounding boxes."""

from __future__ import annotations

import math
from typing import Callable, List

ItemVisitor = Callable[[int], bool]
BoxVisitor = Callable[[int, float, float, float, float], bool]


def hilbert_xy_to_index(x: int, y: int) -> int:
    """Map 16-bit coordinates (x, y) to their index along a Hilbert curve."""
    a = x ^ y
    b = 0xFFFF ^ a
    c = 0xFFFF ^ (x | y)
    d = x & (y ^ 0xFFFF)

    big_a = a | (b >> 1)
    big_b = (a >> 1) ^ a
    big_c = ((c >> 1) ^ (b & (d >> 1))) ^ c
    big_d = ((a & (c >> 1)) ^ (d >> 1)) ^ d

    a, b, c, d = big_a, big_b, big_c, big_d
    big_a = (a & (a >> 2)) ^ (b & (b >> 2))
    big_b = (a & (b >> 2)) ^ (b & ((a ^ b) >> 2))
    big_c ^= (a & (c >> 2)) ^ (b & (d >> 2))
    big_d ^= (b & (c >> 2)) ^ ((a ^ b) & (d >> 2))

    a, b, c, d = big_a, big_b, big_c, big_d
    big_a = (a & (a >> 4)) ^ (b & (b >> 4))
    big_b = (a & (b >> 4)) ^ (b & ((a ^ b) >> 4))
    big_c ^= (a & (c >> 4)) ^ (b & (d >> 4))
    big_d ^= (b & (c >> 4)) ^ ((a ^ b) & (d >> 4))

    a, b, c, d = big_a, big_b, big_c, big_d
    big_c ^= (a & (c >> 8)) ^ (b & (d >> 8))
    big_d ^= (b & (c >> 8)) ^ ((a ^ b) & (d >> 8))

    a = big_c ^ (big_c >> 1)
    b = big_d ^ (big_d >> 1)

    i0 = x ^ y
    i1 = b | (0xFFFF ^ (i0 | a))

    i0 = (i0 | (i0 << 8)) & 0x00FF00FF
    i0 = (i0 | (i0 << 4)) & 0x0F0F0F0F
    i0 = (i0 | (i0 << 2)) & 0x33333333
    i0 = (i0 | (i0 << 1)) & 0x55555555

    i1 = (i1 | (i1 << 8)) & 0x00FF00FF
    i1 = (i1 | (i1 << 4)) & 0x0F0F0F0F
    i1 = (i1 | (i1 << 2)) & 0x33333333
    i1 = (i1 | (i1 << 1)) & 0x55555555

    return ((i1 << 1) | i0) & 0xFFFFFFFF


_HILBERT_MAX = float((1 << 16) - 1)


class StaticSpatialIndex:
    """Spatial index over a fixed number of boxes.

    Add exactly ``num_items`` boxes with :meth:`add`, call :meth:`finish`, then
    query. Items are identified by the order in which they were added.
    """

    def __init__(self, num_items: int, node_size: int = 16) -> None:
        if num_items <= 0:
            raise ValueError("number of items must be greater than 0")
        if not 2 <= node_size <= 65535:
            raise ValueError("node size must be between 2 and 65535")

        self._node_size = node_size
        self._num_items = num_items
        n = num_items
        num_nodes = num_items
        self._level_bounds: List[int] = [n * 4]
        while True:
            n = -(-n // node_size)
            num_nodes += n
            self._level_bounds.append(num_nodes * 4)
            if n == 1:
                break

        self._num_levels = len(self._level_bounds)
        self._num_nodes = num_nodes
        self._boxes: List[float] = [0.0] * (num_nodes * 4)
        self._indices: List[int] = [0] * num_nodes
        self._pos = 0
        self._min_x = math.inf
        self._min_y = math.inf
        self._max_x = -math.inf
        self._max_y = -math.inf

    @property
    def min_x(self) -> float:
        return self._min_x

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_x(self) -> float:
        return self._max_x

    @property
    def max_y(self) -> float:
        return self._max_y

    @property
    def num_items(self) -> int:
        return self._num_items

    @property
    def num_levels(self) -> int:
        return self._num_levels

    def add(self, min_x: float, min_y: float, max_x: float, max_y: float) -> None:
        """Add the next item's bounding box."""
        if self._pos >= self._num_items * 4:
            raise ValueError(f"index is already full ({self._num_items} items)")
        index = self._pos >> 2
        self._indices[index] = index
        self._boxes[self._pos:self._pos + 4] = (min_x, min_y, max_x, max_y)
        self._pos += 4

        self._min_x = min(self._min_x, min_x)
        self._min_y = min(self._min_y, min_y)
        self._max_x = max(self._max_x, max_x)
        self._max_y = max(self._max_y, max_y)

    def _push_node(self, node_index: int, box: tuple) -> None:
        self._indices[self._pos >> 2] = node_index
        self._boxes[self._pos:self._pos + 4] = box
        self._pos += 4

    def finish(self) -> None:
        """Build the tree; every item must have been added."""
        if self._pos >> 2 != self._num_items:
            raise ValueError(
                f"added item count {self._pos >> 2} does not equal the size "
                f"{self._num_items} given"
            )

        extents = (self._min_x, self._min_y, self._max_x, self._max_y)
        if self._num_items <= self._node_size:
            # a single node holds all items, no sorting needed
            self._push_node(0, extents)
            return

        width = self._max_x - self._min_x
        height = self._max_y - self._min_y
        boxes = self._boxes
        values = []
        for i in range(self._num_items):
            bmin_x, bmin_y, bmax_x, bmax_y = boxes[4 * i:4 * i + 4]
            hx = self._hilbert_coord((bmin_x + bmax_x) / 2 - self._min_x, width)
            hy = self._hilbert_coord((bmin_y + bmax_y) / 2 - self._min_y, height)
            values.append(hilbert_xy_to_index(hx, hy))

        self._sort(values, 0, self._num_items - 1)

        pos = 0
        for level in range(self._num_levels - 1):
            end = self._level_bounds[level]
            while pos < end:
                node_min_x = node_min_y = math.inf
                node_max_x = node_max_y = -math.inf
                node_index = pos
                count = 0
                while count < self._node_size and pos < end:
                    bmin_x, bmin_y, bmax_x, bmax_y = boxes[pos:pos + 4]
                    pos += 4
                    count += 1
                    node_min_x = min(node_min_x, bmin_x)
                    node_min_y = min(node_min_y, bmin_y)
                    node_max_x = max(node_max_x, bmax_x)
                    node_max_y = max(node_max_y, bmax_y)
                self._push_node(node_index, (node_min_x, node_min_y, node_max_x, node_max_y))

    @staticmethod
    def _hilbert_coord(offset: float, span: float) -> int:
        if span == 0:
            return 0
        return int(math.floor(_HILBERT_MAX * offset / span))

    def _sort(self, values: List[int], left: int, right: int) -> None:
        """Partial quicksort of items by Hilbert value, down to node size buckets."""
        node_size = self._node_size
        pending = [(left, right)]
        while pending:
            left, right = pending.pop()
            if left // node_size >= right // node_size:
                continue
            pivot = values[(left + right) >> 1]
            i = left - 1
            j = right + 1
            while True:
                i += 1
                while values[i] < pivot:
                    i += 1
                j -= 1
                while values[j] > pivot:
                    j -= 1
                if i >= j:
                    break
                self._swap(values, i, j)
            pending.append((j + 1, right))
            pending.append((left, j))

    def _swap(self, values: List[int], i: int, j: int) -> None:
        values[i], values[j] = values[j], values[i]
        k, m = 4 * i, 4 * j
        boxes = self._boxes
        boxes[k:k + 4], boxes[m:m + 4] = boxes[m:m + 4], boxes[k:k + 4]
        self._indices[i], self._indices[j] = self._indices[j], self._indices[i]

    def _require_finished(self) -> None:
        if self._pos != 4 * self._num_nodes:
            raise RuntimeError("data not yet indexed - call finish() before querying")

    def visit_bounding_boxes(self, visitor: BoxVisitor) -> None:
        """Visit every node and item box as visitor(level, min_x, min_y, max_x, max_y).

        Visiting stops early when the visitor returns False.
        """
        self._require_finished()
        node_index = 4 * self._num_nodes - 4
        level = self._num_levels - 1
        stack: List[tuple] = []
        boxes = self._boxes
        while True:
            end = min(node_index + self._node_size * 4, self._level_bounds[level])
            for pos in range(node_index, end, 4):
                index = self._indices[pos >> 2]
                if not visitor(level, *boxes[pos:pos + 4]):
                    return
                if node_index >= self._num_items * 4:
                    stack.append((index, level - 1))
            if not stack:
                return
            node_index, level = stack.pop()

    def visit_item_boxes(self, visitor: BoxVisitor) -> None:
        """Visit each added item box as visitor(index, min_x, min_y, max_x, max_y).

        Visiting stops early when the visitor returns False.
        """
        boxes = self._boxes
        for i in range(0, min(self._pos, self._level_bounds[0]), 4):
            if not visitor(self._indices[i >> 2], *boxes[i:i + 4]):
                return

    def visit_query(
        self, min_x: float, min_y: float, max_x: float, max_y: float, visitor: ItemVisitor
    ) -> None:
        """Call visitor(index) for every item whose box overlaps the query box.

        The query stops early when the visitor returns False.
        """
        self._require_finished()
        node_index = 4 * self._num_nodes - 4
        level = self._num_levels - 1
        stack: List[tuple] = []
        boxes = self._boxes
        leaf_end = self._num_items * 4
        while True:
            end = min(node_index + self._node_size * 4, self._level_bounds[level])
            for pos in range(node_index, end, 4):
                if (
                    max_x < boxes[pos]
                    or max_y < boxes[pos + 1]
                    or min_x > boxes[pos + 2]
                    or min_y > boxes[pos + 3]
                ):
                    continue
                index = self._indices[pos >> 2]
                if node_index < leaf_end:
                    if not visitor(index):
                        return
                else:
                    stack.append((index, level - 1))
            if not stack:
                return
            node_index, level = stack.pop()

    def query(self, min_x: float, min_y: float, max_x: float, max_y: float) -> List[int]:
        """Indexes of all items whose boxes overlap the query box."""
        results: List[int] = []

        def collect(index: int) -> bool:
            results.append(index)
            return True

        self.visit_query(min_x, min_y, max_x, max_y, collect)
        return results