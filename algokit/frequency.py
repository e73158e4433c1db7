"""Character frequency sorting built on a Huffman tree."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from itertools import count
from typing import Optional


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a character."""

    freq: int
    char: str = ""
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None

    def leaves(self) -> Iterator["HuffmanNode"]:
        """Yield the leaves below this node, left to right."""
        if self.is_leaf():
            yield self
            return
        for child in (self.left, self.right):
            if child is not None:
                yield from child.leaves()


def build_huffman_tree(frequencies: Mapping[str, int]) -> HuffmanNode:
    """Build a Huffman tree from a mapping of characters to counts.

    Characters with a count of zero or less are left out.
    """
    order = count()
    heap = [
        (freq, next(order), HuffmanNode(freq=freq, char=char))
        for char, freq in frequencies.items()
        if freq > 0
    ]
    if not heap:
        raise ValueError("at least one character must have a positive count")
    heapq.heapify(heap)

    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        merged = HuffmanNode(freq=left_freq + right_freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, next(order), merged))

    return heap[0][2]


def frequency_sort(s: str) -> str:
    """Return ``s`` rearranged so that more frequent characters come first."""
    if not s:
        return ""
    root = build_huffman_tree(Counter(s))
    ranked = sorted(root.leaves(), key=lambda leaf: leaf.freq, reverse=True)
    return "".join(leaf.char * leaf.freq for leaf in ranked)