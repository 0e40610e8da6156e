"""
Batch helpers for identify.
"""

from typing import List, Sequence, TypeVar

T = TypeVar('T')


def partition(items: Sequence[T], size: int) -> List[List[T]]:
    """
    Split items into consecutive chunks of at most `size` elements.

    The input is not modified. Order is preserved within and across chunks.

    Args:
        items: Sequence to split
        size: Maximum chunk length (>= 1)

    Returns:
        List of chunks, empty when items is empty
    """
    if size < 1:
        raise ValueError(f"Chunk size must be at least 1, got {size}")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def merge(chunks: Sequence[Sequence[T]]) -> List[T]:
    """Concatenate chunk results in chunk order."""
    merged: List[T] = []
    for chunk in chunks:
        merged.extend(chunk)
    return merged
