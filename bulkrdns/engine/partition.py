"""
Static work partitioning
"""

from typing import Sequence


def partition(items: Sequence[str], count: int) -> list[list[str]]:
    """
    Split items into `count` round-robin partitions.

    items[i] goes to partition i % count. Order inside each partition
    follows the input. When there are fewer items than partitions, the
    trailing partitions are empty.

    Args:
        items: Input items in order
        count: Number of partitions (>= 1)

    Returns:
        Exactly `count` lists
    """
    if count < 1:
        raise ValueError(f"partition count must be >= 1, got {count}")

    return [list(items[i::count]) for i in range(count)]
