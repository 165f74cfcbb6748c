"""Ordered index port - Name-sorted enumeration of stations.

The index is a presentation aid only: it lists station names in
ascending order and is never consulted for path computation.
"""

from __future__ import annotations

from typing import List, Protocol


class OrderedIndexPort(Protocol):
    """Port for the name-ordered station index.

    Implementations:
    - adapters/index/bst_index.py (BinarySearchTreeIndex)
    - adapters/index/sorted_index.py (SortedListIndex)
    """

    def insert(self, name: str) -> None:
        """Add a name to the index. Exact duplicates are ignored.

        Args:
            name: The station name.
        """
        ...

    def remove(self, name: str) -> bool:
        """Remove a name from the index.

        Args:
            name: The station name.

        Returns:
            True if the name was present and removed, False otherwise.
        """
        ...

    def in_order(self) -> List[str]:
        """Return all names in ascending lexicographic order."""
        ...

    def __contains__(self, name: object) -> bool: ...

    def __len__(self) -> int: ...
