"""Index adapters - Implementations of the OrderedIndexPort.

Available implementations:
- BinarySearchTreeIndex: Unbalanced binary search tree (default)
- SortedListIndex: Sorted list maintained with bisect
"""

from .bst_index import BinarySearchTreeIndex
from .sorted_index import SortedListIndex

__all__ = ["BinarySearchTreeIndex", "SortedListIndex"]
