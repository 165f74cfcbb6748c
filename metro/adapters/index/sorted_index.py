"""Sorted-list ordered index.

Keeps station names in a plain list maintained in sorted order with
``bisect``. Lookups are logarithmic; inserts and removals shift the
tail of the list, which is fast for any realistic network size.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import List


@dataclass
class SortedListIndex:
    """OrderedIndexPort backed by a maintained sorted list."""

    _names: List[str] = field(default_factory=list, repr=False)

    def insert(self, name: str) -> None:
        position = bisect.bisect_left(self._names, name)
        if position < len(self._names) and self._names[position] == name:
            return
        self._names.insert(position, name)

    def remove(self, name: str) -> bool:
        position = bisect.bisect_left(self._names, name)
        if position < len(self._names) and self._names[position] == name:
            del self._names[position]
            return True
        return False

    def in_order(self) -> List[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        position = bisect.bisect_left(self._names, name)
        return position < len(self._names) and self._names[position] == name

    def __len__(self) -> int:
        return len(self._names)
