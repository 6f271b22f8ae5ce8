"""Hash table with separate chaining on linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from algokit.formatting import format_value
from algokit.linked_list import Node

__all__ = ["HashTable"]


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """A map from keys to values spread over ``num_chains`` linked chains.

    A key's chain is ``hash_function(key) % num_chains``. New keys go to the
    front of their chain.
    """

    def __init__(
        self,
        num_chains: int,
        hash_function: Callable[[Any], int] = hash,
    ) -> None:
        if num_chains <= 0:
            raise ValueError("num_chains must be positive")
        self._table: List[Node] = [Node() for _ in range(num_chains)]
        self._hash = hash_function

    def _slot(self, key: Any) -> int:
        return self._hash(key) % len(self._table)

    def _find(self, key: Any) -> Optional[Node]:
        head = self._table[self._slot(key)]
        return head.find_predecessor(lambda entry: entry.key == key)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        predecessor = self._find(key)
        if predecessor is None:
            self._table[self._slot(key)].insert_after(_Entry(key, value))
        else:
            predecessor.next.value.value = value

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or ``None`` if it is absent."""
        predecessor = self._find(key)
        if predecessor is None:
            return None
        return predecessor.next.value.value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return sum(self.slot_sizes())

    def slot_sizes(self) -> List[int]:
        """Return the number of entries in each chain."""
        return [sum(1 for _ in head) for head in self._table]

    def describe(self, details: bool = False) -> str:
        """Return a report of chain sizes, optionally listing each chain's keys."""
        lines: List[str] = []
        sizes: List[int] = []
        for slot, head in enumerate(self._table):
            entries = list(head)
            sizes.append(len(entries))
            if details:
                keys = "".join(f" '{format_value(entry.key)}'" for entry in entries)
                lines.append(f"Slot {slot} contains{keys} ({len(entries)})")
        average = sum(sizes) / len(sizes)
        lines.append(
            f"Slot sizes: min: {min(sizes)}, max: {max(sizes)}, "
            f"average: {format_value(average)}"
        )
        return "\n".join(lines) + "\n"