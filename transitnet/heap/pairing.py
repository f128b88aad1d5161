"""Pairing heap with stable handles and decrease-key.

Nodes live in an arena of parallel lists indexed by slot number. Links between
nodes are slot indices, so meld and subtree detachment are plain index
reassignments. A slot is never reused within one heap; once its entry is
removed by ``delete_min`` the handle pointing at it is permanently invalid.

Link layout per slot:
    child:   leftmost child, or ``NIL``.
    sibling: right sibling, or ``NIL``.
    prev:    parent when the node is a leftmost child, otherwise its left
             sibling; ``NIL`` for the root.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, List, Tuple, Union

from transitnet.exceptions import EmptyHeapError, InvalidHandleError

Key = Union[int, float]

NIL = -1

_heap_ids = count()


@dataclass(frozen=True)
class HeapHandle:
    """Opaque reference to one heap entry.

    Attributes:
        slot: Arena index of the entry.
        heap_id: Identifier of the heap that issued the handle.
    """

    slot: int
    heap_id: int


class PairingHeap:
    """Min-ordered pairing heap over ``(key, payload)`` entries.

    Amortized costs: ``insert`` and ``find_min`` O(1), ``decrease_key`` and
    ``delete_min`` O(log n). On equal keys a meld keeps the current root.
    """

    def __init__(self) -> None:
        self._id: int = next(_heap_ids)
        self._keys: List[Key] = []
        self._payloads: List[Any] = []
        self._child: List[int] = []
        self._sibling: List[int] = []
        self._prev: List[int] = []
        self._alive: List[bool] = []
        self._root: int = NIL
        self._size: int = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, handle: object) -> bool:
        """Return True if ``handle`` refers to an entry still in this heap."""
        return (
            isinstance(handle, HeapHandle)
            and handle.heap_id == self._id
            and 0 <= handle.slot < len(self._alive)
            and self._alive[handle.slot]
        )

    def is_empty(self) -> bool:
        return self._size == 0

    #
    # Public operations
    #
    def insert(self, key: Key, payload: Any = None) -> HeapHandle:
        """Add a new entry and return its handle.

        Args:
            key: Priority of the entry; smaller is extracted first.
            payload: Arbitrary value carried by the entry.

        Returns:
            HeapHandle: Stable reference used by ``decrease_key``.
        """
        slot = len(self._keys)
        self._keys.append(key)
        self._payloads.append(payload)
        self._child.append(NIL)
        self._sibling.append(NIL)
        self._prev.append(NIL)
        self._alive.append(True)

        if self._root == NIL:
            self._root = slot
        else:
            self._root = self._meld(self._root, slot)
        self._size += 1
        return HeapHandle(slot, self._id)

    def find_min(self) -> HeapHandle:
        """Return the handle of the entry with the smallest key.

        Raises:
            EmptyHeapError: If the heap has no entries.
        """
        if self._root == NIL:
            raise EmptyHeapError("find_min: heap is empty")
        return HeapHandle(self._root, self._id)

    def delete_min(self) -> Tuple[Key, Any]:
        """Remove the root entry and return its ``(key, payload)``.

        The root's children are melded pairwise left to right, then the
        resulting trees are melded right to left into the new root.

        Raises:
            EmptyHeapError: If the heap has no entries.
        """
        root = self._root
        if root == NIL:
            raise EmptyHeapError("delete_min: heap is empty")

        subtrees: List[int] = []
        node = self._child[root]
        while node != NIL:
            next_node = self._sibling[node]
            self._prev[node] = NIL
            self._sibling[node] = NIL
            subtrees.append(node)
            node = next_node

        self._child[root] = NIL
        self._alive[root] = False
        self._size -= 1

        # First pass: pair up neighbours left to right
        paired: List[int] = []
        for i in range(0, len(subtrees) - 1, 2):
            paired.append(self._meld(subtrees[i], subtrees[i + 1]))
        if len(subtrees) % 2:
            paired.append(subtrees[-1])

        # Second pass: fold right to left
        new_root = NIL
        if paired:
            new_root = paired[-1]
            for tree in reversed(paired[:-1]):
                new_root = self._meld(tree, new_root)
        self._root = new_root

        payload = self._payloads[root]
        self._payloads[root] = None
        return self._keys[root], payload

    def decrease_key(self, handle: HeapHandle, new_key: Key) -> None:
        """Lower the key of an active entry.

        Args:
            handle: Handle returned by ``insert``.
            new_key: Replacement key; must not exceed the current key.

        Raises:
            InvalidHandleError: If the handle is stale or foreign, or if
                ``new_key`` is greater than the current key.
        """
        slot = self._check(handle, "decrease_key")
        if new_key > self._keys[slot]:
            raise InvalidHandleError(
                f"decrease_key: new key {new_key} is greater than "
                f"current key {self._keys[slot]}"
            )
        self._keys[slot] = new_key
        if slot == self._root:
            return
        self._detach(slot)
        self._root = self._meld(self._root, slot)

    def key(self, handle: HeapHandle) -> Key:
        """Return the current key of an active entry."""
        return self._keys[self._check(handle, "key")]

    def payload(self, handle: HeapHandle) -> Any:
        """Return the payload of an active entry."""
        return self._payloads[self._check(handle, "payload")]

    #
    # Internals
    #
    def _check(self, handle: HeapHandle, op: str) -> int:
        if handle not in self:
            raise InvalidHandleError(f"{op}: handle {handle!r} is not active")
        return handle.slot

    def _meld(self, a: int, b: int) -> int:
        """Meld two roots and return the winner; ``a`` wins ties."""
        if self._keys[b] < self._keys[a]:
            a, b = b, a
        first_child = self._child[a]
        self._sibling[b] = first_child
        if first_child != NIL:
            self._prev[first_child] = b
        self._prev[b] = a
        self._child[a] = b
        return a

    def _detach(self, slot: int) -> None:
        """Cut the subtree rooted at ``slot`` out of its parent's child list."""
        prev = self._prev[slot]
        next_sibling = self._sibling[slot]
        if self._child[prev] == slot:
            self._child[prev] = next_sibling
        else:
            self._sibling[prev] = next_sibling
        if next_sibling != NIL:
            self._prev[next_sibling] = prev
        self._prev[slot] = NIL
        self._sibling[slot] = NIL
