"""Priority heaps used by the shortest-path algorithms."""

from transitnet.heap.pairing import HeapHandle, PairingHeap

__all__ = ["HeapHandle", "PairingHeap"]
