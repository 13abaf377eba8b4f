"""
results.py

Run-scoped deduplication of five-mask combinations.

The same final answer is reachable through several pair/quad decompositions,
so every candidate is reduced to its sorted mask tuple before insertion.
"""

import threading


def canonical_combination(*masks):
    """Order-independent key for a combination of masks."""
    return tuple(sorted(int(m) for m in masks))


class ResultSet:
    """
    Thread-safe set of unique combinations.

    `add` does the membership check, the optional emit callback and the
    insertion inside one critical section, so a combination is emitted at
    most once and emitted lines never interleave.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._seen = set()
        self.candidates = 0

    def add(self, masks, on_new=None):
        """Insert a combination; return True only on first insertion."""
        key = canonical_combination(*masks)
        with self._lock:
            self.candidates += 1
            if key in self._seen:
                return False
            if on_new is not None:
                on_new(key)
            self._seen.add(key)
            return True

    def __len__(self):
        with self._lock:
            return len(self._seen)

    def __contains__(self, masks):
        key = canonical_combination(*masks)
        with self._lock:
            return key in self._seen

    def sorted(self):
        with self._lock:
            return sorted(self._seen)
