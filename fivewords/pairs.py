"""
pairs.py

Builds the table of letter-disjoint mask pairs.

Every ordered (m1, m2) over the full cross product of unique masks is tested
for m1 & m2 == 0. Pairs are then collapsed by their union m1 | m2: the
downstream search only ever looks at the union, so one representative per
union is enough to drive it. The lexicographically smallest (m1, m2) is
kept as representative.

The unordered siblings sharing a union are kept as well, sorted by union,
so a quad built from a representative can be expanded back into every
decomposition of its letters.
"""

import numpy as np

from fivewords.pool import chunk_ranges, run_chunks, worker_state


DEFAULT_CHUNK_SIZE = 64


class PairSet:
    """
    Canonical disjoint pairs, sorted by union.

    Attributes:
        unions: sorted unique union masks
        firsts, seconds: representative pair for each union
    """

    def __init__(self, unions, firsts, seconds, sibling_unions, sibling_firsts, sibling_seconds):
        self.unions = unions
        self.firsts = firsts
        self.seconds = seconds
        self._sibling_unions = sibling_unions
        self._sibling_firsts = sibling_firsts
        self._sibling_seconds = sibling_seconds

    def __len__(self):
        return int(self.unions.size)

    def representative(self, k):
        return int(self.firsts[k]), int(self.seconds[k])

    def sibling_arrays(self):
        return self._sibling_unions, self._sibling_firsts, self._sibling_seconds

    def siblings(self, k):
        """Every unordered pair (a, b), a < b, whose union is unions[k]."""
        return pairs_with_union(self.sibling_arrays(), self.unions[k])


def pairs_with_union(sibling_arrays, union):
    sibling_unions, sibling_firsts, sibling_seconds = sibling_arrays
    lo = np.searchsorted(sibling_unions, union, side="left")
    hi = np.searchsorted(sibling_unions, union, side="right")
    return [
        (int(a), int(b))
        for a, b in zip(sibling_firsts[lo:hi], sibling_seconds[lo:hi])
    ]


def disjoint_partners(masks, m1):
    """Masks sharing no letter with m1."""
    return masks[(masks & m1) == 0]


def _pairs_for_chunk(task):
    start, end = task
    masks = worker_state()["masks"]
    firsts = []
    seconds = []

    for idx in range(start, end):
        m1 = masks[idx]
        partners = disjoint_partners(masks, m1)
        if partners.size:
            firsts.append(np.full(partners.size, m1, dtype=np.uint32))
            seconds.append(partners)

    if not firsts:
        empty = np.empty(0, dtype=np.uint32)
        return empty, empty
    return np.concatenate(firsts), np.concatenate(seconds)


def _sort_by_union(firsts, seconds):
    unions = firsts | seconds
    # lexsort uses the last key as the primary one
    order = np.lexsort((seconds, firsts, unions))
    return unions[order], firsts[order], seconds[order]


def canonicalize_pairs(firsts, seconds):
    """
    Collapse raw disjoint pairs to one representative per union.

    Returns a PairSet whose unions are sorted ascending.
    """
    firsts = np.asarray(firsts, dtype=np.uint32)
    seconds = np.asarray(seconds, dtype=np.uint32)

    unions, firsts, seconds = _sort_by_union(firsts, seconds)
    first_of_union = np.ones(unions.size, dtype=bool)
    first_of_union[1:] = unions[1:] != unions[:-1]

    unordered = firsts < seconds
    return PairSet(
        unions[first_of_union],
        firsts[first_of_union],
        seconds[first_of_union],
        unions[unordered],
        firsts[unordered],
        seconds[unordered],
    )


def generate_pairs(masks, workers=None, chunk_size=DEFAULT_CHUNK_SIZE, progress=True):
    """
    Enumerate every disjoint pair of `masks` and canonicalize by union.

    The outer mask is split into chunks of `chunk_size` and spread over
    `workers` processes; each scans the full mask array for partners.
    """
    masks = np.asarray(masks, dtype=np.uint32)
    tasks = chunk_ranges(masks.size, chunk_size)
    firsts = []
    seconds = []

    for chunk_firsts, chunk_seconds in run_chunks(
        _pairs_for_chunk,
        tasks,
        {"masks": masks},
        workers=workers,
        desc="Pairs",
        progress=progress,
    ):
        firsts.append(chunk_firsts)
        seconds.append(chunk_seconds)

    if firsts:
        firsts = np.concatenate(firsts)
        seconds = np.concatenate(seconds)
    else:
        firsts = seconds = np.empty(0, dtype=np.uint32)

    return canonicalize_pairs(firsts, seconds)
