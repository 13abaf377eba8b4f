"""
search.py

Composes disjoint pairs into quads and extends each quad with a fifth mask.

Pairs are sorted by union. For each outer pair index i, the partners j >= i
whose union is disjoint from pair i form quads; since the pair order inside
a quad does not matter, scanning j < i would only repeat work. Every mask
disjoint from the quad then completes a five-word cover.

The outer index is split into chunks and spread over a process pool. Workers
return their candidate combinations; the parent feeds them through the
run-scoped ResultSet, which decides what gets reported.
"""

import sys
import time

import numpy as np
from tqdm import tqdm

from fivewords.pairs import DEFAULT_CHUNK_SIZE, generate_pairs, pairs_with_union
from fivewords.pool import chunk_ranges, resolve_workers, run_chunks, worker_state
from fivewords.report import make_reporter, word_combinations
from fivewords.results import ResultSet, canonical_combination
from fivewords.words import build_mask_index, unique_masks


PROGRESS_MODES = ("bar", "log", "off")


def _log(message, progress):
    if progress != "off":
        tqdm.write(message, file=sys.stderr)


def compose_quads(unions, i):
    """Indices j in i..n-1 whose union shares no letter with unions[i]."""
    tail = unions[i:]
    return np.nonzero((tail & unions[i]) == 0)[0] + i


def find_fifths(masks, quad_mask):
    """Masks disjoint from a quad; empty when the quad cannot be completed."""
    return masks[(masks & quad_mask) == 0]


def quintets_for_chunk(task):
    start, end = task
    state = worker_state()
    masks = state["masks"]
    unions = state["unions"]
    siblings = state["siblings"]

    candidates = []
    quads = 0
    quintets = 0

    for i in range(start, end):
        u1 = unions[i]
        for j in compose_quads(unions, i):
            quads += 1
            u2 = unions[j]
            fifths = find_fifths(masks, u1 | u2)
            if not fifths.size:
                continue

            quintets += int(fifths.size)
            # Expand both unions into every pair that produces them.
            for a, b in pairs_with_union(siblings, u1):
                for c, d in pairs_with_union(siblings, u2):
                    for m5 in fifths:
                        candidates.append(canonical_combination(a, b, c, d, m5))

    return {
        "completed_i": end - start,
        "quads": quads,
        "quintets": quintets,
        "candidates": candidates,
    }


def run_search(index, reporter=None, workers=None, chunk_size=DEFAULT_CHUNK_SIZE, progress="bar"):
    """
    Search a mask index for every five-mask letter cover.

    Args:
        index: mask -> anagram group, as built by build_mask_index
        reporter: optional Reporter; its emit is called for each new
            combination under the ResultSet lock
        workers: worker processes (default: CPU count)
        chunk_size: outer indices per worker task
        progress: one of PROGRESS_MODES

    Returns:
        dict of run statistics, including the ResultSet under "results".
    """
    start_time = time.time()
    show_bar = progress == "bar"
    worker_count = resolve_workers(workers)

    masks = unique_masks(index)
    n_words = sum(len(group) for group in index.values())
    _log(f"Collected {n_words:,} words in {masks.size:,} letter masks.", progress)

    pairs = generate_pairs(masks, workers=worker_count, chunk_size=chunk_size, progress=show_bar)
    _log(f"Found {len(pairs):,} disjoint pairs (unique unions).", progress)

    state = {
        "masks": masks,
        "unions": pairs.unions,
        "siblings": pairs.sibling_arrays(),
    }
    tasks = chunk_ranges(len(pairs), chunk_size)
    results = ResultSet()
    on_new = reporter.emit if reporter is not None else None
    stats = {
        "words": n_words,
        "masks": int(masks.size),
        "pairs": len(pairs),
        "completed_i": 0,
        "quads": 0,
        "quintets": 0,
    }

    _log(
        f"Starting quad search using {worker_count} worker(s), chunk size {chunk_size}...",
        progress,
    )
    if reporter is not None:
        reporter.start()

    for result in run_chunks(
        quintets_for_chunk,
        tasks,
        state,
        workers=worker_count,
        desc="Quads",
        progress=show_bar,
    ):
        stats["completed_i"] += result["completed_i"]
        stats["quads"] += result["quads"]
        stats["quintets"] += result["quintets"]
        for combination in result["candidates"]:
            results.add(combination, on_new)

    if reporter is not None:
        reporter.finish(results)

    stats["candidates"] = results.candidates
    stats["unique"] = len(results)
    stats["word_combinations"] = sum(
        word_combinations(combination, index) for combination in results.sorted()
    )
    stats["elapsed"] = time.time() - start_time
    stats["results"] = results

    _log(
        f"Examined {stats['quads']:,} quads, {stats['candidates']:,} candidate combinations.",
        progress,
    )
    _log(f"Unique combinations: {stats['unique']:,}", progress)
    _log(f"With anagrams:       {stats['word_combinations']:,}", progress)
    _log(f"Elapsed: {stats['elapsed']:.1f} s", progress)
    return stats


def find_combinations(lines, allow_duplicate_letters=False, incremental=None, stream=None, **kwargs):
    """
    Build the mask index from raw lines and run the search on it.

    When `incremental` is given, results are also rendered to `stream` by
    the matching reporter (streaming when True, one listing when False).
    """
    index = build_mask_index(lines, allow_duplicate_letters=allow_duplicate_letters)
    reporter = None
    if incremental is not None:
        reporter = make_reporter(index, incremental=incremental, stream=stream)
    return index, run_search(index, reporter=reporter, **kwargs)
