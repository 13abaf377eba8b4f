"""
pool.py

Fans chunked index ranges out over a process pool.

Each worker receives the shared, read-only search state once through the
pool initializer and then processes (start, end) tasks independently.
Results stream back to the parent in completion order.
"""

import multiprocessing as mp
import os
import sys

from tqdm import tqdm


_WORKER_STATE = {}


def _init_worker(state):
    _WORKER_STATE.clear()
    _WORKER_STATE.update(state)


def worker_state():
    return _WORKER_STATE


def chunk_ranges(total, chunk_size):
    """Split range(total) into (start, end) tasks of at most chunk_size."""
    chunk_size = max(1, int(chunk_size))
    return [
        (start, min(start + chunk_size, total))
        for start in range(0, total, chunk_size)
    ]


def resolve_workers(workers):
    worker_count = workers if workers is not None else (os.cpu_count() or 1)
    return max(1, int(worker_count))


def run_chunks(fn, tasks, state, workers=None, desc=None, progress=True):
    """
    Apply `fn` to every task, yielding results as they complete.

    With a single worker the tasks run in-process, in order. Otherwise a
    pool is started with the fork start method where available.
    """
    worker_count = resolve_workers(workers)
    bar = tqdm(
        total=len(tasks),
        desc=desc,
        unit="chunk",
        file=sys.stderr,
        disable=not progress,
    )

    try:
        if worker_count == 1 or len(tasks) <= 1:
            _init_worker(state)
            for task in tasks:
                result = fn(task)
                bar.update(1)
                yield result
            return

        start_methods = mp.get_all_start_methods()
        start_method = "fork" if "fork" in start_methods else "spawn"
        ctx = mp.get_context(start_method)

        with ctx.Pool(
            processes=worker_count,
            initializer=_init_worker,
            initargs=(state,),
        ) as pool:
            for result in pool.imap_unordered(fn, tasks, chunksize=1):
                bar.update(1)
                yield result
    finally:
        bar.close()
