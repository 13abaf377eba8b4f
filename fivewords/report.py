"""
report.py

Renders combinations for the user.

Two reporters share one interface: BatchReporter collects everything and
prints a single sorted listing at the end, StreamReporter prints each
combination as soon as it is first found. Either way the output is a
list-like envelope with one JSON array of five word groups per line.
"""

import json
import sys


def render_combination(combination, index):
    """One combination as a JSON array of its five word groups."""
    return json.dumps([list(index[mask]) for mask in combination])


def word_combinations(combination, index):
    """Number of word-level answers once anagram groups are expanded."""
    total = 1
    for mask in combination:
        total *= len(index[mask])
    return total


class Reporter:
    def __init__(self, index, stream=None):
        self.index = index
        self.stream = stream if stream is not None else sys.stdout

    def start(self):
        pass

    def emit(self, combination):
        pass

    def finish(self, result_set):
        raise NotImplementedError


class BatchReporter(Reporter):
    def finish(self, result_set):
        lines = [
            render_combination(combination, self.index)
            for combination in result_set.sorted()
        ]
        if not lines:
            self.stream.write("[]\n")
        else:
            self.stream.write("[\n" + ",\n".join(lines) + "\n]\n")
        self.stream.flush()


class StreamReporter(Reporter):
    def __init__(self, index, stream=None):
        super().__init__(index, stream)
        self._emitted = 0

    def start(self):
        self.stream.write("[\n")
        self.stream.flush()

    def emit(self, combination):
        prefix = ",\n" if self._emitted else ""
        self.stream.write(prefix + render_combination(combination, self.index))
        self.stream.flush()
        self._emitted += 1

    def finish(self, result_set):
        self.stream.write("\n]\n" if self._emitted else "]\n")
        self.stream.flush()


def make_reporter(index, incremental=False, stream=None):
    if incremental:
        return StreamReporter(index, stream)
    return BatchReporter(index, stream)
