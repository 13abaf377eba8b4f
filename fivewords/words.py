"""
words.py

Handles loading the word list and grouping eligible words by letter mask.
No search logic here, just clean text handling.
"""

import numpy as np

from fivewords.masks import letter_mask, popcount


WORD_LENGTH = 5


def load_word_list(path):
    """
    Load a newline-separated word list into a Python list.

    Undecodable bytes become U+FFFD, so the line fails the letter check later
    instead of aborting the load.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return [line.strip() for line in f if line.strip()]


def build_mask_index(lines, allow_duplicate_letters=False):
    """
    Group eligible words by their letter mask.

    A line is eligible when it is exactly five characters long, contains only
    letters, and (unless `allow_duplicate_letters` is set) has five distinct
    letters. Everything else is dropped silently.

    Returns:
        dict mapping mask -> tuple of words sharing that mask (an anagram
        group), words in input order.
    """
    groups = {}

    for line in lines:
        word = line.strip()
        if len(word) != WORD_LENGTH:
            continue
        try:
            mask = letter_mask(word)
        except ValueError:
            continue
        if not allow_duplicate_letters and popcount(mask) != WORD_LENGTH:
            continue

        group = groups.setdefault(mask, [])
        if word not in group:
            group.append(word)

    return {mask: tuple(group) for mask, group in groups.items()}


def unique_masks(index) -> np.ndarray:
    """Sorted array of the distinct masks in a mask index."""
    return np.array(sorted(index), dtype=np.uint32)
