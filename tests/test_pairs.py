import numpy as np

from fivewords.masks import letter_mask
from fivewords.pairs import canonicalize_pairs, disjoint_partners, generate_pairs


def _masks(*words):
    return np.array(sorted(letter_mask(w) for w in words), dtype=np.uint32)


def test_partners_exclude_shared_letters():
    masks = _masks("abcde", "fghij", "efghi")
    partners = disjoint_partners(masks, np.uint32(letter_mask("abcde")))
    assert list(partners) == [letter_mask("fghij")]


def test_every_unordered_pair_of_a_cover_is_found(cover_words):
    pairs = generate_pairs(_masks(*cover_words), workers=1, progress=False)
    assert len(pairs) == 10
    for k in range(len(pairs)):
        a, b = pairs.representative(k)
        assert a & b == 0
        assert a | b == int(pairs.unions[k])


def test_unions_sorted_and_unique(cover_words):
    pairs = generate_pairs(_masks(*cover_words, "stare", "plonk"), workers=1, progress=False)
    unions = list(pairs.unions)
    assert unions == sorted(set(unions))


def test_shared_union_keeps_smallest_representative():
    a, b = letter_mask("abcde"), letter_mask("fghij")
    c, d = letter_mask("abcdf"), letter_mask("eghij")
    pairs = generate_pairs(_masks("abcde", "fghij", "abcdf", "eghij"), workers=1, progress=False)

    assert len(pairs) == 1
    assert pairs.representative(0) == (min(a, b), max(a, b))
    assert pairs.siblings(0) == sorted([(min(a, b), max(a, b)), (min(c, d), max(c, d))])


def test_canonicalize_collapses_reversed_pairs():
    a, b = letter_mask("abcde"), letter_mask("fghij")
    pairs = canonicalize_pairs([a, b], [b, a])
    assert len(pairs) == 1
    assert pairs.siblings(0) == [(a, b)]


def test_no_masks_no_pairs():
    pairs = generate_pairs(np.empty(0, dtype=np.uint32), workers=1, progress=False)
    assert len(pairs) == 0


def test_pool_matches_in_process(cover_words):
    masks = _masks(*cover_words, "stare", "plonk", "chump")
    serial = generate_pairs(masks, workers=1, progress=False)
    pooled = generate_pairs(masks, workers=2, chunk_size=1, progress=False)
    assert list(serial.unions) == list(pooled.unions)
    assert list(serial.firsts) == list(pooled.firsts)
    assert list(serial.seconds) == list(pooled.seconds)
