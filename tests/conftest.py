import pytest


COVER = ["fjord", "gucks", "nymph", "vibex", "waltz"]


@pytest.fixture
def cover_words():
    return list(COVER)
