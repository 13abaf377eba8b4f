"""
masks.py

Encodes words as 26-bit letter-presence masks.

Bit i of a mask is set when letter chr(ord('a') + i) occurs in the word.
Two words share no letter exactly when their masks AND to zero, which is
the only test the search ever needs.
"""

ALPHABET_SIZE = 26
ALL_LETTERS_MASK = (1 << ALPHABET_SIZE) - 1


def letter_mask(word: str) -> int:
    """
    Return the letter mask of `word`.

    The word is case-folded first (ASCII only). Repeated letters leave their
    bit set, so the popcount of the result is the number of distinct letters.
    Raises ValueError on anything outside a-z.
    """
    if not word.isascii():
        raise ValueError(f"Unsupported word: {word!r} (use a-z)")

    mask = 0
    for ch in word.lower():
        if not "a" <= ch <= "z":
            raise ValueError(f"Unsupported char: {ch!r} (use a-z)")
        mask |= 1 << (ord(ch) - ord("a"))
    return mask


def popcount(mask: int) -> int:
    return bin(int(mask)).count("1")
