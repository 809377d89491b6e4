"""Candidate generation by atomic edits (deletion, transposition, replacement, insertion)."""
from typing import Set

from .tokenizer import DEFAULT_ALPHABET


def edits1(word: str, alphabet: str = DEFAULT_ALPHABET) -> Set[str]:
    """All strings one edit away from `word`."""
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    deletes = [L + R[1:] for L, R in splits if R]
    transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
    replaces = [L + c + R[1:] for L, R in splits if R for c in alphabet]
    inserts = [L + c + R for L, R in splits for c in alphabet]
    return set(deletes + transposes + replaces + inserts)


def edits2(word: str, alphabet: str = DEFAULT_ALPHABET) -> Set[str]:
    """All strings two edits away from `word`."""
    return {e2 for e1 in edits1(word, alphabet) for e2 in edits1(e1, alphabet)}


def max_edits1(length: int, alphabet_size: int = len(DEFAULT_ALPHABET)) -> int:
    """Upper bound on len(edits1(w)) for a word of the given length."""
    if length == 0:
        return alphabet_size
    return length + (length - 1) + length * alphabet_size + (length + 1) * alphabet_size
