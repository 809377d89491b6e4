from typing import Iterable, Optional

from .edits import edits1, edits2
from .frequency import FrequencyModel
from .tokenizer import DEFAULT_ALPHABET


def best_candidate(candidates: Iterable[str], model: FrequencyModel) -> Optional[str]:
    """Most frequent known candidate; equal counts go to the lexicographically smallest."""
    known = [w for w in candidates if model.contains(w)]
    if not known:
        return None
    # Comparing counts is the same as comparing probabilities (shared total).
    return min(known, key=lambda w: (-model.count(w), w))


def select(word: str, model: FrequencyModel, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Pick the correction for an already-normalized word.

    Tiers are tried in order and the first hit wins: the word itself, then
    the best known word one edit away, then two edits away. Frequency only
    ranks candidates inside a tier. With no hit the word comes back as is.
    """
    if not word or model.total == 0 or model.contains(word):
        return word

    best = best_candidate(edits1(word, alphabet), model)
    if best is None:
        best = best_candidate(edits2(word, alphabet), model)
    return best if best is not None else word
