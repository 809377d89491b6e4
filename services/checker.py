"""Norvig-style spelling corrector: train on text, then correct single words.

See http://norvig.com/spell-correct.html
"""
from typing import Iterable, List, Mapping, Tuple, Union

from .frequency import FrequencyModel
from .rwlock import ReadWriteLock
from .selector import select
from .tokenizer import DEFAULT_ALPHABET, normalize_alphabet, normalize_word, tokenize


class Checker:
    def __init__(self, alphabet: str = DEFAULT_ALPHABET):
        self.alphabet = normalize_alphabet(alphabet)
        self.model = FrequencyModel()
        self._lock = ReadWriteLock()

    def normalize(self, word: str) -> str:
        return normalize_word(word, self.alphabet)

    def train(self, text: str) -> None:
        """Count every word in `text`. Repeated calls keep accumulating."""
        words = tokenize(text, self.alphabet)
        with self._lock.write():
            self.model.train(words)

    def load_counts(self, counts: Union[Mapping[str, int], Iterable[Tuple[str, int]]]) -> None:
        items = counts.items() if isinstance(counts, Mapping) else counts
        merged = {}
        for word, count in items:
            count = int(count)
            if count < 0:
                raise ValueError(f"negative count for {word!r}: {count}")
            key = self.normalize(word)
            merged[key] = merged.get(key, 0) + count
        with self._lock.write():
            self.model.update(merged)

    def correct(self, word: str) -> str:
        w = self.normalize(word)
        with self._lock.read():
            return select(w, self.model, self.alphabet)

    def count(self, word: str) -> int:
        with self._lock.read():
            return self.model.count(self.normalize(word))

    def probability(self, word: str) -> float:
        with self._lock.read():
            return self.model.probability(self.normalize(word))

    def contains(self, word: str) -> bool:
        with self._lock.read():
            return self.model.contains(self.normalize(word))

    def most_common(self, n: int = 10) -> List[Tuple[str, int]]:
        with self._lock.read():
            return self.model.most_common(n)

    def stats(self) -> dict:
        with self._lock.read():
            return {"words": len(self.model), "total": self.model.total}

    def __contains__(self, word) -> bool:
        return self.contains(word)
