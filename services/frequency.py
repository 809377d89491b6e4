import logging
from typing import Dict, Iterable, List, Mapping, Tuple, Union

logger = logging.getLogger(__name__)


class FrequencyModel:
    """Word -> occurrence count, plus the running total of all counts.

    Counts only grow. A word with no entry has count 0 and is not known.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self.total = 0

    def train(self, words: Iterable[str]) -> None:
        added = 0
        for word in words:
            self._counts[word] = self._counts.get(word, 0) + 1
            added += 1
        self.total += added
        logger.debug("trained on %d tokens (total=%d)", added, self.total)

    def update(self, counts: Union[Mapping[str, int], Iterable[Tuple[str, int]]]) -> None:
        """Add precomputed counts, e.g. from a word-frequency list."""
        items = counts.items() if isinstance(counts, Mapping) else counts
        pending = []
        for word, count in items:
            count = int(count)
            if count < 0:
                raise ValueError(f"negative count for {word!r}: {count}")
            if word and count:
                pending.append((word, count))
        # Validate everything first so a bad entry leaves the model untouched.
        for word, count in pending:
            self._counts[word] = self._counts.get(word, 0) + count
            self.total += count

    def count(self, word: str) -> int:
        return self._counts.get(word, 0)

    def probability(self, word: str) -> float:
        if self.total <= 0:
            return 0.0
        return self.count(word) / self.total

    def contains(self, word: str) -> bool:
        return self.count(word) > 0

    def most_common(self, n: int = 10) -> List[Tuple[str, int]]:
        ranked = sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:n]

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyModel(words={len(self)}, total={self.total})"
