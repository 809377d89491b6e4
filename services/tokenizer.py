import string
from typing import Iterator

DEFAULT_ALPHABET = string.ascii_lowercase


def normalize_alphabet(alphabet: str) -> str:
    """Case-fold an alphabet and drop repeated letters, keeping first-seen order."""
    letters = "".join(dict.fromkeys(alphabet.lower()))
    if not letters:
        raise ValueError("alphabet must contain at least one letter")
    return letters


class WordTokens:
    """Lazy sequence of the words in a block of text.

    A word is a maximal run of alphabet letters after lowercasing. Every
    other character ends the current run. Iterating again rescans the text.
    """

    def __init__(self, text: str, alphabet: str = DEFAULT_ALPHABET):
        self.text = text or ""
        self.letters = frozenset(alphabet)

    def __iter__(self) -> Iterator[str]:
        run = []
        for ch in self.text.lower():
            if ch in self.letters:
                run.append(ch)
            elif run:
                yield "".join(run)
                run = []
        if run:
            yield "".join(run)


def tokenize(text: str, alphabet: str = DEFAULT_ALPHABET) -> WordTokens:
    return WordTokens(text, alphabet)


def normalize_word(word: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    # Same rule as the tokenizer, but the pieces are joined instead of split.
    letters = frozenset(alphabet)
    return "".join(ch for ch in (word or "").lower() if ch in letters)
