import logging
import re
from typing import Dict, List, Optional

from spellchecker import SpellChecker

from .checker import Checker
from .tokenizer import DEFAULT_ALPHABET

logger = logging.getLogger(__name__)


class SpellCheckerService:
    def __init__(self, alphabet: str = DEFAULT_ALPHABET, seed_language: Optional[str] = None):
        self.checker = Checker(alphabet)
        # Splits text into letter runs and everything else, keeping both
        self._split_re = re.compile("([" + re.escape(self.checker.alphabet) + "]+)", re.IGNORECASE)
        if seed_language:
            self.seed_dictionary(seed_language)

    def seed_dictionary(self, language: str = "en") -> int:
        """Load pyspellchecker's bundled word frequencies into the model."""
        freq_source = SpellChecker(language=language).word_frequency
        entries = dict(freq_source.items())
        self.checker.load_counts(entries)
        logger.info("Seeded %d entries from the pyspellchecker '%s' dictionary", len(entries), language)
        return len(entries)

    def train(self, text: str) -> None:
        self.checker.train(text)

    def train_file(self, path: str, encoding: str = "utf-8") -> None:
        with open(path, "r", encoding=encoding) as f:
            self.checker.train(f.read())
        logger.info("Trained on %s", path)

    def correct(self, word: str) -> str:
        return self.checker.correct(word)

    def stats(self) -> Dict[str, int]:
        return self.checker.stats()

    def _preserve_case(self, original: str, corrected: str) -> str:
        if original.isupper() and len(original) > 1:
            return corrected.upper()
        if original[0].isupper():
            return corrected.capitalize()
        return corrected

    def process_text(self, text: str) -> Dict:
        if not text:
            return {"tokens": []}

        processed_tokens: List[Dict] = []
        for token in self._split_re.split(text):
            if not token:
                continue

            token_data = {
                "text": token,
                "type": "text",
                "is_valid": True,
                "suggestions": []
            }

            if self._split_re.fullmatch(token):
                token_data["type"] = "word"
                if token not in self.checker:
                    token_data["is_valid"] = False
                    corrected = self.checker.correct(token)
                    if corrected != self.checker.normalize(token):
                        token_data["suggestions"] = [self._preserve_case(token, corrected)]
            elif token.isspace():
                token_data["type"] = "space"
            else:
                token_data["type"] = "punctuation"

            processed_tokens.append(token_data)

        return {"tokens": processed_tokens}
