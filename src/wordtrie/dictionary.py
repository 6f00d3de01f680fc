# -*- coding: utf-8 -*-
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from wordtrie.constants import BASIC_DICTIONARY, DEFAULT_LANGUAGE, DICTIONARY_DIR, WORD_PATTERN
from wordtrie.trie import Trie

logger = logging.getLogger(__name__)


class WordDictionary:
    """Word list indexed by a Trie.

    Each word is stored with its 1-based position in the list, so the trie
    answers both "is this a word" and "where does it come from".
    """

    def __init__(self, dictionary_dir: Path = DICTIONARY_DIR):
        self.dictionary_dir = Path(dictionary_dir)
        self.dictionary_path: Optional[Path] = None
        self._words: List[str] = []
        self.trie: Trie[int] = Trie()

    @property
    def words(self) -> List[str]:
        """Loaded words still present in the Trie, in list order."""
        return [w for w in self._words if w in self.trie]

    def set_dictionary_language(self, lang: str = DEFAULT_LANGUAGE):
        """Sets the dictionary language and reloads the dictionary."""
        self._load_dictionary(lang)

    def _read_word_list(self, path: Path) -> List[str]:
        """Reads one word per line. Returns an empty list if the file can't be read."""
        if not path.exists():
            logger.info(f"No local dictionary at {path}")
            return []

        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error reading local dictionary: {e}")
            return []

        return [line.strip() for line in text.splitlines() if line.strip()]

    def _load_dictionary(self, lang: str):
        """Loads and builds the Trie from the dictionary for the specified language."""
        self.dictionary_path = self.dictionary_dir / f"words_{lang}.txt"
        count = self.load_words(self._read_word_list(self.dictionary_path))

        if count:
            logger.info(f"Loaded local dictionary: {self.dictionary_path} ({count} words)")
        else:
            logger.info("Using embedded basic dictionary")
            self.load_words(BASIC_DICTIONARY)

    def load_words(self, words: Iterable[str]) -> int:
        """Rebuilds the Trie from ``words`` and returns how many were kept.

        Words are lower-cased; duplicates and anything that isn't made of
        letters are skipped.
        """
        kept: List[str] = []
        trie: Trie[int] = Trie()

        for word in words:
            word = word.strip().lower()
            if not WORD_PATTERN.match(word):
                logger.debug(f"Skipping '{word}'")
                continue
            if trie.contains(word):
                continue
            kept.append(word)
            trie.insert(word, len(kept))

        self._words = kept
        self.trie = trie
        return len(kept)

    def lookup(self, word: str) -> Optional[int]:
        """Returns the position of ``word`` in the list, or None."""
        return self.trie.get(word)

    def complete(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """Words starting with ``prefix``, shortest first then alphabetically."""
        results = [word for word, _ in self.trie.starts_with(prefix)]
        results.sort(key=lambda p: (len(p), p))
        if limit is not None:
            results = results[:limit]
        return results

    def remove(self, word: str) -> bool:
        return self.trie.remove(word)
