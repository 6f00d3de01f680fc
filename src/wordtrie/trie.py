# -*- coding: utf-8 -*-
from __future__ import annotations

import copy
import logging
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Trie(Generic[T]):
    """Prefix tree mapping words to values.

    Every node is itself a Trie: it owns its children (one per character),
    an optional value marking the end of a stored word and a leaf flag.
    Removing a word only clears its value; nodes are never pruned.
    """

    def __init__(self):
        self.children: Dict[str, Trie[T]] = {}
        self._is_leaf = False
        self.value: Optional[T] = None

    @property
    def is_leaf(self) -> bool:
        return self._is_leaf

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def _walk(self, word: str) -> Optional[Trie[T]]:
        node = self
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        """Returns True if the given word is stored with a value."""
        node = self._walk(word)
        return node is not None and node.value is not None

    def get(self, word: str, default: Optional[T] = None) -> Optional[T]:
        """Returns a copy of the value stored for ``word``, or ``default``."""
        node = self._walk(word)
        if node is None or node.value is None:
            return default
        return copy.deepcopy(node.value)

    def get_all(self) -> List[Tuple[str, T]]:
        """Returns every stored (word, value) pair."""
        return self.starts_with('')

    def insert(self, word: str, value: Optional[T] = None):
        """Creates the nodes that represent ``word`` and stores ``value`` on the last one.

        Inserting with ``value=None`` creates the path without making the word
        contained.
        """
        node = self
        for letter in word:
            node._is_leaf = False
            if letter not in node.children:
                node.children[letter] = Trie()
            node = node.children[letter]

        node.value = value

        if not node.children:
            node._is_leaf = True

    def remove(self, word: str) -> bool:
        """Clears the value stored for ``word``.

        Returns False if ``word`` is not a path of the tree. The deepest
        stored word above ``word`` gets marked as a leaf; its children stay
        in place.
        """
        previous_word_index = self._previous_word_index(word)
        node = self

        for i, letter in enumerate(word):
            if previous_word_index is not None and previous_word_index == i:
                node._is_leaf = True

            node = node.children.get(letter)
            if node is None:
                return False

        node.value = None
        logger.debug(f"Removed value of '{word}'")
        return True

    def starts_with(self, prefix: str) -> List[Tuple[str, T]]:
        """Returns the (word, value) pairs of the words starting with ``prefix``.

        Order is unspecified. Values are copies of the stored ones.
        """
        node = self._walk(prefix)
        if node is None:
            return []

        words = node._dfs(prefix, '')

        # the prefix itself may be a word
        if node.value is not None:
            words.append((prefix, copy.deepcopy(node.value)))

        return words

    def _previous_word_index(self, word: str) -> Optional[int]:
        """Index in ``word`` of its closest stored ancestor (0 is the root)."""
        node = self
        previous_word_index = None

        for i, letter in enumerate(word):
            if node.value is not None:
                previous_word_index = i

            node = node.children.get(letter)
            if node is None:
                return None

        return previous_word_index

    def _dfs(self, prefix: str, buffer: str) -> List[Tuple[str, T]]:
        words: List[Tuple[str, T]] = []

        for letter, child in self.children.items():
            suffix = buffer + letter
            if child.value is not None:
                words.append((prefix + suffix, copy.deepcopy(child.value)))
            words.extend(child._dfs(prefix, suffix))

        return words
