# -*- coding: utf-8 -*-
from wordtrie.dictionary import WordDictionary
from wordtrie.trie import Trie

__all__ = ['Trie', 'WordDictionary']
