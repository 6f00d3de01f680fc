# -*- coding: utf-8 -*-
import re
from pathlib import Path
from typing import List, Pattern

# Directory holding the word lists, one file per language: words_<lang>.txt
DICTIONARY_DIR: Path = Path(__file__).parent / "data" / "words"

DEFAULT_LANGUAGE = 'fr'

# Lower-case letters only, Latin-1 accented letters and ligatures included.
WORD_PATTERN: Pattern[str] = re.compile(r'^[a-zß-öø-ÿœæ]+$')

# Used when no word list can be read.
BASIC_DICTIONARY: List[str] = [
    'bleu',
    'blanc',
    'blanche',
    'bol',
    'blâme',
    'blatte',
]
