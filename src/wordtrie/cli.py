#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wordtrie - prefix completion over a word list
"""
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from wordtrie.constants import DEFAULT_LANGUAGE, DICTIONARY_DIR
from wordtrie.dictionary import WordDictionary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordtrie',
        description="List the dictionary words starting with each PREFIX.",
    )
    parser.add_argument('prefixes', nargs='+', metavar='PREFIX')
    parser.add_argument('--lang', '-l', default=DEFAULT_LANGUAGE,
                        help="Dictionary language, reads words_<LANG>.txt (default: %(default)s)")
    parser.add_argument('--dictionary-dir', '-d', type=Path, default=DICTIONARY_DIR,
                        help="Directory holding the word lists")
    parser.add_argument('--limit', '-n', type=int, default=None,
                        help="Maximum number of words per prefix")
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s: %(message)s')

    dictionary = WordDictionary(args.dictionary_dir)
    dictionary.set_dictionary_language(args.lang)

    for prefix in args.prefixes:
        words = dictionary.complete(prefix.lower(), limit=args.limit)
        print(f"{prefix}: {' '.join(words) if words else '(none)'}")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
