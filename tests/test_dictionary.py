import logging

import pytest

from wordtrie.constants import BASIC_DICTIONARY
from wordtrie.dictionary import WordDictionary


@pytest.fixture
def dictionary_dir(tmp_path):
    (tmp_path / "words_fr.txt").write_text(
        "Bleu\nblanc\n\nblanche\n  bol  \nblâme\nblatte\nbleu\n42\nporte-monnaie\n",
        encoding="utf-8",
    )
    return tmp_path


def test_loads_local_word_list(dictionary_dir, caplog):
    caplog.set_level(logging.INFO)
    d = WordDictionary(dictionary_dir)
    d.set_dictionary_language("fr")

    assert d.dictionary_path == dictionary_dir / "words_fr.txt"
    assert d.words == ["bleu", "blanc", "blanche", "bol", "blâme", "blatte"]
    assert "Loaded local dictionary" in caplog.text


def test_words_map_to_their_position(dictionary_dir):
    d = WordDictionary(dictionary_dir)
    d.set_dictionary_language("fr")

    assert d.lookup("bleu") == 1
    assert d.lookup("bol") == 4
    assert d.lookup("blatte") == 6
    assert d.lookup("bla") is None
    assert d.lookup("42") is None


def test_falls_back_to_basic_dictionary(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    d = WordDictionary(tmp_path)
    d.set_dictionary_language("xx")

    assert d.words == BASIC_DICTIONARY
    assert "Using embedded basic dictionary" in caplog.text


def test_unreadable_word_list_logs_warning(tmp_path, caplog):
    (tmp_path / "words_fr.txt").write_bytes(b"\xff\xfe\xfa\x00bol")
    d = WordDictionary(tmp_path)
    d.set_dictionary_language("fr")

    assert d.words == BASIC_DICTIONARY
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_complete_sorts_by_length(dictionary_dir):
    d = WordDictionary(dictionary_dir)
    d.set_dictionary_language("fr")

    assert d.complete("bla") == ["blanc", "blatte", "blanche"]
    assert d.complete("bl") == ["bleu", "blanc", "blâme", "blatte", "blanche"]
    assert d.complete("bl", limit=2) == ["bleu", "blanc"]
    assert d.complete("z") == []


def test_remove(dictionary_dir):
    d = WordDictionary(dictionary_dir)
    d.set_dictionary_language("fr")

    assert d.remove("blanc")
    assert not d.remove("figue")
    assert d.lookup("blanc") is None
    assert d.lookup("blanche") == 3
    assert "blanc" not in d.words


def test_load_words_replaces_trie():
    d = WordDictionary()
    assert d.load_words(["chat", "Chien", "chat", "c3po"]) == 2
    assert d.complete("ch") == ["chat", "chien"]

    d.load_words(["mer"])
    assert d.complete("ch") == []
    assert d.lookup("mer") == 1


def test_bundled_french_word_list():
    d = WordDictionary()
    d.set_dictionary_language("fr")

    assert d.lookup("bleu") == 1
    assert "œuf" in d.trie
    assert d.complete("bou") == ["bouche", "boulanger", "bouteille"]
