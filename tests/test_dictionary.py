import pytest
from wordgrid.dictionary import Trie, load_dictionary
from wordgrid.errors import DictionaryLoadError


def _make_trie(words: list[str]) -> Trie:
    return Trie.from_words(words)


def test_prefix_and_word_queries():
    trie = _make_trie(["cat", "cats", "car", "care"])
    assert trie.contains_prefix("c")
    assert trie.contains_prefix("ca")
    assert trie.contains_prefix("cat")
    assert trie.contains_prefix("care")
    assert not trie.contains_prefix("cb")
    assert not trie.contains_prefix("cares")

    assert trie.is_word("cat")
    assert trie.is_word("care")
    assert not trie.is_word("ca")
    assert not trie.is_word("dog")
    assert "cats" in trie
    assert "ca" not in trie


def test_empty_prefix():
    assert _make_trie(["a"]).contains_prefix("")
    assert not Trie().contains_prefix("")


def test_matching_is_case_exact():
    trie = _make_trie(["Cat"])
    assert trie.is_word("Cat")
    assert not trie.is_word("cat")
    assert not trie.contains_prefix("c")


def test_len_counts_distinct_words():
    trie = _make_trie(["cat", "cat", "cats"])
    assert len(trie) == 2


def test_child_descends_one_character():
    trie = _make_trie(["cat"])
    node = trie.root.child("c")
    assert node is not None
    assert node.child("a").child("t").is_word
    assert node.child("x") is None
    assert trie.find("ca") is node.child("a")


def test_load_dictionary(tmp_path):
    path = tmp_path / "words"
    path.write_text("cat\r\ncats\n\nCare\n", encoding="utf-8")
    trie = load_dictionary(path)
    assert len(trie) == 3
    assert trie.is_word("cat")
    assert trie.is_word("Care")
    assert not trie.is_word("care")


def test_load_dictionary_missing(tmp_path):
    with pytest.raises(DictionaryLoadError):
        load_dictionary(tmp_path / "missing")
