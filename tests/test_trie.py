from hypothesis import given
from hypothesis import strategies as st

from cpalgos.trie import Trie

words_strategy = st.lists(st.text(alphabet="ABC", min_size=1, max_size=6), max_size=15)


def _build(words):
    trie = Trie()
    for word in words:
        trie.add(word)
    return trie


@given(words_strategy)
def test_every_prefix_is_present(words):
    trie = _build(words)
    for word in words:
        assert trie.is_word(word)
        assert all(trie.contains_prefix(word[:i]) for i in range(len(word) + 1))


@given(words_strategy, st.text(alphabet="ABCD", max_size=4))
def test_prefix_counts_match_startswith(words, probe):
    trie = _build(words)
    assert trie.prefix_count(probe) == sum(w.startswith(probe) for w in words)
    assert trie.is_word(probe) == (probe in words)
    assert trie.contains_prefix(probe) == (
        probe == "" or any(w.startswith(probe) for w in words)
    )


@given(words_strategy)
def test_levels_cover_all_prefixes_in_bfs_order(words):
    trie = _build(words)
    levels = trie.levels()
    expected = {w[:i] for w in words for i in range(len(w) + 1)} | {""}
    assert set(levels) == expected
    assert all(depth == len(prefix) for prefix, depth in levels.items())
    depths = list(levels.values())
    assert depths == sorted(depths)


def test_unknown_word_absent():
    trie = _build(["APPLE"])
    assert not trie.contains_prefix("B")
    assert not trie.is_word("APP")
    assert trie.prefix_count("APQ") == 0


def test_duplicates_counted():
    trie = _build(["AB", "AB"])
    assert trie.prefix_count("A") == 2