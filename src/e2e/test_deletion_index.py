# src/e2e/test_deletion_index.py

import pytest

from speller.DB.index import DeletionIndex, deletions
from speller.distance import levenshtein
from speller.models import FrequencyModel

VOCAB = ["chat", "chats", "chien", "char", "achat", "été", "peut-être", "a"]


@pytest.fixture
def index():
    return DeletionIndex().build(VOCAB)


def test_deletions_include_word_itself():
    assert deletions("chat") == {"chat", "hat", "cat", "cht", "cha"}
    assert deletions("") == {""}
    assert deletions("aa") == {"aa", "a"}


def test_deletions_work_on_code_points():
    assert deletions("été") == {"été", "té", "ét", "éé"}


@pytest.mark.parametrize("token,expected", [
    ("chatt", "chat"),    # extra letter
    ("cht", "chat"),      # missing letter
    ("chot", "chat"),     # substitution
    ("chiens", "chien"),
    ("ete", None),        # two substitutions: not guaranteed by the index
    ("eté", "été"),
    ("peut-etre", "peut-être"),
])
def test_every_distance_one_word_is_found(index, token, expected):
    hits = index.lookup(token)
    for w in VOCAB:
        if levenshtein(token, w) <= 1:
            assert w in hits, f"{w!r} missing for {token!r}"
    if expected is not None:
        assert expected in hits


def test_hits_are_within_distance_two(index):
    for token in ["chatt", "xhat", "hc", "chine", "été", "b", ""]:
        for w in index.lookup(token):
            assert levenshtein(token, w) <= 2


def test_exact_word_is_its_own_hit(index):
    assert "chat" in index.lookup("chat")


def test_unrelated_token_finds_nothing(index):
    assert index.lookup("zzzzzz") == set()


def test_buckets_are_read_only(index):
    assert isinstance(index.bucket("hat"), frozenset)
    assert "chat" in index.bucket("hat")
    with pytest.raises(TypeError):
        index._buckets["new"] = frozenset({"x"})  # type: ignore[index]


def test_from_model_and_sizes():
    model = FrequencyModel.from_counts({"chat": 5, "chien": 50})
    idx = DeletionIndex.from_model(model)
    assert idx.num_words == 2
    assert "cat" in idx and "chen" in idx
    assert len(idx) == len(deletions("chat") | deletions("chien"))
