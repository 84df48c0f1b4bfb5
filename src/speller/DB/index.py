from __future__ import annotations
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Set

from ..loader import verbose
from ..models import FrequencyModel


def deletions(word: str) -> Set[str]:
    """The word itself plus every string obtained by removing exactly one character."""
    out = {word}
    for i in range(len(word)):
        out.add(word[:i] + word[i + 1:])
    return out


class DeletionIndex:
    """
    Deletion-variant index over a vocabulary.
    Every vocabulary word is filed under itself and under each of its
    one-character deletions, so two words meet in a bucket exactly when one
    deletion (or none) on each side makes them equal:
      * every word within edit distance 1 of a query is found,
      * every word found is within edit distance 2.
    Buckets are frozensets behind a read-only mapping; build once, share freely.
    """
    def __init__(self) -> None:
        self._buckets: Mapping[str, FrozenSet[str]] = MappingProxyType({})
        self._num_words: int = 0

    # ---- Build (offline) ----
    def build(self, words: Iterable[str]) -> "DeletionIndex":
        buckets: Dict[str, Set[str]] = defaultdict(set)
        n = 0
        for w in words:
            n += 1
            for d in deletions(w):
                buckets[d].add(w)
        self._buckets = MappingProxyType({k: frozenset(v) for k, v in buckets.items()})
        self._num_words = n
        if verbose():
            print(f"[indexing done] words={n:,} keys={len(buckets):,}")
        return self

    @classmethod
    def from_model(cls, model: FrequencyModel) -> "DeletionIndex":
        return cls().build(model.unigrams.keys())

    # ---- Query ----
    def lookup(self, token: str) -> Set[str]:
        """Vocabulary words sharing a bucket with any deletion variant of token."""
        hits: Set[str] = set()
        for d in deletions(token):
            bucket = self._buckets.get(d)
            if bucket:
                hits.update(bucket)
        return hits

    def bucket(self, key: str) -> FrozenSet[str]:
        return self._buckets.get(key, frozenset())

    # ---- Getters ----
    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def num_words(self) -> int:
        return self._num_words
