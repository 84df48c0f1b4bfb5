from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

_EMPTY: Mapping[str, int] = MappingProxyType({})


@dataclass(frozen=True, eq=False)
class FrequencyModel:
    """
    Unigram + bigram counts, read-only once constructed.
      unigrams: word -> occurrences
      bigrams:  previous word -> {next word -> co-occurrences}
    Use from_counts() to build one; it copies its inputs.
    """
    unigrams: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    bigrams: Mapping[str, Mapping[str, int]] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_counts(cls,
                    unigrams: Mapping[str, int],
                    bigrams: Mapping[str, Mapping[str, int]] | None = None) -> "FrequencyModel":
        uni = {str(w): int(c) for w, c in unigrams.items()}
        bi: Dict[str, Mapping[str, int]] = {}
        for prev, nexts in (bigrams or {}).items():
            row = {str(w): int(c) for w, c in nexts.items()}
            if row:
                bi[str(prev)] = MappingProxyType(row)
        return cls(unigrams=MappingProxyType(uni), bigrams=MappingProxyType(bi))

    # ---- lookups ----
    def __contains__(self, word: object) -> bool:
        return word in self.unigrams

    def __len__(self) -> int:
        return len(self.unigrams)

    def count(self, word: str) -> int:
        return self.unigrams.get(word, 0)

    def bigram_count(self, prev: str, word: str) -> int:
        return self.bigrams.get(prev, _EMPTY).get(word, 0)

    @property
    def total(self) -> int:
        return sum(self.unigrams.values())

    @property
    def num_bigrams(self) -> int:
        return sum(len(row) for row in self.bigrams.values())

    def as_dicts(self) -> Tuple[Dict[str, int], Dict[str, Dict[str, int]]]:
        """Plain (mutable) copies of both tables."""
        return dict(self.unigrams), {p: dict(row) for p, row in self.bigrams.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyModel):
            return NotImplemented
        return self.as_dicts() == other.as_dicts()


@dataclass(frozen=True)
class CorrectionResult:
    original: str                          # input exactly as received
    corrected: str                         # corrected tokens joined by single spaces
    changes: Tuple[Tuple[str, str], ...] = ()   # (token, replacement) for replaced positions only

    def to_dict(self, explain: bool = False) -> dict:
        out = {"original": self.original, "corrected": self.corrected}
        if explain:
            out["changes"] = [list(c) for c in self.changes]
        return out
