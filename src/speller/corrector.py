from __future__ import annotations
from typing import Iterable, List, Optional, Set

from . import config as CFG
from .DB.index import DeletionIndex
from .distance import bounded_levenshtein
from .models import CorrectionResult, FrequencyModel
from .tokenizer import split_request


class Corrector:
    """
    Greedy left-to-right correction against a frozen FrequencyModel.

    For every token:
      1) known word            -> kept as is (known words are never replaced)
      2) unknown word          -> candidates within MAX_EDIT_DISTANCE
      3) score(c)              =  unigram[c] + bigram[prev][c] * CONTEXT_BOOST
      4) best                  =  highest score, ties -> smallest string
      5) no candidate          -> token kept as is
    prev is the token *emitted* at the previous position, so corrections
    feed the context of the next token.

    Holds no per-request state; one instance can serve concurrent callers.
    """
    def __init__(self,
                 model: FrequencyModel,
                 index: Optional[DeletionIndex] = None,
                 *,
                 max_distance: int = CFG.MAX_EDIT_DISTANCE,
                 context_boost: int = CFG.CONTEXT_BOOST,
                 full_scan: bool = CFG.FULL_SCAN,
                 request_tokens: Optional[str] = None) -> None:
        self.model = model
        self.index = index if index is not None else DeletionIndex.from_model(model)
        self.max_distance = int(max_distance)
        self.context_boost = int(context_boost)
        self.full_scan = bool(full_scan)
        self.request_tokens = request_tokens or CFG.REQUEST_TOKENIZATION

    # ---- candidates ----
    def candidates(self, token: str) -> Set[str]:
        """
        Vocabulary words within max_distance of token.
        The deletion index gives every distance-1 word (and some distance-2 ones)
        without touching the rest of the vocabulary; the bounded scan adds the
        remaining distance-2 words and anything the index was not built with.
        """
        found = {w for w in self.index.lookup(token) if w in self.model}
        if not self.full_scan:
            return found

        limit = self.max_distance
        n = len(token)
        for w in self.model.unigrams:
            if w in found or abs(len(w) - n) > limit:
                continue
            if bounded_levenshtein(token, w, limit) <= limit:
                found.add(w)
        return found

    # ---- scoring ----
    def score(self, candidate: str, prev: Optional[str] = None) -> int:
        s = self.model.count(candidate)
        if prev is not None:
            s += self.model.bigram_count(prev, candidate) * self.context_boost
        return s

    def best(self, token: str, prev: Optional[str] = None) -> str:
        cands = self.candidates(token)
        if not cands:
            return token
        return min(cands, key=lambda c: (-self.score(c, prev), c))

    # ---- sentences ----
    def correct_tokens(self, tokens: Iterable[str]) -> List[str]:
        out: List[str] = []
        prev: Optional[str] = None
        for tok in tokens:
            chosen = tok if tok in self.model else self.best(tok, prev)
            out.append(chosen)
            prev = chosen
        return out

    def correct(self, text: str) -> CorrectionResult:
        if not text or not text.strip():
            return CorrectionResult(original=text or "", corrected="")
        toks = split_request(text, self.request_tokens)
        fixed = self.correct_tokens(toks)
        changes = tuple((a, b) for a, b in zip(toks, fixed) if a != b)
        return CorrectionResult(original=text, corrected=" ".join(fixed), changes=changes)
