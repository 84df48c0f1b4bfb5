"""
Statistical spell corrector.

Learns word and word-pair counts from a folder of text files, then replaces
out-of-vocabulary tokens with the most plausible known word within two edits,
letting the previous word's bigram counts outweigh raw frequency.

Example Usage:
    import speller

    speller.initialize(model="file:///modele_taln.spm", corpus="data")
    speller.correct("le chatt dort").corrected   # -> "le chat dort"
"""
from __future__ import annotations

from . import config as CFG
from .corrector import Corrector
from .distance import levenshtein
from .engine import Engine
from .models import CorrectionResult, FrequencyModel
from .tokenizer import tokenize

__version__ = "1.0.0"
__all__ = ["Engine", "Corrector", "FrequencyModel", "CorrectionResult",
           "levenshtein", "tokenize", "initialize", "correct"]

_engine: Engine | None = None


def initialize(model: str | None = None,
               corpus: str | list[str] | None = None,
               rebuild: bool = False,
               verbose: bool = False) -> Engine:
    """Load the stored model, or train from the corpus and store it. Returns the shared engine."""
    global _engine
    eng = Engine()
    eng.initialize(model=model or CFG.DEFAULT_MODEL_DSN,
                   corpus=corpus or CFG.DEFAULT_CORPUS_DIR,
                   rebuild=rebuild, verbose=verbose)
    _engine = eng
    return eng


def correct(text: str) -> CorrectionResult:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.correct(text)
