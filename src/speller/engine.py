# speller/engine.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Optional

from . import config as CFG
from .corrector import Corrector
from .models import CorrectionResult, FrequencyModel
from .trainer import train_corpus
from .DB.index import DeletionIndex
from .DB.api import ModelStore, make_store

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    model: FrequencyModel
    index: DeletionIndex
    corrector: Corrector


class Engine:
    """
    Thin orchestration layer that glues together:
      - model storage via a ModelStore (binary file, text files or in-memory),
      - training from a corpus folder (trainer.train_corpus),
      - the deletion index and the Corrector built on top of a model.

    Public API (used by CLI/Flask/GUI):
      * initialize(model, corpus): load the stored model, or train + save it
      * build(roots, ...):        train from corpus folders -> (optional) persist
      * load(store):              load a stored model, fail if there is none
      * use_model(model):         serve an in-memory model
      * correct(text):            CorrectionResult for one input string
      * shutdown():               close underlying resources

    Everything a request needs lives in one immutable snapshot; publishing a
    new model swaps that single reference, so readers never see a half-built
    model and no locking is needed while serving.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, request_tokens: Optional[str] = None) -> None:
        self._snapshot: Optional[_Snapshot] = None
        self._store: Optional[ModelStore] = None
        self._request_tokens = request_tokens

    # /* ~~~ Load the persisted model, or train one from the corpus and persist it ~~~ */
    def initialize(
        self,
        *,
        model: str = CFG.DEFAULT_MODEL_DSN,   # store DSN: file:///x.spm, text:///dir, memory://
        corpus: Iterable[str] | str = CFG.DEFAULT_CORPUS_DIR,
        suffix: Optional[str] = None,
        rebuild: bool = False,
        verbose: bool = False,
    ) -> None:
        self._set_verbose(verbose)
        store = self._open_store(model)

        loaded = None if rebuild else store.load()
        if loaded is not None:
            log.info("Model loaded from %s: words=%d", model, len(loaded))
            self.use_model(loaded)
            return

        log.info("No usable model in %s; training from corpus", model)
        trained = train_corpus(corpus, suffix=suffix)   # missing corpus folder is fatal
        self.use_model(trained)
        try:
            store.save(trained)
        except OSError as exc:
            log.warning("Could not save model to %s (serving the trained model anyway): %s", model, exc)

    # /* ~~~ Train from corpus folders and (optionally) persist ~~~ */
    def build(
        self,
        roots: Iterable[str] | str,
        *,
        store: Optional[str] = None,
        suffix: Optional[str] = None,
        verbose: bool = False,
    ) -> FrequencyModel:
        self._set_verbose(verbose)
        model = train_corpus(roots, suffix=suffix)
        if store:
            self._open_store(store).save(model)
        self.use_model(model)
        return model

    # /* ~~~ Load an already-trained model ~~~ */
    def load(self, store: str, *, verbose: bool = False) -> FrequencyModel:
        self._set_verbose(verbose)
        model = self._open_store(store).load()
        if model is None:
            raise FileNotFoundError(f"No model found in {store}")
        self.use_model(model)
        return model

    def save(self, store: str) -> None:
        self._open_store(store).save(self.model)

    def use_model(self, model: FrequencyModel) -> None:
        """Build index + corrector for model, then publish them in one assignment."""
        index = DeletionIndex.from_model(model)
        corrector = Corrector(model, index, request_tokens=self._request_tokens)
        self._snapshot = _Snapshot(model=model, index=index, corrector=corrector)
        log.info("Engine ready: words=%d bigrams=%d index keys=%d",
                 len(model), model.num_bigrams, len(index))

    # ------------- query -------------

    # /* ~~~ Correct one input string ~~~ */
    def correct(self, text: str) -> CorrectionResult:
        snap = self._snapshot
        if snap is None:
            raise RuntimeError("Engine not initialized. Call initialize(), build() or load() first.")
        return snap.corrector.correct(text)

    @property
    def ready(self) -> bool:
        return self._snapshot is not None

    @property
    def model(self) -> FrequencyModel:
        if self._snapshot is None:
            raise RuntimeError("Engine not initialized.")
        return self._snapshot.model

    @property
    def index(self) -> DeletionIndex:
        if self._snapshot is None:
            raise RuntimeError("Engine not initialized.")
        return self._snapshot.index

    def stats(self) -> dict:
        snap = self._snapshot
        if snap is None:
            return {"words": 0, "bigrams": 0, "index_keys": 0}
        return {"words": len(snap.model), "bigrams": snap.model.num_bigrams,
                "index_keys": len(snap.index)}

    # ------------- teardown -------------

    # /* ~~~ Close underlying resources ~~~ */
    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            self._snapshot = None
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _open_store(self, dsn: str) -> ModelStore:
        if self._store is not None:
            self._store.close()
        log.info("Opening model store: %s", dsn)
        self._store = make_store(dsn)
        return self._store

    @staticmethod
    def _set_verbose(verbose: bool) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["SPELLER_VERBOSE"] = "1"
