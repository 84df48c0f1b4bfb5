from __future__ import annotations
import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .loader import PROGRESS_EVERY_FILES, iter_lines, list_corpus_files, verbose
from .models import FrequencyModel
from .tokenizer import iter_tokens

log = logging.getLogger(__name__)


@dataclass
class TrainingReport:
    files_read: int = 0
    files_skipped: List[str] = field(default_factory=list)
    tokens: int = 0


class Trainer:
    """
    Accumulates unigram and bigram counts over a token stream.
    One document = one stream: the previous token carries over line breaks
    but is reset between documents, so no pair spans two files.
    Punctuation tokens are counted like any other token.

    Counters here are private and mutable; freeze() hands out an immutable
    FrequencyModel snapshot.
    """
    def __init__(self) -> None:
        self._unigrams: Counter = Counter()
        self._bigrams: Dict[str, Counter] = defaultdict(Counter)
        self.report = TrainingReport()

    # ---- feeding ----
    def feed_lines(self, lines: Iterable[str]) -> int:
        """
        Count one document given as lines; returns the number of tokens seen.
        Counts are merged only once the whole document has been read, so a
        read error halfway through leaves the trainer untouched.
        """
        unigrams: Counter = Counter()
        bigrams: Dict[str, Counter] = defaultdict(Counter)
        prev: Optional[str] = None
        n = 0
        for line in lines:
            for tok in iter_tokens(line):
                unigrams[tok] += 1
                if prev is not None:
                    bigrams[prev][tok] += 1
                prev = tok
                n += 1

        self._unigrams.update(unigrams)
        for w, row in bigrams.items():
            self._bigrams[w].update(row)
        self.report.tokens += n
        return n

    def feed_text(self, text: str) -> int:
        return self.feed_lines(text.splitlines())

    def feed_file(self, path: str) -> int:
        """Count one file as one document. OSError propagates."""
        n = self.feed_lines(iter_lines(path))
        self.report.files_read += 1
        return n

    def train(self, paths: Iterable[str]) -> TrainingReport:
        """Feed every file; a file that cannot be read is logged and skipped."""
        for path in paths:
            try:
                self.feed_file(path)
            except OSError as exc:
                log.warning("Skipping unreadable corpus file %s: %s", path, exc)
                self.report.files_skipped.append(path)
                continue
            if verbose() and self.report.files_read % PROGRESS_EVERY_FILES == 0:
                print(f"[trained] files={self.report.files_read:,} tokens={self.report.tokens:,}")
        return self.report

    # ---- output ----
    def freeze(self) -> FrequencyModel:
        return FrequencyModel.from_counts(self._unigrams, self._bigrams)


def train_corpus(roots: Iterable[str] | str, suffix: Optional[str] = None) -> FrequencyModel:
    """
    Discover corpus files under roots and train on them.
    A missing corpus folder raises (FileNotFoundError / NotADirectoryError).
    """
    if isinstance(roots, str):
        roots = [roots]
    roots = list(roots)
    if not roots:
        raise ValueError("train_corpus(): at least one corpus folder is required")

    files = list_corpus_files(roots, suffix)
    log.info("Training on %d files from %s", len(files), roots)
    trainer = Trainer()
    report = trainer.train(files)
    model = trainer.freeze()
    log.info("Training done: files=%d skipped=%d tokens=%d words=%d",
             report.files_read, len(report.files_skipped), report.tokens, len(model))
    return model
