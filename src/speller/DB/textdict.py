from __future__ import annotations
import logging
import os
from typing import Dict, Iterable, Optional, Tuple

from ..models import FrequencyModel

# Plain-text counts, one entry per line, whitespace separated:
#   dictionary file:  word count
#   bigram file:      word1 word2 count
# Lines that do not have that shape are skipped.

log = logging.getLogger(__name__)


def _parse_count(raw: str) -> Optional[int]:
    try:
        n = int(raw)
    except ValueError:
        return None
    return n if n >= 0 else None


def parse_unigram_lines(lines: Iterable[str]) -> Tuple[Dict[str, int], int]:
    """Return (table, skipped_lines). A repeated word keeps its last count."""
    table: Dict[str, int] = {}
    skipped = 0
    for line in lines:
        p = line.split()
        if not p:
            continue
        n = _parse_count(p[1]) if len(p) == 2 else None
        if n is None:
            skipped += 1
            continue
        table[p[0].lower()] = n
    return table, skipped


def parse_bigram_lines(lines: Iterable[str]) -> Tuple[Dict[str, Dict[str, int]], int]:
    table: Dict[str, Dict[str, int]] = {}
    skipped = 0
    for line in lines:
        p = line.split()
        if not p:
            continue
        n = _parse_count(p[2]) if len(p) == 3 else None
        if n is None:
            skipped += 1
            continue
        table.setdefault(p[0].lower(), {})[p[1].lower()] = n
    return table, skipped


def load_text_model(dict_path: str, bigram_path: Optional[str] = None) -> FrequencyModel:
    """Build a model from a dictionary file and an optional bigram file."""
    with open(dict_path, "r", encoding="utf-8", errors="ignore") as f:
        unigrams, bad_u = parse_unigram_lines(f)
    bigrams: Dict[str, Dict[str, int]] = {}
    bad_b = 0
    if bigram_path and os.path.exists(bigram_path):
        with open(bigram_path, "r", encoding="utf-8", errors="ignore") as f:
            bigrams, bad_b = parse_bigram_lines(f)
    if bad_u or bad_b:
        log.warning("Skipped malformed lines: dictionary=%d bigrams=%d", bad_u, bad_b)
    log.info("Imported text model: words=%d bigram rows=%d", len(unigrams), len(bigrams))
    return FrequencyModel.from_counts(unigrams, bigrams)


def save_text_model(model: FrequencyModel, dict_path: str, bigram_path: str) -> None:
    for p in (dict_path, bigram_path):
        os.makedirs(os.path.dirname(os.path.abspath(p)), exist_ok=True)
    with open(dict_path, "w", encoding="utf-8") as f:
        for word, count in sorted(model.unigrams.items()):
            f.write(f"{word} {count}\n")
    with open(bigram_path, "w", encoding="utf-8") as f:
        for prev, row in sorted(model.bigrams.items()):
            for word, count in sorted(row.items()):
                f.write(f"{prev} {word} {count}\n")
