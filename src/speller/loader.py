from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List, Optional

from . import config as CFG

PROGRESS_EVERY_FILES = 500

log = logging.getLogger(__name__)


def verbose() -> bool:
    """Progress logging (set SPELLER_VERBOSE=1 to enable)."""
    return os.environ.get("SPELLER_VERBOSE") == "1"


def _matches(filename: str, suffix: Optional[str]) -> bool:
    return not suffix or filename.lower().endswith(suffix.lower())


def iter_corpus_files(roots: Iterable[str], suffix: Optional[str] = None) -> Iterator[str]:
    """
    Yield corpus file paths under each root, recursively, in sorted order.
    A root that does not exist (or is not a folder) is fatal: there is nothing to train on.
    Unreadable sub-folders are logged and skipped.
    """
    if suffix is None:
        suffix = CFG.CORPUS_SUFFIX
    for root in roots:
        root = os.path.abspath(root)
        if not os.path.exists(root):
            raise FileNotFoundError(f"Corpus folder not found: {root}")
        if not os.path.isdir(root):
            raise NotADirectoryError(f"Corpus root is not a folder: {root}")
        # listing the root itself must succeed
        os.listdir(root)

        def _onerror(exc: OSError) -> None:
            log.warning("Cannot list %s: %s", exc.filename, exc)

        for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
            dirnames.sort()
            for fn in sorted(filenames):
                if _matches(fn, suffix):
                    yield os.path.join(dirpath, fn)


def list_corpus_files(roots: Iterable[str], suffix: Optional[str] = None) -> List[str]:
    files = list(iter_corpus_files(roots, suffix))
    if verbose():
        print(f"[scanned] files={len(files):,}")
    return files


def iter_lines(path: str) -> Iterator[str]:
    """Lines of a text file without their EOL; undecodable bytes are dropped."""
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for ln in f:
            yield ln.rstrip("\r\n")
