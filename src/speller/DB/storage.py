from __future__ import annotations
import logging
import mmap
import os
import struct
from typing import BinaryIO, Dict, Optional, Tuple

from ..models import FrequencyModel

# File format (little-endian):
#   0..3   : b"SPM1"
#   unigram section:
#       N (uint32) entries of   word_len:u16 | word:utf8 | count:u64
#   bigram section:
#       P (uint32) rows of      prev_len:u16 | prev:utf8 | M:u32
#                               then M entries of word_len:u16 | word:utf8 | count:u64
# Entries are written in sorted order so equal models produce identical files.

_MAGIC = b"SPM1"
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")

log = logging.getLogger(__name__)


def save_model(model: FrequencyModel, path: str) -> None:
    """Write the model to path atomically (tmp file + rename)."""
    path = os.path.abspath(path)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    tmp = f"{path}.tmp"
    with open(tmp, "wb") as f:
        f.write(_MAGIC)
        uni = sorted(model.unigrams.items())
        f.write(_U32.pack(len(uni)))
        for word, count in uni:
            _write_str(f, word)
            f.write(_U64.pack(int(count)))

        rows = sorted(model.bigrams.items())
        f.write(_U32.pack(len(rows)))
        for prev, nexts in rows:
            _write_str(f, prev)
            f.write(_U32.pack(len(nexts)))
            for word, count in sorted(nexts.items()):
                _write_str(f, word)
                f.write(_U64.pack(int(count)))
    os.replace(tmp, path)
    log.info("Saved model to %s: words=%d bigrams=%d", path, len(model), model.num_bigrams)


def load_model(path: str) -> FrequencyModel:
    """Read a model written by save_model(). Raises FileNotFoundError / ValueError."""
    if os.path.getsize(path) == 0:
        raise ValueError(f"Invalid model file (empty): {path}")
    with open(path, "rb") as fd:
        with mmap.mmap(fd.fileno(), length=0, access=mmap.ACCESS_READ) as mm:
            try:
                unigrams, bigrams = _parse(mm)
            except (struct.error, UnicodeDecodeError) as exc:
                raise ValueError(f"Invalid model file (truncated or corrupt): {path}") from exc
    return FrequencyModel.from_counts(unigrams, bigrams)


def try_load_model(path: str) -> Optional[FrequencyModel]:
    """load_model(), except that a missing, unreadable or corrupt file means 'no model'."""
    try:
        model = load_model(path)
    except FileNotFoundError:
        log.info("No model at %s", path)
        return None
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable model %s: %s", path, exc)
        return None
    log.info("Loaded model from %s: words=%d", path, len(model))
    return model


def is_valid_model(path: str) -> bool:
    try:
        with open(path, "rb") as f:
            return f.read(4) == _MAGIC
    except FileNotFoundError:
        return False


# ---- internals ----
def _parse(mm: mmap.mmap) -> Tuple[Dict[str, int], Dict[str, Dict[str, int]]]:
    if mm[:4] != _MAGIC:
        raise ValueError("Invalid model file (bad magic)")
    pos = 4
    n = _U32.unpack_from(mm, pos)[0]; pos += 4
    unigrams: Dict[str, int] = {}
    for _ in range(n):
        word, pos = _read_str(mm, pos)
        unigrams[word] = _U64.unpack_from(mm, pos)[0]; pos += 8

    p = _U32.unpack_from(mm, pos)[0]; pos += 4
    bigrams: Dict[str, Dict[str, int]] = {}
    for _ in range(p):
        prev, pos = _read_str(mm, pos)
        m = _U32.unpack_from(mm, pos)[0]; pos += 4
        row: Dict[str, int] = {}
        for _ in range(m):
            word, pos = _read_str(mm, pos)
            row[word] = _U64.unpack_from(mm, pos)[0]; pos += 8
        bigrams[prev] = row
    if pos != len(mm):
        raise ValueError("Invalid model file (trailing bytes)")
    return unigrams, bigrams


def _write_str(f: BinaryIO, s: str) -> None:
    b = s.encode("utf-8")
    if len(b) > 0xFFFF:
        raise ValueError("token too long")
    f.write(_U16.pack(len(b))); f.write(b)


def _read_str(mm: mmap.mmap, pos: int) -> Tuple[str, int]:
    ln = _U16.unpack_from(mm, pos)[0]; pos += 2
    if pos + ln > len(mm):
        raise struct.error("string runs past end of file")
    b = mm[pos:pos + ln]; pos += ln
    return b.decode("utf-8"), pos
