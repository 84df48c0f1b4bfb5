from __future__ import annotations
import re
from typing import Iterator, List

from . import config as CFG

# /* ~~~ token patterns, tried in this order at every position ~~~ */
_URL = r"(?:https?://|www\.)[^\s/$.?#].[^\s]*"
_EMAIL = r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}"
_LETTERS = "a-zàâçéèêëîïôûùœæ'"
_WORD = rf"[{_LETTERS}]+(?:-[{_LETTERS}]+)*"
_PUNCT = r"""[!"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~]"""  # POSIX [:punct:], one char at a time

_TOKEN_RE = re.compile(rf"{_URL}|{_EMAIL}|{_WORD}|{_PUNCT}")

# typographic apostrophes -> plain apostrophe (l’école == l'école)
_APOSTROPHES = str.maketrans({"’": "'", "‘": "'"})


def normalize(text: str) -> str:
    """Lower-case and unify apostrophes; everything else is left to the token patterns."""
    return text.lower().translate(_APOSTROPHES)


def iter_tokens(text: str) -> Iterator[str]:
    """
    Yield tokens left to right: URL, email, word (elisions and hyphenated
    compounds included) or a single punctuation mark. Anything else is skipped.
    """
    for m in _TOKEN_RE.finditer(normalize(text)):
        yield m.group(0)


def tokenize(text: str) -> List[str]:
    return list(iter_tokens(text))


def split_request(text: str, mode: str | None = None) -> List[str]:
    """Tokens of a correction request. "whitespace" splits on blanks, "tokens" uses tokenize()."""
    mode = (mode or CFG.REQUEST_TOKENIZATION).lower()
    if mode == "whitespace":
        return normalize(text).split()
    if mode == "tokens":
        return tokenize(text)
    raise ValueError(f"Unsupported request tokenization: {mode!r}")
