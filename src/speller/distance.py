from __future__ import annotations
from typing import List


def levenshtein(a: str, b: str) -> int:
    """
    Insert/delete/substitute distance between a and b, counted in code points
    (so "é" is one character, not two bytes). Two rolling DP rows:
    row i holds the cost of turning a[:i] into every prefix of b.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev: List[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            cur.append(min(prev[j] + 1,          # delete ca
                           cur[j - 1] + 1,       # insert cb
                           prev[j - 1] + cost))  # substitute / keep
        prev = cur
    return prev[-1]


def bounded_levenshtein(a: str, b: str, limit: int) -> int:
    """
    Same as levenshtein() while the answer is <= limit. Once the distance is
    known to exceed limit, returns limit + 1 without finishing the grid.
    """
    if a == b:
        return 0
    if abs(len(a) - len(b)) > limit:
        return limit + 1
    if not a or not b:
        return max(len(a), len(b))

    prev: List[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        row_min = i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            v = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + cost)
            cur.append(v)
            if v < row_min:
                row_min = v
        if row_min > limit:
            return limit + 1
        prev = cur
    return prev[-1] if prev[-1] <= limit else limit + 1


def within(a: str, b: str, limit: int) -> bool:
    return bounded_levenshtein(a, b, limit) <= limit
