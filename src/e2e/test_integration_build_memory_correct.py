from pathlib import Path
import pytest
from speller.engine import Engine

def _seed(tmp: Path) -> str:
    root = tmp / "data"
    root.mkdir()
    (root / "fables.txt").write_text(
        "Le chat dort sur le canapé.\n"
        "Le chat mange. Le chien aboie.\n"
        "Le chien court dans le jardin.\n",
        encoding="utf-8",
    )
    return str(root)

@pytest.mark.e2e
def test_build_memory_correct(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build(root, store="memory://")
        res = eng.correct("le chatt dort sur le canape")
        assert res.original == "le chatt dort sur le canape"
        assert res.corrected == "le chat dort sur le canapé"
        assert ("chatt", "chat") in res.changes
    finally:
        eng.shutdown()
