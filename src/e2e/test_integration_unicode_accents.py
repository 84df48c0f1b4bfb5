from pathlib import Path
import pytest
from speller.engine import Engine

def _seed(tmp: Path) -> str:
    root = tmp / "data"; root.mkdir()
    (root / "mix.txt").write_text(
        "L’été sera chaud.\n"
        "Une œuvre peut-être célèbre.\n",
        encoding="utf-8",
    )
    return str(root)

@pytest.mark.e2e
def test_unicode_and_accents(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        assert "l'été" in eng.model
        assert "peut-être" in eng.model
        assert eng.correct("une oeuvre").corrected == "une œuvre"
        assert eng.correct("celebre").corrected == "célèbre"
        assert eng.correct("peut-etre").corrected == "peut-être"
    finally:
        eng.shutdown()
