from pathlib import Path
import pytest
from speller.engine import Engine

def _seed(tmp: Path) -> str:
    root = tmp / "data"
    root.mkdir()
    (root / "q.txt").write_text(
        "Être ou ne pas être, telle est la question.\n", encoding="utf-8"
    )
    return str(root)

@pytest.mark.e2e
def test_persist_model_and_reload(tmp_path: Path):
    root = _seed(tmp_path)
    model = tmp_path / "modele.spm"

    e1 = Engine()
    e1.build(root, store=f"file:///{model}")
    trained = e1.model
    e1.shutdown()

    assert model.exists()

    e2 = Engine()
    try:
        e2.load(f"file:///{model}")
        assert e2.model == trained
        assert e2.correct("telle est la qestion").corrected == "telle est la question"
    finally:
        e2.shutdown()

@pytest.mark.e2e
def test_load_without_model_fails(tmp_path: Path):
    eng = Engine()
    with pytest.raises(FileNotFoundError):
        eng.load(f"file:///{tmp_path / 'absent.spm'}")
    assert not eng.ready
