from pathlib import Path
import pytest
from speller.engine import Engine

def _seed(tmp: Path) -> str:
    root = tmp / "data"; root.mkdir()
    (root / "t.txt").write_text("bonjour le monde\nbonjour la maison\n", encoding="utf-8")
    return str(root)

@pytest.mark.e2e
def test_initialize_trains_then_persists(tmp_path: Path):
    root = _seed(tmp_path)
    model = tmp_path / "m.spm"
    eng = Engine()
    try:
        eng.initialize(model=f"file:///{model}", corpus=root)
        assert model.exists()
        assert eng.correct("bonjur").corrected == "bonjour"
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_initialize_prefers_stored_model(tmp_path: Path):
    root = _seed(tmp_path)
    model = tmp_path / "m.spm"
    Engine().build(root, store=f"file:///{model}")

    # corpus is gone: the stored model must be enough
    eng = Engine()
    try:
        eng.initialize(model=f"file:///{model}", corpus=str(tmp_path / "gone"))
        assert "monde" in eng.model
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_corrupt_model_triggers_training(tmp_path: Path):
    root = _seed(tmp_path)
    model = tmp_path / "m.spm"
    model.write_bytes(b"garbage")
    eng = Engine()
    try:
        eng.initialize(model=f"file:///{model}", corpus=root)
        assert "maison" in eng.model
        assert model.read_bytes().startswith(b"SPM1")
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_no_model_and_no_corpus_is_fatal(tmp_path: Path):
    eng = Engine()
    with pytest.raises(FileNotFoundError):
        eng.initialize(model=f"file:///{tmp_path / 'm.spm'}", corpus=str(tmp_path / "gone"))

@pytest.mark.e2e
def test_rebuild_ignores_stored_model(tmp_path: Path):
    root = _seed(tmp_path)
    model = tmp_path / "m.spm"
    Engine().build(root, store=f"file:///{model}")
    (Path(root) / "t2.txt").write_text("nouveau mot\n", encoding="utf-8")

    eng = Engine()
    try:
        eng.initialize(model=f"file:///{model}", corpus=root, rebuild=True)
        assert "nouveau" in eng.model
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_text_store_bootstrap(tmp_path: Path):
    folder = tmp_path / "dico"; folder.mkdir()
    (folder / "dictionnaire.txt").write_text("le 100\nchat 5\nchien 50\n", encoding="utf-8")
    (folder / "bigrammes.txt").write_text("le chat 10\nligne cassée\n", encoding="utf-8")
    eng = Engine()
    try:
        eng.load(f"text:///{folder}")
        assert eng.correct("le chiat").corrected == "le chat"
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_unwritable_model_path_still_serves(tmp_path: Path, caplog):
    root = _seed(tmp_path)
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder", encoding="utf-8")
    eng = Engine()
    try:
        with caplog.at_level("WARNING"):
            eng.initialize(model=f"file:///{blocker / 'm.spm'}", corpus=root)
        assert eng.ready
        assert eng.correct("bonjur").corrected == "bonjour"
        assert "Could not save model" in caplog.text
    finally:
        eng.shutdown()
