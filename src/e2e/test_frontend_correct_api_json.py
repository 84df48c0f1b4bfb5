from pathlib import Path
import pytest
from speller.engine import Engine
from speller_web.web import app as flask_app

def _seed(tmp: Path) -> str:
    root = tmp / "data"; root.mkdir()
    (root / "c.txt").write_text("Le chat dort. Le chien aboie.\n", encoding="utf-8")
    return str(root)

@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.build(_seed(tmp_path))
    import speller_web.web as webmod
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()

@pytest.mark.e2e
def test_correct_get_json(client):
    rv = client.get("/correct?text=Le%20chatt%20dort")
    assert rv.status_code == 200
    assert rv.headers["Access-Control-Allow-Origin"] == "*"
    assert rv.get_json() == {"original": "Le chatt dort", "corrected": "le chat dort"}

@pytest.mark.e2e
def test_correct_explain_lists_changes(client):
    data = client.get("/correct?text=le%20chienn&explain=1").get_json()
    assert data["corrected"] == "le chien"
    assert data["changes"] == [["chienn", "chien"]]

@pytest.mark.e2e
def test_correct_empty_text(client):
    rv = client.get("/correct")
    assert rv.status_code == 200
    assert rv.get_json() == {"original": "", "corrected": ""}

@pytest.mark.e2e
def test_correct_post_json(client):
    rv = client.post("/correct", json={"text": "le chatt"})
    assert rv.status_code == 200
    assert rv.get_json()["corrected"] == "le chat"

@pytest.mark.e2e
def test_correct_post_rejects_bad_body(client):
    rv = client.post("/correct", data="not json", content_type="text/plain")
    assert rv.status_code == 400
    assert "error" in rv.get_json()
