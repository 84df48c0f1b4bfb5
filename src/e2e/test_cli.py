import json
import os
from pathlib import Path
import pytest
from speller import loader as loader_mod
from speller.__main__ import main

def _seed(tmp: Path) -> str:
    root = tmp / "data"; root.mkdir()
    (root / "c.txt").write_text("le chat dort\n", encoding="utf-8")
    return str(root)

@pytest.mark.e2e
def test_cli_build_then_load(tmp_path: Path, capsys):
    root = _seed(tmp_path)
    model = f"file:///{tmp_path / 'm.spm'}"
    assert main(["--build", "--corpus", root, "--model", model, "--q", "le chatt"]) == 0
    out = capsys.readouterr().out
    assert "le chat" in out and "chatt -> chat" in out

    assert main(["--load", "--model", model, "--json", "--q", "le chatt"]) == 0
    rec = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert rec == {"original": "le chatt", "corrected": "le chat", "changes": [["chatt", "chat"]]}

@pytest.mark.e2e
def test_cli_missing_corpus_exits_2(tmp_path: Path, capsys):
    rc = main(["--model", f"file:///{tmp_path / 'm.spm'}", "--corpus", str(tmp_path / "gone")])
    assert rc == 2
    assert "error" in capsys.readouterr().err

@pytest.mark.e2e
def test_cli_export_text(tmp_path: Path):
    root = _seed(tmp_path)
    out_dir = tmp_path / "txt"
    assert main(["--build", "--corpus", root, "--model", "memory://", "--export", f"text:///{out_dir}"]) == 0
    assert (out_dir / "dictionnaire.txt").read_text(encoding="utf-8").splitlines() == ["chat 1", "dort 1", "le 1"]
    assert (out_dir / "bigrammes.txt").read_text(encoding="utf-8").splitlines() == ["chat dort 1", "le chat 1"]

@pytest.mark.e2e
def test_cli_unlistable_corpus_exits_2(tmp_path: Path, capsys, monkeypatch):
    root = _seed(tmp_path)
    real_listdir = os.listdir

    def denied(path):
        if os.path.abspath(path) == os.path.abspath(root):
            raise PermissionError(13, "Permission denied", path)
        return real_listdir(path)

    monkeypatch.setattr(loader_mod.os, "listdir", denied)
    rc = main(["--model", f"file:///{tmp_path / 'm.spm'}", "--corpus", root])
    assert rc == 2
    assert "error: " in capsys.readouterr().err
