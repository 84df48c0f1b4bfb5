# speller/DB/api.py
from __future__ import annotations
import logging
import os
from typing import Optional, Protocol

from .. import config as CFG
from ..models import FrequencyModel
from .storage import save_model, try_load_model
from .textdict import load_text_model, save_text_model

log = logging.getLogger(__name__)


class ModelStore(Protocol):
    # Read: None means "no model present", never an error
    def load(self) -> Optional[FrequencyModel]: ...
    # Write: replaces whatever the store held
    def save(self, model: FrequencyModel) -> None: ...
    # lifecycle
    def close(self) -> None: ...


class FileModelStore(ModelStore):
    """Binary model file (see storage.py for the layout)."""
    def __init__(self, path: str) -> None:
        self.path = os.path.abspath(path)

    def load(self) -> Optional[FrequencyModel]:
        return try_load_model(self.path)

    def save(self, model: FrequencyModel) -> None:
        save_model(model, self.path)

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"FileModelStore({self.path!r})"


class TextModelStore(ModelStore):
    """A folder holding the plain-text dictionary and bigram files."""
    def __init__(self, folder: str) -> None:
        self.folder = os.path.abspath(folder)
        self.dict_path = os.path.join(self.folder, CFG.DICT_FILENAME)
        self.bigram_path = os.path.join(self.folder, CFG.BIGRAM_FILENAME)

    def load(self) -> Optional[FrequencyModel]:
        try:
            return load_text_model(self.dict_path, self.bigram_path)
        except OSError as exc:
            log.info("No text model in %s: %s", self.folder, exc)
            return None

    def save(self, model: FrequencyModel) -> None:
        save_text_model(model, self.dict_path, self.bigram_path)

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"TextModelStore({self.folder!r})"


def make_store(dsn: str) -> ModelStore:
    """
    Factory:
      - file:///path/model.spm (or a bare path) -> FileModelStore
      - text:///folder                          -> TextModelStore (dictionnaire.txt + bigrammes.txt)
      - memory://                               -> MemoryModelStore
    """
    if dsn.startswith("memory://"):
        from .memory_store import MemoryModelStore
        return MemoryModelStore()

    if dsn.startswith("text:///"):
        return TextModelStore(dsn.removeprefix("text:///"))

    if dsn.startswith("file:///"):
        return FileModelStore(dsn.removeprefix("file:///"))

    if "://" in dsn:
        raise ValueError(f"Unsupported store DSN: {dsn}")
    return FileModelStore(dsn)
