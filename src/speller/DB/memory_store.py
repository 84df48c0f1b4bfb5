# speller/DB/memory_store.py
from __future__ import annotations
from typing import Optional
from .api import ModelStore
from ..models import FrequencyModel


class MemoryModelStore(ModelStore):
    """Keeps the last saved model in process (useful for tests or ephemeral runs)."""
    def __init__(self, model: Optional[FrequencyModel] = None) -> None:
        self._model = model

    def load(self) -> Optional[FrequencyModel]:
        return self._model

    def save(self, model: FrequencyModel) -> None:
        self._model = model

    def close(self) -> None:
        self._model = None
