from datetime import date, datetime
import json
import logging
import os
from typing import Any, Dict, List

from finapp.core.exceptions import StorageError

logger = logging.getLogger(__name__)

COLLECTIONS = ("usuarios", "gastos", "limites_categoria")
COUNTER_KEYS = {
    "usuarios": "usuario",
    "gastos": "gasto",
    "limites_categoria": "limite_categoria",
}


def _encode_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _encode_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    return value


def empty_document() -> Dict[str, Any]:
    return {
        "usuarios": [],
        "gastos": [],
        "limites_categoria": [],
        "counters": {"usuario": 1, "gasto": 1, "limite_categoria": 1},
    }


def _is_valid_document(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    if any(not isinstance(data.get(c, []), list) for c in COLLECTIONS):
        return False
    return isinstance(data.get("counters", {}), dict)


class JsonRepository:
    # Documento inteiro em memória, regravado no disco a cada alteração
    def __init__(self, path: str):
        self.path = path
        self.data = self._load()

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return empty_document()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Erro ao carregar banco de dados {self.path}: {e}")
            return empty_document()

        if not _is_valid_document(data):
            logger.error(f"Banco de dados {self.path} com formato inválido, iniciando vazio")
            return empty_document()

        base = empty_document()
        for collection in COLLECTIONS:
            data.setdefault(collection, base[collection])
        counters = data.setdefault("counters", {})
        for key, start in base["counters"].items():
            counters.setdefault(key, start)
        return data

    def save(self) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(_encode_value(self.data), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Erro ao salvar banco de dados {self.path}: {e}")
            raise StorageError(str(e)) from e

    def list_documents(self, collection: str) -> List[Dict[str, Any]]:
        return self.data[collection]

    def next_id(self, collection: str) -> int:
        key = COUNTER_KEYS[collection]
        new_id = self.data["counters"][key]
        self.data["counters"][key] = new_id + 1
        return new_id

    def add_document(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        key = COUNTER_KEYS[collection]
        previous_counter = self.data["counters"][key]
        doc = {"id": self.next_id(collection), **_encode_value(data)}
        self.data[collection].append(doc)
        try:
            self.save()
        except StorageError:
            # Memória volta ao estado gravado
            self.data[collection].pop()
            self.data["counters"][key] = previous_counter
            raise
        return doc

    def remove_documents(self, collection: str, predicate) -> int:
        docs = self.data[collection]
        kept = [doc for doc in docs if not predicate(doc)]
        removed = len(docs) - len(kept)
        if removed:
            self.data[collection] = kept
            try:
                self.save()
            except StorageError:
                self.data[collection] = docs
                raise
        return removed
