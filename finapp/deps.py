from typing import Optional

from finapp.core.config import FINAPP_DB_PATH
from finapp.json_repo import JsonRepository

_repo: Optional[JsonRepository] = None


def get_repo() -> JsonRepository:
    global _repo
    if _repo is None:
        _repo = JsonRepository(FINAPP_DB_PATH)
    return _repo


def reset_repo(repo: Optional[JsonRepository] = None) -> None:
    """Descarta o repositório atual (ou troca por outro, usado nos testes)"""
    global _repo
    _repo = repo
