import pytest

from finapp.deps import reset_repo
from finapp.json_repo import JsonRepository
from finapp.services.finance_service import FinanceService
from finapp.services.storage_service import StorageService


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "finapp-data.json"


@pytest.fixture
def repo(db_path):
    """Repositório isolado em arquivo temporário, também usado pelos routers"""
    repository = JsonRepository(str(db_path))
    reset_repo(repository)
    yield repository
    reset_repo()


@pytest.fixture
def storage(repo):
    return StorageService(repo)


@pytest.fixture
def finance(storage):
    return FinanceService(storage)
