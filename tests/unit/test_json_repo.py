"""Unit tests for the JSON file repository."""
import json
from unittest.mock import patch

import pytest

from finapp.core.exceptions import StorageError
from finapp.json_repo import JsonRepository


class TestJsonRepository:
    """Test suite for JsonRepository."""

    def test_missing_file_starts_empty(self, db_path):
        repo = JsonRepository(str(db_path))
        assert repo.data["gastos"] == []
        assert repo.data["counters"] == {"usuario": 1, "gasto": 1, "limite_categoria": 1}
        assert not db_path.exists()

    def test_add_document_persists_and_allocates_ids(self, db_path):
        repo = JsonRepository(str(db_path))
        first = repo.add_document("usuarios", {"telefone": "1"})
        second = repo.add_document("usuarios", {"telefone": "2"})

        assert (first["id"], second["id"]) == (1, 2)
        saved = json.loads(db_path.read_text(encoding="utf-8"))
        assert [u["telefone"] for u in saved["usuarios"]] == ["1", "2"]
        assert saved["counters"]["usuario"] == 3

    def test_ids_are_not_reused_after_removal(self, db_path):
        repo = JsonRepository(str(db_path))
        repo.add_document("gastos", {"valor": 1})
        repo.remove_documents("gastos", lambda g: g["id"] == 1)
        assert repo.add_document("gastos", {"valor": 2})["id"] == 2

    def test_reload_from_disk(self, db_path):
        JsonRepository(str(db_path)).add_document("gastos", {"descricao": "pão de açúcar"})
        reloaded = JsonRepository(str(db_path))
        assert reloaded.data["gastos"][0]["descricao"] == "pão de açúcar"
        assert "açúcar" in db_path.read_text(encoding="utf-8")

    def test_corrupt_file_falls_back_to_empty(self, db_path):
        db_path.write_text("{not json", encoding="utf-8")
        repo = JsonRepository(str(db_path))
        assert repo.data["usuarios"] == []

    def test_partial_document_gets_missing_keys(self, db_path):
        db_path.write_text(json.dumps({"usuarios": [{"id": 1, "telefone": "9"}]}), encoding="utf-8")
        repo = JsonRepository(str(db_path))
        assert repo.data["gastos"] == []
        assert repo.data["counters"]["gasto"] == 1

    def test_remove_without_match_does_not_write(self, db_path):
        repo = JsonRepository(str(db_path))
        with patch.object(repo, "save") as save:
            assert repo.remove_documents("gastos", lambda g: True) == 0
            save.assert_not_called()

    def test_write_failure_raises_storage_error(self, tmp_path):
        repo = JsonRepository(str(tmp_path / "missing-dir" / "db.json"))
        with pytest.raises(StorageError):
            repo.add_document("usuarios", {"telefone": "1"})

    @pytest.mark.parametrize("content", ["[]", "null", '"x"', '{"usuarios": null}', '{"counters": []}'])
    def test_wrong_shape_falls_back_to_empty(self, db_path, content):
        db_path.write_text(content, encoding="utf-8")
        repo = JsonRepository(str(db_path))
        assert repo.data["usuarios"] == []
        assert repo.add_document("usuarios", {"telefone": "1"})["id"] == 1

    def test_failed_add_leaves_memory_untouched(self, tmp_path):
        repo = JsonRepository(str(tmp_path / "missing-dir" / "db.json"))
        with pytest.raises(StorageError):
            repo.add_document("usuarios", {"telefone": "1"})
        assert repo.data["usuarios"] == []
        assert repo.data["counters"]["usuario"] == 1

    def test_failed_remove_restores_documents(self, db_path):
        repo = JsonRepository(str(db_path))
        repo.add_document("gastos", {"valor": 1})
        with patch.object(repo, "save", side_effect=StorageError("disco cheio")):
            with pytest.raises(StorageError):
                repo.remove_documents("gastos", lambda g: True)
        assert [g["valor"] for g in repo.data["gastos"]] == [1]
