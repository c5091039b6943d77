"""Tests for shared/repository.py."""

import pytest
from unittest.mock import MagicMock

import httpx
from supabase import PostgrestAPIError

from shared.exceptions import PersistenceError
from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_subclass_can_access_db(self):
        """Subclass should be able to access _db and use it."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                with self._guard("get all"):
                    result = self._db.table("test").select("*").execute()
                return result.data

        repo = TestRepository(mock_db)
        result = repo.get_all()

        assert result == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_once_with("test")

    def test_guard_wraps_postgrest_errors(self):
        """Driver failures should surface as PersistenceError."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = PostgrestAPIError(
            {"message": "connection refused", "code": "08006"}
        )

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                with self._guard("get all"):
                    return self._db.table("test").select("*").execute().data

        with pytest.raises(PersistenceError) as exc_info:
            TestRepository(mock_db).get_all()

        assert exc_info.value.operation == "get all"
        assert isinstance(exc_info.value.__cause__, PostgrestAPIError)

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
        ],
    )
    def test_guard_wraps_transport_errors(self, error):
        """An unreachable store should surface as PersistenceError, not a raw httpx error."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = error

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                with self._guard("get all"):
                    return self._db.table("test").select("*").execute().data

        with pytest.raises(PersistenceError) as exc_info:
            TestRepository(mock_db).get_all()

        assert exc_info.value.http_status == 503
        assert exc_info.value.__cause__ is error

    def test_guard_lets_other_errors_through(self):
        """Errors that do not come from the driver propagate unchanged."""
        repo = BaseRepository(MagicMock())
        with pytest.raises(KeyError):
            with repo._guard("lookup"):
                raise KeyError("missing")
