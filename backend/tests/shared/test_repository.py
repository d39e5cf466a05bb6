"""Tests for shared/repository.py."""

from typing import Optional
from unittest.mock import MagicMock

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
            {"key": "user:1", "value": {"username": "alice"}}
        ]

        class TestRepository(BaseRepository[dict]):
            def first(self) -> Optional[dict]:
                result = self._db.table("kv_store").select("*").execute()
                return result.data[0] if result.data else None

        repo = TestRepository(mock_db)

        assert repo.first() == {"key": "user:1", "value": {"username": "alice"}}
        mock_db.table.assert_called_once_with("kv_store")
