# src/app/services/entity_service.py
from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, Mapping, TypeVar

from supabase import Client

from src.app.domain.errors import RecordNotFoundError, RecordWriteError
from src.app.infra.db.base import EntityRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _quote_filter_value(value: str) -> str:
    # PostgREST treats , . : ( ) as reserved inside or=(...) unless quoted
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_ilike_filter(columns: tuple[str, ...], query: str) -> str:
    """Build an or=(...) filter matching `query` as a substring of any column."""
    pattern = _quote_filter_value(f"%{query}%")
    return ",".join(f"{column}.ilike.{pattern}" for column in columns)


class SupabaseEntityService(EntityRepository[T]):
    """
    CRUD + search over one Supabase table.

    Every operation is a single round trip: build query, execute,
    check the result, map row(s) to domain records. Errors raised by the
    client (postgrest APIError, network errors) propagate unchanged.
    """

    TABLE_NAME: str
    ENTITY: str
    SELECT_COLUMNS = "*"
    SEARCH_COLUMNS: tuple[str, ...] = ()

    def __init__(self, client: Client):
        self._client = client
        logger.info("%s initialized for table %s", type(self).__name__, self.TABLE_NAME)

    @abstractmethod
    def _to_record(self, row: Mapping[str, Any]) -> T:
        pass

    @abstractmethod
    def _to_row(self, record: T) -> dict[str, Any]:
        pass

    @abstractmethod
    def _changes_to_row(self, changes: Mapping[str, Any]) -> dict[str, Any]:
        pass

    def _table(self):
        return self._client.table(self.TABLE_NAME)

    def get_all(self) -> list[T]:
        result = self._table().select(self.SELECT_COLUMNS).execute()
        rows = result.data or []
        logger.debug("Fetched %d %s rows", len(rows), self.ENTITY)
        return [self._to_record(row) for row in rows]

    def get_by_id(self, record_id: str) -> T:
        result = (
            self._table()
            .select(self.SELECT_COLUMNS)
            .eq("id", record_id)
            .limit(1)
            .execute()
        )
        rows = result.data or []
        if not rows:
            raise RecordNotFoundError(self.ENTITY, record_id)
        return self._to_record(rows[0])

    def create(self, record: T) -> T:
        payload = self._to_row(record)
        result = self._table().insert(payload).execute()

        if not result.data:
            raise RecordWriteError("create", self.ENTITY)

        created = self._to_record(result.data[0])
        logger.info("Created %s: id=%s", self.ENTITY, getattr(created, "id", None))
        return created

    def update(self, record_id: str, changes: Mapping[str, Any]) -> T:
        payload = self._changes_to_row(changes)
        if not payload:
            return self.get_by_id(record_id)

        result = self._table().update(payload).eq("id", record_id).execute()

        if not result.data:
            raise RecordWriteError("update", self.ENTITY)

        logger.info("Updated %s: id=%s, columns=%s", self.ENTITY, record_id, sorted(payload))
        return self._to_record(result.data[0])

    def delete(self, record_id: str) -> None:
        self._table().delete().eq("id", record_id).execute()
        logger.info("Deleted %s: id=%s", self.ENTITY, record_id)

    def search(self, query: str) -> list[T]:
        if not query:
            return self.get_all()

        result = (
            self._table()
            .select(self.SELECT_COLUMNS)
            .or_(build_ilike_filter(self.SEARCH_COLUMNS, query))
            .execute()
        )
        rows = result.data or []
        logger.debug("Search %s for %r matched %d rows", self.ENTITY, query, len(rows))
        return [self._to_record(row) for row in rows]
