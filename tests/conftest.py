from __future__ import annotations

import copy
import os
import re
from typing import Any, Callable
from uuid import uuid4

import pytest

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")

_ILIKE_RE = re.compile(r'(\w+)\.ilike\."((?:[^"\\]|\\.)*)"')
_EMBED_RE = re.compile(r"(\w+)\(\*\)")


class ResultStub:
    def __init__(self, data: list[dict[str, Any]]) -> None:
        self.data = data
        self.count = len(data)


class QueryStub:
    def __init__(self, client: "SupabaseClientStub", table: str) -> None:
        self._client = client
        self._table = table
        self._operation = "select"
        self._columns = "*"
        self._payload: dict[str, Any] | None = None
        self._filters: list[Callable[[dict[str, Any]], bool]] = []
        self._limit: int | None = None
        self.or_filter: str | None = None

    def select(self, columns: str = "*", **kwargs: Any) -> "QueryStub":
        self._columns = columns
        return self

    def insert(self, payload: dict[str, Any]) -> "QueryStub":
        self._operation = "insert"
        self._payload = payload
        return self

    def update(self, payload: dict[str, Any]) -> "QueryStub":
        self._operation = "update"
        self._payload = payload
        return self

    def delete(self) -> "QueryStub":
        self._operation = "delete"
        return self

    def eq(self, column: str, value: Any) -> "QueryStub":
        self._filters.append(lambda row: str(row.get(column)) == str(value))
        return self

    def or_(self, filters: str) -> "QueryStub":
        self.or_filter = filters
        terms = [
            (column, re.sub(r"\\(.)", r"\1", raw).strip("%").lower())
            for column, raw in _ILIKE_RE.findall(filters)
        ]
        self._filters.append(
            lambda row: any(needle in str(row.get(column) or "").lower() for column, needle in terms)
        )
        return self

    def limit(self, count: int) -> "QueryStub":
        self._limit = count
        return self

    def execute(self) -> ResultStub:
        self._client.queries.append(self)
        if self._client.next_error is not None:
            error, self._client.next_error = self._client.next_error, None
            raise error

        rows = self._client.tables.setdefault(self._table, [])

        if self._operation == "insert":
            if self._client.drop_writes:
                return ResultStub([])
            row = {"id": str(uuid4()), **copy.deepcopy(self._payload)}
            rows.append(row)
            return ResultStub([copy.deepcopy(row)])

        matched = [row for row in rows if all(check(row) for check in self._filters)]

        if self._operation == "update":
            if self._client.drop_writes:
                return ResultStub([])
            for row in matched:
                row.update(copy.deepcopy(self._payload))
            return ResultStub(copy.deepcopy(matched))

        if self._operation == "delete":
            self._client.tables[self._table] = [row for row in rows if row not in matched]
            return ResultStub(copy.deepcopy(matched))

        if self._limit is not None:
            matched = matched[: self._limit]
        return ResultStub([self._embed(copy.deepcopy(row)) for row in matched])

    def _embed(self, row: dict[str, Any]) -> dict[str, Any]:
        for relation in _EMBED_RE.findall(self._columns):
            foreign_key = f"{relation[:-1]}_id"
            related = [
                candidate
                for candidate in self._client.tables.get(relation, [])
                if candidate.get("id") == row.get(foreign_key)
            ]
            row[relation] = copy.deepcopy(related[0]) if related else None
        return row


class SupabaseClientStub:
    """In-memory stand-in for supabase.Client's PostgREST query builder."""

    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.queries: list[QueryStub] = []
        self.next_error: Exception | None = None
        self.drop_writes = False

    def table(self, name: str) -> QueryStub:
        return QueryStub(self, name)


@pytest.fixture
def supabase_stub() -> SupabaseClientStub:
    return SupabaseClientStub()


@pytest.fixture
def influencer_service(supabase_stub: SupabaseClientStub):
    from src.app.services.influencer_service import InfluencerService

    return InfluencerService(supabase_stub)


@pytest.fixture
def recipe_service(supabase_stub: SupabaseClientStub):
    from src.app.services.recipe_service import RecipeService

    return RecipeService(supabase_stub)
