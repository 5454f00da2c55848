# src/app/infra/db/base.py
"""
Abstract base class for entity CRUD access.
This interface allows services to be swapped for stubs in tests.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """
    Abstract interface for CRUD + search over a single table.

    Implementations:
    - InfluencerService: `influencers` table in Supabase
    - RecipeService: `recipes` table in Supabase
    """

    @abstractmethod
    def get_all(self) -> list[T]:
        """
        Fetch every record.

        Returns:
            All records, or an empty list if the table is empty
        """
        pass

    @abstractmethod
    def get_by_id(self, record_id: str) -> T:
        """
        Fetch one record by exact id match.

        Args:
            record_id: The record id

        Returns:
            The record

        Raises:
            RecordNotFoundError: If no row has this id
        """
        pass

    @abstractmethod
    def create(self, record: T) -> T:
        """
        Insert a new record.

        Args:
            record: The record to insert (id is assigned by the database)

        Returns:
            The created record as stored

        Raises:
            RecordWriteError: If the database returns no row
        """
        pass

    @abstractmethod
    def update(self, record_id: str, changes: Mapping[str, Any]) -> T:
        """
        Update only the given fields of a record.

        Args:
            record_id: The record to update
            changes: Domain field name -> new value, only for fields that change

        Returns:
            The updated record as stored

        Raises:
            RecordWriteError: If the database returns no row
        """
        pass

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """
        Remove a record by id.

        Args:
            record_id: The record to delete
        """
        pass

    @abstractmethod
    def search(self, query: str) -> list[T]:
        """
        Case-insensitive substring search over the entity's text columns.

        Args:
            query: Text to look for; empty matches every record

        Returns:
            Matching records, possibly empty
        """
        pass
