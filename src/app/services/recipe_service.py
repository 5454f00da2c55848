# src/app/services/recipe_service.py
from __future__ import annotations

from typing import Any, Mapping

from src.app.domain.models import Recipe
from src.app.infra.db.mappers import (
    INFLUENCER_RELATION,
    recipe_changes_to_row,
    recipe_to_row,
    row_to_recipe,
)
from src.app.services.entity_service import SupabaseEntityService


class RecipeService(SupabaseEntityService[Recipe]):
    TABLE_NAME = "recipes"
    ENTITY = "recipe"
    # Reads embed the owning influencer through the influencer_id foreign key
    SELECT_COLUMNS = f"*, {INFLUENCER_RELATION}(*)"
    SEARCH_COLUMNS = ("title", "description")

    def _to_record(self, row: Mapping[str, Any]) -> Recipe:
        return row_to_recipe(row)

    def _to_row(self, record: Recipe) -> dict[str, Any]:
        return recipe_to_row(record)

    def _changes_to_row(self, changes: Mapping[str, Any]) -> dict[str, Any]:
        return recipe_changes_to_row(changes)
