# src/app/infra/db/mappers.py
"""
Translation between Supabase rows (snake_case columns, nullable arrays)
and domain records. Pure functions, no I/O.
"""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Mapping

from src.app.domain.models import Influencer, Ingredient, Recipe

Row = dict[str, Any]

# domain field -> storage column
INFLUENCER_COLUMNS: dict[str, str] = {
    "name": "name",
    "avatar": "avatar_url",
    "cover_image": "cover_image_url",
    "bio": "bio",
    "social_media": "social_media",
    "specialties": "specialties",
    "followers": "followers",
    "recipes_count": "recipes_count",
}

RECIPE_COLUMNS: dict[str, str] = {
    "title": "title",
    "description": "description",
    "image": "image_url",
    "prep_time": "prep_time",
    "cook_time": "cook_time",
    "servings": "servings",
    "calories": "calories",
    "tags": "tags",
    "ingredients": "ingredients",
    "instructions": "instructions",
    "influencer_id": "influencer_id",
}

# Embedded relation key when recipes are selected with "*, influencers(*)"
INFLUENCER_RELATION = "influencers"


def _stringify_id(value: Any) -> str | None:
    return str(value) if value is not None else None


def _row_to_ingredient(value: Any) -> Ingredient:
    if isinstance(value, str):
        return Ingredient(name=value)
    return Ingredient(
        name=str(value.get("name") or ""),
        quantity=value.get("quantity"),
        notes=value.get("notes"),
    )


def row_to_influencer(row: Mapping[str, Any]) -> Influencer:
    return Influencer(
        id=_stringify_id(row.get("id")),
        name=row.get("name"),
        avatar=row.get("avatar_url"),
        cover_image=row.get("cover_image_url"),
        bio=row.get("bio"),
        social_media=row.get("social_media") or {},
        specialties=list(row.get("specialties") or []),
        followers=row.get("followers"),
        recipes_count=row.get("recipes_count"),
    )


def row_to_recipe(row: Mapping[str, Any]) -> Recipe:
    embedded = row.get(INFLUENCER_RELATION)
    return Recipe(
        id=_stringify_id(row.get("id")),
        title=row.get("title"),
        description=row.get("description"),
        image=row.get("image_url"),
        prep_time=row.get("prep_time"),
        cook_time=row.get("cook_time"),
        servings=row.get("servings"),
        calories=row.get("calories"),
        tags=list(row.get("tags") or []),
        ingredients=[_row_to_ingredient(item) for item in row.get("ingredients") or []],
        instructions=list(row.get("instructions") or []),
        influencer_id=_stringify_id(row.get("influencer_id")),
        influencer=row_to_influencer(embedded) if isinstance(embedded, Mapping) else None,
    )


def _changes_to_row(changes: Mapping[str, Any], columns: Mapping[str, str], entity: str) -> Row:
    if "id" in changes:
        raise ValueError(f"{entity} id cannot be changed")
    unknown = sorted(set(changes) - set(columns))
    if unknown:
        raise ValueError(f"Unknown {entity} fields: {', '.join(unknown)}")
    return {columns[name]: value for name, value in changes.items()}


def influencer_changes_to_row(changes: Mapping[str, Any]) -> Row:
    """Map an explicit set of changed influencer fields to column names."""
    return _changes_to_row(changes, INFLUENCER_COLUMNS, "influencer")


def recipe_changes_to_row(changes: Mapping[str, Any]) -> Row:
    """Map an explicit set of changed recipe fields to column names."""
    payload = dict(changes)
    if payload.get("ingredients") is not None:
        payload["ingredients"] = [
            asdict(item) if isinstance(item, Ingredient) else dict(item)
            for item in payload["ingredients"]
        ]
    return _changes_to_row(payload, RECIPE_COLUMNS, "recipe")


def influencer_to_row(influencer: Influencer) -> Row:
    row = influencer_changes_to_row(
        {name: getattr(influencer, name) for name in INFLUENCER_COLUMNS}
    )
    if influencer.id:
        row["id"] = influencer.id
    return row


def recipe_to_row(recipe: Recipe) -> Row:
    row = recipe_changes_to_row({name: getattr(recipe, name) for name in RECIPE_COLUMNS})
    if recipe.id:
        row["id"] = recipe.id
    return row
