# src/app/routers/recipes.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from starlette.concurrency import run_in_threadpool

from src.app.deps import get_recipe_service
from src.app.domain.errors import RecordNotFoundError, RecordWriteError
from src.app.domain.models import Ingredient, Recipe
from src.app.routers.influencers import influencer_response
from src.app.schemas.recipes import (
    IngredientItem,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)
from src.app.services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["recipes"])

# API field -> domain field
_FIELD_NAMES = {
    "title": "title",
    "description": "description",
    "image": "image",
    "prepTime": "prep_time",
    "cookTime": "cook_time",
    "servings": "servings",
    "calories": "calories",
    "tags": "tags",
    "ingredients": "ingredients",
    "instructions": "instructions",
    "influencerId": "influencer_id",
}
_NULLABLE_FIELDS = {"description", "image"}


def ingredient_from_item(item: IngredientItem) -> Ingredient:
    return Ingredient(name=item.name, quantity=item.quantity, notes=item.notes)


def ingredient_item(ingredient: Ingredient) -> IngredientItem:
    return IngredientItem(name=ingredient.name, quantity=ingredient.quantity, notes=ingredient.notes)


def recipe_response(recipe: Recipe) -> RecipeResponse:
    return RecipeResponse(
        id=recipe.id or "",
        title=recipe.title or "",
        description=recipe.description,
        image=recipe.image,
        prepTime=recipe.prep_time,
        cookTime=recipe.cook_time,
        servings=recipe.servings,
        calories=recipe.calories,
        tags=recipe.tags,
        ingredients=[ingredient_item(item) for item in recipe.ingredients],
        instructions=recipe.instructions,
        influencerId=recipe.influencer_id,
        influencer=influencer_response(recipe.influencer) if recipe.influencer else None,
    )


def _recipe_fields(data: dict[str, Any]) -> dict[str, Any]:
    cleared = sorted(key for key, value in data.items() if value is None and key not in _NULLABLE_FIELDS)
    if cleared:
        raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
    fields = {_FIELD_NAMES[key]: value for key, value in data.items()}
    if fields.get("ingredients") is not None:
        fields["ingredients"] = [Ingredient(**item) for item in fields["ingredients"]]
    return fields


@router.get("/", response_model=list[RecipeResponse])
async def list_recipes(
    q: Optional[str] = Query(default=None, description="Case-insensitive search on title and description"),
    service: RecipeService = Depends(get_recipe_service),
) -> list[RecipeResponse]:
    if q is None:
        recipes = await run_in_threadpool(service.get_all)
    else:
        recipes = await run_in_threadpool(service.search, q)
    return [recipe_response(item) for item in recipes]


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    try:
        recipe = await run_in_threadpool(service.get_by_id, recipe_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return recipe_response(recipe)


@router.post("/", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeCreate,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    recipe = Recipe(**_recipe_fields(payload.model_dump()))
    try:
        created = await run_in_threadpool(service.create, recipe)
    except RecordWriteError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return recipe_response(created)


@router.patch("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: str,
    payload: RecipeUpdate,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    try:
        changes = _recipe_fields(payload.model_dump(exclude_unset=True))
        recipe = await run_in_threadpool(service.update, recipe_id, changes)
    except (RecordNotFoundError, RecordWriteError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return recipe_response(recipe)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
) -> Response:
    await run_in_threadpool(service.delete, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
