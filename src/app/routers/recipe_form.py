# src/app/routers/recipe_form.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.concurrency import run_in_threadpool

from src.app.deps import get_recipe_service
from src.app.domain.errors import RecordNotFoundError
from src.app.domain.models import Notification, Recipe
from src.app.routers.recipes import ingredient_from_item, ingredient_item
from src.app.schemas.recipes import (
    NotificationResponse,
    RecipeFormData,
    RecipeFormResult,
    RecipeFormSubmit,
)
from src.app.services.recipe_form import RecipeDraft, RecipeFormController
from src.app.services.recipe_service import RecipeService

log = logging.getLogger(__name__)
router = APIRouter(prefix="/admin/recipe-form", tags=["admin"])

# API field -> draft field
_DRAFT_FIELDS = {
    "title": "title",
    "description": "description",
    "image": "image",
    "prepTime": "prep_time",
    "cookTime": "cook_time",
    "servings": "servings",
    "calories": "calories",
    "tags": "tags",
    "instructions": "instructions",
    "influencerId": "influencer_id",
}


def _form_data(draft: RecipeDraft) -> RecipeFormData:
    values = {api_name: getattr(draft, name) for api_name, name in _DRAFT_FIELDS.items()}
    return RecipeFormData(
        ingredients=[ingredient_item(item) for item in draft.ingredients],
        **values,
    )


def _notification_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        title=notification.title,
        description=notification.description,
        variant=notification.variant.value,
        duration=notification.duration_ms,
    )


def _result(controller: RecipeFormController, notification: Optional[Notification]) -> RecipeFormResult:
    return RecipeFormResult(
        open=controller.is_open,
        state=controller.state.value,
        notification=_notification_response(notification) if notification else None,
        fieldErrors=controller.field_errors,
        draft=_form_data(controller.draft) if controller.is_open else None,
    )


async def _load_recipe(service: RecipeService, recipe_id: str) -> Recipe:
    try:
        return await run_in_threadpool(service.get_by_id, recipe_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.get("", response_model=RecipeFormResult)
async def open_recipe_form(
    recipeId: Optional[str] = Query(default=None),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeFormResult:
    editing = await _load_recipe(service, recipeId) if recipeId else None
    controller = RecipeFormController(service, notify=lambda _: None)
    controller.open(editing)
    return _result(controller, None)


@router.post("", response_model=RecipeFormResult)
async def submit_recipe_form(
    payload: RecipeFormSubmit,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeFormResult:
    editing = (
        await _load_recipe(service, payload.editingRecipeId)
        if payload.editingRecipeId
        else None
    )

    notifications: list[Notification] = []
    controller = RecipeFormController(service, notify=notifications.append)
    controller.open(editing)

    for api_name, name in _DRAFT_FIELDS.items():
        controller.change(name, getattr(payload.draft, api_name))
    controller.change(
        "ingredients", [ingredient_from_item(item) for item in payload.draft.ingredients]
    )

    saved = await controller.submit()
    log.info("Recipe form submitted: editing=%s, saved=%s", payload.editingRecipeId, saved)
    return _result(controller, notifications[-1] if notifications else None)
