# src/app/services/recipe_form.py
"""
Recipe form controller.
Holds the editable draft of a recipe, writes it through the recipe service
and re-fetches the saved record before reporting success.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Optional

from starlette.concurrency import run_in_threadpool

from src.app.domain.errors import DraftValidationError, RecordValidationError
from src.app.domain.models import (
    FormState,
    Ingredient,
    Notification,
    NotificationVariant,
    Recipe,
)
from src.app.infra.db.base import EntityRepository

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("prep_time", "cook_time", "servings", "calories")
TAG_SEPARATOR = ","
GENERIC_ERROR_MESSAGE = "An error occurred while saving the recipe"
SUCCESS_DURATION_MS = 5000


@dataclass
class RecipeDraft:
    """Editable copy of a recipe; numbers and tags are kept as display text."""
    title: str = ""
    description: str = ""
    image: str = ""
    prep_time: str = "0"
    cook_time: str = "0"
    servings: str = "4"
    calories: str = "0"
    tags: str = ""
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    influencer_id: str = ""


DRAFT_FIELDS = tuple(f.name for f in fields(RecipeDraft))


def _display_number(value: Optional[int]) -> str:
    # NULL columns show as an empty field rather than the text "None"
    return "" if value is None else str(value)


def recipe_to_draft(recipe: Recipe) -> RecipeDraft:
    return RecipeDraft(
        title=recipe.title or "",
        description=recipe.description or "",
        image=recipe.image or "",
        prep_time=_display_number(recipe.prep_time),
        cook_time=_display_number(recipe.cook_time),
        servings=_display_number(recipe.servings),
        calories=_display_number(recipe.calories),
        tags=", ".join(recipe.tags or []),
        ingredients=list(recipe.ingredients or []),
        instructions=list(recipe.instructions or []),
        influencer_id=recipe.influencer_id or "",
    )


def parse_tags(text: str) -> list[str]:
    """Split comma-separated tags, trimming whitespace and dropping empty entries."""
    return [tag.strip() for tag in text.split(TAG_SEPARATOR) if tag.strip()]


def _parse_non_negative_int(value: str) -> int:
    number = int(value.strip())
    if number < 0:
        raise ValueError("must not be negative")
    return number


def draft_to_recipe(draft: RecipeDraft) -> Recipe:
    """
    Convert the draft back into a typed recipe.

    Raises:
        DraftValidationError: With one message per rejected field
    """
    errors: dict[str, str] = {}
    numbers: dict[str, int] = {}

    for name in NUMERIC_FIELDS:
        raw = getattr(draft, name)
        try:
            numbers[name] = _parse_non_negative_int(raw)
        except ValueError:
            errors[name] = f"expected a non-negative whole number, got {raw!r}"

    if not draft.title.strip():
        errors["title"] = "is required"
    if not draft.influencer_id.strip():
        errors["influencer_id"] = "is required"

    if errors:
        raise DraftValidationError(errors)

    return Recipe(
        title=draft.title,
        description=draft.description,
        image=draft.image,
        tags=parse_tags(draft.tags),
        ingredients=list(draft.ingredients),
        instructions=list(draft.instructions),
        influencer_id=draft.influencer_id,
        **numbers,
    )


def _changed_fields(original: Recipe, updated: Recipe) -> dict[str, Any]:
    changes: dict[str, Any] = {}
    for name in DRAFT_FIELDS:
        value = getattr(updated, name)
        if getattr(original, name) != value:
            changes[name] = value
    return changes


class RecipeFormController:
    """
    State machine behind the create/edit recipe dialog.

    CLOSED -> EDITING on open(); EDITING -> SUBMITTING -> VALIDATING on
    submit(); success closes the dialog, any failure returns to EDITING.
    Every open()/close() starts a new lifetime scope, and results of a
    submit that outlived its scope are dropped.
    """

    def __init__(
        self,
        service: EntityRepository[Recipe],
        notify: Callable[[Notification], None],
        on_open_change: Optional[Callable[[bool], None]] = None,
    ):
        self._service = service
        self._notify = notify
        self._on_open_change = on_open_change
        self._scope = 0
        self.state = FormState.CLOSED
        self.draft = RecipeDraft()
        self.editing_recipe: Optional[Recipe] = None
        self.field_errors: dict[str, str] = {}

    @property
    def is_open(self) -> bool:
        return self.state != FormState.CLOSED

    @property
    def loading(self) -> bool:
        return self.state in (FormState.SUBMITTING, FormState.VALIDATING)

    @property
    def validating(self) -> bool:
        return self.state == FormState.VALIDATING

    def open(self, editing_recipe: Optional[Recipe] = None) -> None:
        self._scope += 1
        self.editing_recipe = editing_recipe
        self.draft = recipe_to_draft(editing_recipe) if editing_recipe else RecipeDraft()
        self.field_errors = {}
        self.state = FormState.EDITING

    def close(self) -> None:
        self._scope += 1
        self.state = FormState.CLOSED
        self.editing_recipe = None
        self.draft = RecipeDraft()
        self.field_errors = {}
        if self._on_open_change:
            self._on_open_change(False)

    def change(self, name: str, value: Any) -> None:
        if name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown recipe form field: {name}")
        if self.state != FormState.EDITING:
            raise RuntimeError(f"Recipe form is not editable while {self.state.value}")
        self.draft = replace(self.draft, **{name: value})

    async def submit(self) -> bool:
        """
        Save the draft and confirm it landed in the database.

        Returns:
            True if the recipe was saved and verified
        """
        if self.loading:
            logger.debug("Ignoring submit while %s", self.state.value)
            return False
        if self.state != FormState.EDITING:
            raise RuntimeError("Recipe form is not open")

        scope = self._scope
        editing = self.editing_recipe

        try:
            recipe = draft_to_recipe(self.draft)
        except DraftValidationError as error:
            logger.warning("Recipe draft rejected: %s", error.field_errors)
            self.field_errors = error.field_errors
            self._notify_error(editing, error)
            return False

        self.field_errors = {}
        self.state = FormState.SUBMITTING

        try:
            if editing:
                saved = await run_in_threadpool(
                    self._service.update, editing.id, _changed_fields(editing, recipe)
                )
            else:
                saved = await run_in_threadpool(self._service.create, recipe)

            if self._is_stale(scope):
                return False

            self.state = FormState.VALIDATING
            is_valid = await self._validate(saved.id)

            if self._is_stale(scope):
                return False
            if not is_valid:
                raise RecordValidationError("recipe", str(saved.id))
        except Exception as error:
            if self._is_stale(scope):
                logger.debug("Dropping failed submit result after form closed: %s", error)
                return False
            self.state = FormState.EDITING
            self._notify_error(editing, error)
            return False

        self._notify(
            Notification(
                title="Success!",
                description=(
                    "Recipe updated successfully and verified in the database."
                    if editing
                    else "Recipe created successfully and verified in the database."
                ),
                duration_ms=SUCCESS_DURATION_MS,
            )
        )
        self.close()
        return True

    async def _validate(self, recipe_id: Optional[str]) -> bool:
        try:
            recipe = await run_in_threadpool(self._service.get_by_id, recipe_id)
            return recipe is not None
        except Exception as error:
            logger.warning("Recipe validation error: id=%s, error=%s", recipe_id, error)
            return False

    def _is_stale(self, scope: int) -> bool:
        if scope != self._scope:
            logger.debug("Discarding recipe form result from a closed scope")
            return True
        return False

    def _notify_error(self, editing: Optional[Recipe], error: Exception) -> None:
        self._notify(
            Notification(
                title="Error updating recipe" if editing else "Error creating recipe",
                description=str(error) or GENERIC_ERROR_MESSAGE,
                variant=NotificationVariant.DESTRUCTIVE,
            )
        )
