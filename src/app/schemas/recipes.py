# src/app/schemas/recipes.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from src.app.schemas.influencers import InfluencerResponse


class IngredientItem(BaseModel):
    name: str
    quantity: Optional[str] = None
    notes: Optional[str] = None


class RecipeResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    prepTime: Optional[int] = None
    cookTime: Optional[int] = None
    servings: Optional[int] = None
    calories: Optional[int] = None
    tags: list[str] = Field(default_factory=list)
    ingredients: list[IngredientItem] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    influencerId: Optional[str] = None
    influencer: Optional[InfluencerResponse] = None


class RecipeCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    image: str = ""
    prepTime: int = Field(default=0, ge=0)
    cookTime: int = Field(default=0, ge=0)
    servings: int = Field(default=4, ge=0)
    calories: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)
    ingredients: list[IngredientItem] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    influencerId: str = Field(..., min_length=1)


class RecipeUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    image: Optional[str] = None
    prepTime: Optional[int] = Field(default=None, ge=0)
    cookTime: Optional[int] = Field(default=None, ge=0)
    servings: Optional[int] = Field(default=None, ge=0)
    calories: Optional[int] = Field(default=None, ge=0)
    tags: Optional[list[str]] = None
    ingredients: Optional[list[IngredientItem]] = None
    instructions: Optional[list[str]] = None
    influencerId: Optional[str] = Field(default=None, min_length=1)


class RecipeFormData(BaseModel):
    """Draft as the dialog edits it: numbers and tags travel as text."""
    title: str = ""
    description: str = ""
    image: str = ""
    prepTime: str = "0"
    cookTime: str = "0"
    servings: str = "4"
    calories: str = "0"
    tags: str = ""
    ingredients: list[IngredientItem] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    influencerId: str = ""


class RecipeFormSubmit(BaseModel):
    draft: RecipeFormData
    editingRecipeId: Optional[str] = None


class NotificationResponse(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"
    duration: Optional[int] = None


class RecipeFormResult(BaseModel):
    open: bool
    state: Literal["CLOSED", "EDITING", "SUBMITTING", "VALIDATING"]
    notification: Optional[NotificationResponse] = None
    fieldErrors: dict[str, str] = Field(default_factory=dict)
    draft: Optional[RecipeFormData] = None
