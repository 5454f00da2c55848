# src/app/domain/models.py
"""
Domain models for the recipe/influencer admin.
These are pure data structures with no infrastructure dependencies.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FormState(str, Enum):
    """Observable states of the recipe form dialog."""
    CLOSED = "CLOSED"
    EDITING = "EDITING"
    SUBMITTING = "SUBMITTING"
    VALIDATING = "VALIDATING"


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass
class Influencer:
    """A content creator whose recipes are published in the app."""
    name: str
    avatar: Optional[str] = None
    cover_image: Optional[str] = None
    bio: Optional[str] = None
    social_media: dict[str, str] = field(default_factory=dict)
    specialties: list[str] = field(default_factory=list)
    followers: int = 0
    recipes_count: int = 0

    # Assigned by the database on insert
    id: Optional[str] = None


@dataclass
class Ingredient:
    name: str
    quantity: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class Recipe:
    """
    A recipe as the admin edits it.
    Times are in minutes; all numeric fields are non-negative.
    """
    title: str
    influencer_id: str
    description: str = ""
    image: str = ""
    prep_time: int = 0
    cook_time: int = 0
    servings: int = 4
    calories: int = 0
    tags: list[str] = field(default_factory=list)
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    id: Optional[str] = None

    # Populated only when the row was selected together with its influencer
    influencer: Optional[Influencer] = field(default=None, compare=False)


@dataclass
class Notification:
    """A toast shown to the admin after a form action."""
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT
    duration_ms: Optional[int] = None
