# src/app/schemas/influencers.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class InfluencerResponse(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None
    coverImage: Optional[str] = None
    bio: Optional[str] = None
    socialMedia: dict[str, str] = Field(default_factory=dict)
    specialties: list[str] = Field(default_factory=list)
    followers: Optional[int] = None
    recipesCount: Optional[int] = None


class InfluencerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    avatar: Optional[str] = None
    coverImage: Optional[str] = None
    bio: Optional[str] = None
    socialMedia: dict[str, str] = Field(default_factory=dict)
    specialties: list[str] = Field(default_factory=list)
    followers: int = Field(default=0, ge=0)
    recipesCount: int = Field(default=0, ge=0)


class InfluencerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    avatar: Optional[str] = None
    coverImage: Optional[str] = None
    bio: Optional[str] = None
    socialMedia: Optional[dict[str, str]] = None
    specialties: Optional[list[str]] = None
    followers: Optional[int] = Field(default=None, ge=0)
    recipesCount: Optional[int] = Field(default=None, ge=0)
