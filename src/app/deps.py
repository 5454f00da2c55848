# src/app/deps.py (keeps the client singleton, but exposes it as a dependency)

from __future__ import annotations

from fastapi import Depends
from supabase import Client, create_client

from src.app.config import settings
from src.app.services.influencer_service import InfluencerService
from src.app.services.recipe_service import RecipeService

_client: Client | None = None


def get_supabase() -> Client:
    global _client
    if _client is None:
        _client = create_client(str(settings.SUPABASE_URL),
                                settings.SUPABASE_SERVICE_ROLE_KEY)
    return _client


def get_influencer_service(supa: Client = Depends(get_supabase)) -> InfluencerService:
    return InfluencerService(supa)


def get_recipe_service(supa: Client = Depends(get_supabase)) -> RecipeService:
    return RecipeService(supa)
