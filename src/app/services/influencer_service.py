# src/app/services/influencer_service.py
from __future__ import annotations

from typing import Any, Mapping

from src.app.domain.models import Influencer
from src.app.infra.db.mappers import (
    influencer_changes_to_row,
    influencer_to_row,
    row_to_influencer,
)
from src.app.services.entity_service import SupabaseEntityService


class InfluencerService(SupabaseEntityService[Influencer]):
    TABLE_NAME = "influencers"
    ENTITY = "influencer"
    SEARCH_COLUMNS = ("name", "bio")

    def _to_record(self, row: Mapping[str, Any]) -> Influencer:
        return row_to_influencer(row)

    def _to_row(self, record: Influencer) -> dict[str, Any]:
        return influencer_to_row(record)

    def _changes_to_row(self, changes: Mapping[str, Any]) -> dict[str, Any]:
        return influencer_changes_to_row(changes)
