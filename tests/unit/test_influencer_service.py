from __future__ import annotations

import pytest
from postgrest.exceptions import APIError

from src.app.domain.errors import RecordNotFoundError, RecordWriteError
from src.app.domain.models import Influencer
from src.app.services.entity_service import build_ilike_filter


def _chef(name: str = "Chef A", bio: str = "pasta", **overrides: object) -> Influencer:
    return Influencer(name=name, bio=bio, **overrides)


class TestInfluencerServiceReads:
    def test_get_all_empty_table(self, influencer_service) -> None:
        assert influencer_service.get_all() == []

    def test_get_all_maps_rows(self, influencer_service, supabase_stub) -> None:
        supabase_stub.tables["influencers"] = [
            {"id": "1", "name": "A", "specialties": None},
            {"id": "2", "name": "B", "specialties": ["bbq"]},
        ]

        influencers = influencer_service.get_all()

        assert [item.name for item in influencers] == ["A", "B"]
        assert influencers[0].specialties == []

    def test_get_by_id_missing_raises_not_found(self, influencer_service) -> None:
        with pytest.raises(RecordNotFoundError) as exc_info:
            influencer_service.get_by_id("missing")

        assert exc_info.value.record_id == "missing"

    def test_transport_error_propagates_unchanged(self, influencer_service, supabase_stub) -> None:
        error = APIError({"message": "connection reset", "code": "500"})
        supabase_stub.next_error = error

        with pytest.raises(APIError) as exc_info:
            influencer_service.get_all()

        assert exc_info.value is error


class TestInfluencerServiceWrites:
    def test_create_returns_generated_id(self, influencer_service) -> None:
        created = influencer_service.create(_chef())

        assert created.id
        assert created.name == "Chef A"
        assert created.specialties == []

    def test_create_then_get_by_id_is_equal(self, influencer_service) -> None:
        created = influencer_service.create(
            _chef(social_media={"youtube": "chefa"}, specialties=["pasta"], followers=10)
        )

        assert influencer_service.get_by_id(created.id) == created

    def test_create_without_returned_row_raises(self, influencer_service, supabase_stub) -> None:
        supabase_stub.drop_writes = True

        with pytest.raises(RecordWriteError) as exc_info:
            influencer_service.create(_chef())

        assert exc_info.value.operation == "create"

    def test_update_changes_only_given_field(self, influencer_service, supabase_stub) -> None:
        created = influencer_service.create(_chef(followers=10, specialties=["pasta"]))

        updated = influencer_service.update(created.id, {"followers": 11})

        assert updated.followers == 11
        assert updated.name == created.name
        assert updated.bio == created.bio
        assert updated.specialties == created.specialties
        assert supabase_stub.queries[-1]._payload == {"followers": 11}

    def test_update_missing_row_raises(self, influencer_service) -> None:
        with pytest.raises(RecordWriteError) as exc_info:
            influencer_service.update("missing", {"bio": "x"})

        assert exc_info.value.operation == "update"

    def test_update_with_no_changes_reads_record(self, influencer_service, supabase_stub) -> None:
        created = influencer_service.create(_chef())

        assert influencer_service.update(created.id, {}) == created
        assert supabase_stub.queries[-1]._operation == "select"

    def test_update_unknown_field_raises(self, influencer_service) -> None:
        created = influencer_service.create(_chef())

        with pytest.raises(ValueError):
            influencer_service.update(created.id, {"avatar_url": "raw-column"})

    def test_delete_then_get_raises_not_found(self, influencer_service) -> None:
        created = influencer_service.create(_chef())

        assert influencer_service.delete(created.id) is None
        with pytest.raises(RecordNotFoundError):
            influencer_service.get_by_id(created.id)


class TestInfluencerServiceSearch:
    def test_empty_query_returns_everything(self, influencer_service) -> None:
        influencer_service.create(_chef("A", "pasta"))
        influencer_service.create(_chef("B", "bbq"))

        assert len(influencer_service.search("")) == 2

    def test_case_insensitive_on_name_and_bio(self, influencer_service) -> None:
        influencer_service.create(_chef("Pasta Queen", "italian"))
        influencer_service.create(_chef("Chef B", "Fresh PASTA daily"))
        influencer_service.create(_chef("Chef C", "grill"))

        names = sorted(item.name for item in influencer_service.search("pAsTa"))

        assert names == ["Chef B", "Pasta Queen"]

    def test_no_match_returns_empty(self, influencer_service) -> None:
        influencer_service.create(_chef())
        assert influencer_service.search("sushi") == []

    def test_filter_targets_name_and_bio(self, influencer_service, supabase_stub) -> None:
        influencer_service.search("pasta")
        assert supabase_stub.queries[-1].or_filter == 'name.ilike."%pasta%",bio.ilike."%pasta%"'

    def test_reserved_characters_are_quoted(self) -> None:
        assert build_ilike_filter(("name",), 'a,b "c"') == 'name.ilike."%a,b \\"c\\"%"'

    def test_create_search_delete_scenario(self, influencer_service) -> None:
        created = influencer_service.create(Influencer(name="Chef A", bio="pasta"))
        assert created.id
        assert created.specialties == []

        assert [item.id for item in influencer_service.search("pasta")] == [created.id]

        influencer_service.delete(created.id)
        with pytest.raises(RecordNotFoundError):
            influencer_service.get_by_id(created.id)
