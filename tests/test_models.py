"""Tests for storefront data models and response parsing."""

import dataclasses

import pytest

from steamsearch.models import (
    AppData,
    AppDetails,
    ReviewSummary,
    SearchResult,
    parse_app_details_response,
    parse_review_info,
    parse_search_results,
)


class TestSearchResult:
    def test_from_dict(self):
        r = SearchResult.from_dict(
            {"appid": "620", "name": "Portal 2", "icon": "icon.jpg", "logo": "logo.jpg"}
        )
        assert r == SearchResult(app_id="620", name="Portal 2", icon_url="icon.jpg", logo_url="logo.jpg")

    def test_missing_images(self):
        r = SearchResult.from_dict({"appid": "70", "name": "Half-Life"})
        assert r.icon_url == ""
        assert r.logo_url == ""

    def test_frozen(self):
        r = SearchResult(app_id="620", name="Portal 2")
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.name = "Portal 3"


class TestParseSearchResults:
    def test_keeps_order(self):
        results = parse_search_results([
            {"appid": "2", "name": "B"},
            {"appid": "1", "name": "A"},
        ])
        assert [r.app_id for r in results] == ["2", "1"]

    def test_none_is_empty(self):
        assert parse_search_results(None) == []

    def test_rejects_object(self):
        with pytest.raises(ValueError):
            parse_search_results({"appid": "1"})

    def test_rejects_non_object_items(self):
        with pytest.raises(ValueError):
            parse_search_results(["Portal"])


class TestParseReviewInfo:
    def test_full(self):
        info = parse_review_info({
            "success": 1,
            "query_summary": {
                "num_reviews": 20,
                "review_score": 8,
                "review_score_desc": "Very Positive",
                "total_positive": 80,
                "total_negative": 20,
                "total_reviews": 100,
            },
        })
        assert info.success == 1
        assert info.query_summary == ReviewSummary(
            num_reviews=20,
            review_score=8,
            review_score_desc="Very Positive",
            total_positive=80,
            total_negative=20,
            total_reviews=100,
        )

    def test_rejects_non_object(self):
        with pytest.raises(ValueError):
            parse_review_info("nope")


class TestAppData:
    def test_full_payload(self):
        data = AppData.from_dict({
            "type": "game",
            "name": "Portal 2",
            "steam_appid": 620,
            "required_age": "0",
            "is_free": False,
            "dlc": [323180],
            "developers": ["Valve"],
            "publishers": ["Valve"],
            "platforms": {"windows": True, "mac": False, "linux": True},
            "categories": [{"id": 2, "description": "Single-player"}],
            "genres": [{"id": "1", "description": "Action"}],
            "achievements": {"total": 51, "highlighted": [{"name": "Wake Up Call", "path": "a.jpg"}]},
            "release_date": {"coming_soon": False, "date": "18 Apr, 2011"},
            "support_info": {"url": "http://steamcommunity.com/app/620", "email": ""},
            "content_descriptors": {"ids": [2, 5], "notes": "Some violence"},
        })
        assert data.steam_appid == 620
        assert data.required_age == 0
        assert data.dlc == (323180,)
        assert data.developers == ("Valve",)
        assert data.platforms.names() == ["windows", "linux"]
        assert data.categories[0].id == "2"
        assert data.genres[0].description == "Action"
        assert data.achievements.total == 51
        assert data.achievements.highlighted[0].name == "Wake Up Call"
        assert data.release_date.date == "18 Apr, 2011"
        assert data.content_descriptor_ids == (2, 5)
        assert data.content_descriptors.notes == "Some violence"

    def test_string_developers_rejected(self):
        with pytest.raises(ValueError, match="developers"):
            AppData.from_dict({"developers": "Valve"})

    def test_non_string_publisher_rejected(self):
        with pytest.raises(ValueError, match="publishers"):
            AppData.from_dict({"publishers": ["Valve", 7]})

    def test_boolean_dlc_id_rejected(self):
        with pytest.raises(ValueError, match="dlc"):
            AppData.from_dict({"dlc": [True]})

    def test_null_fields_read_as_empty(self):
        data = AppData.from_dict({"website": None, "developers": None, "dlc": None})
        assert data.website == ""
        assert data.developers == ()
        assert data.dlc == ()

    def test_empty(self):
        data = AppData.from_dict({})
        assert data == AppData()
        assert data.content_descriptor_ids == ()


class TestParseAppDetailsResponse:
    def test_keeps_response_order(self):
        details = parse_app_details_response({
            "620": {"success": True, "data": {"name": "Portal 2"}},
            "400": {"success": True, "data": {"name": "Portal"}},
        })
        assert list(details) == ["620", "400"]
        assert details["400"].data.name == "Portal"

    def test_failed_entry(self):
        details = parse_app_details_response({"1": {"success": False}})
        assert details["1"] == AppDetails(success=False)

    def test_none_is_empty(self):
        assert parse_app_details_response(None) == {}

    def test_rejects_array(self):
        with pytest.raises(ValueError):
            parse_app_details_response([])

    def test_rejects_non_object_entry(self):
        with pytest.raises(ValueError):
            parse_app_details_response({"620": True})
