"""Tests for the slug-scoped section upsert/find contract."""

from __future__ import annotations

import pytest
from flask import Flask

from impact_api.application.content.section_repository import SectionRepository
from impact_api.domain.sections import SECTION_TYPES, get_section_type
from impact_api.extensions import db
from impact_api.models.section_document import SectionDocument


def _repo(name: str) -> SectionRepository:
    return SectionRepository(get_section_type(name))


def test_find_missing_document_returns_none(app: Flask) -> None:
    with app.app_context():
        assert _repo("partners").find_by_slug("nobody") is None


def test_upsert_creates_then_reads_back(app: Flask) -> None:
    with app.app_context():
        saved = _repo("hero").upsert_by_slug("impact-report", {"title": "2024 Report"})
        assert saved["title"] == "2024 Report"
        assert saved["updatedAt"].endswith("Z")
        assert "slug" not in saved and "_id" not in saved and "id" not in saved

        assert _repo("hero").find_by_slug("impact-report") == saved


def test_missing_slug_defaults_to_impact_report(app: Flask) -> None:
    with app.app_context():
        _repo("hero").upsert_by_slug(None, {"title": "Default"})
        assert _repo("hero").find_by_slug("impact-report")["title"] == "Default"
        assert _repo("hero").find_by_slug(None)["title"] == "Default"


def test_upsert_is_idempotent(app: Flask) -> None:
    payload = {"title": "Same", "bubbles": ["a", "b"], "primaryCta": {"label": "Go", "href": "/x"}}
    with app.app_context():
        first = _repo("hero").upsert_by_slug("s", payload)
        second = _repo("hero").upsert_by_slug("s", payload)

        first.pop("updatedAt")
        second.pop("updatedAt")
        assert first == second
        assert SectionDocument.query.filter_by(collection="hero", slug="s").count() == 1


def test_allow_list_drops_unknown_fields(app: Flask) -> None:
    with app.app_context():
        saved = _repo("hero").upsert_by_slug("s", {"disallowedField": "x", "title": "y"})
        assert saved["title"] == "y"
        assert "disallowedField" not in saved

        stored = SectionDocument.query.filter_by(collection="hero", slug="s").one()
        assert "disallowedField" not in stored.content


def test_identity_fields_in_payload_are_ignored(app: Flask) -> None:
    with app.app_context():
        _repo("partners").upsert_by_slug("s", {"slug": "hijack", "_id": "x", "updatedAt": "never", "title": "P"})

        assert _repo("partners").find_by_slug("hijack") is None
        saved = _repo("partners").find_by_slug("s")
        assert saved["title"] == "P"
        assert saved["updatedAt"] != "never"


def test_partial_update_leaves_other_keys_untouched(app: Flask) -> None:
    with app.app_context():
        _repo("hero").upsert_by_slug("s", {"title": "A", "subtitle": "B"})
        saved = _repo("hero").upsert_by_slug("s", {"title": "C"})

        assert saved["title"] == "C"
        assert saved["subtitle"] == "B"


def test_nested_values_are_replaced_not_merged(app: Flask) -> None:
    with app.app_context():
        repo = _repo("partners")
        repo.upsert_by_slug("s", {
            "partners": [
                {"id": "1", "name": "One", "dotColor": "#f00"},
                {"id": "2", "name": "Two", "dotColor": "#0f0"},
            ],
            "cta": {"viewAllText": "All", "viewAllUrl": "/all", "donateText": "Give", "donateUrl": "/give"},
        })
        saved = repo.upsert_by_slug("s", {
            "partners": [{"id": "3", "name": "Three", "dotColor": "#00f"}],
            "cta": {"donateText": "Donate"},
        })

        assert saved["partners"] == [{"id": "3", "name": "Three", "dotColor": "#00f"}]
        assert saved["cta"] == {"donateText": "Donate"}


def test_slugs_are_isolated(app: Flask) -> None:
    with app.app_context():
        _repo("mission").upsert_by_slug("x", {"title": "from x"})
        _repo("mission").upsert_by_slug("y", {"title": "from y", "statementText": "only y"})

        x = _repo("mission").find_by_slug("x")
        assert x["title"] == "from x"
        assert "statementText" not in x
        assert _repo("mission").find_by_slug("y")["title"] == "from y"


def test_sections_are_isolated_by_collection(app: Flask) -> None:
    with app.app_context():
        _repo("flex-a").upsert_by_slug("s", {"title": "A"})
        assert _repo("flex-b").find_by_slug("s") is None


def test_returned_payload_is_detached_from_store(app: Flask) -> None:
    with app.app_context():
        saved = _repo("hero").upsert_by_slug("s", {"bubbles": ["one"]})
        saved["bubbles"].append("two")
        db.session.commit()

        assert _repo("hero").find_by_slug("s")["bubbles"] == ["one"]


def test_lost_first_insert_race_is_applied_as_update(app: Flask, monkeypatch: pytest.MonkeyPatch) -> None:
    with app.app_context():
        _repo("partners").upsert_by_slug("race", {"title": "winner", "subtitle": "kept"})

        # The first lookup misses the row another writer just created.
        real_get = SectionRepository._get
        calls = []

        def stale_get(self, slug):
            calls.append(slug)
            return None if len(calls) == 1 else real_get(self, slug)

        monkeypatch.setattr(SectionRepository, "_get", stale_get)
        saved = _repo("partners").upsert_by_slug("race", {"title": "late writer"})

        assert saved["title"] == "late writer"
        assert saved["subtitle"] == "kept"
        assert len(calls) >= 2
        assert SectionDocument.query.filter_by(collection="partners", slug="race").count() == 1
        assert _repo("partners").find_by_slug("race")["title"] == "late writer"


def test_registry_covers_every_public_section() -> None:
    assert [s.api_name for s in SECTION_TYPES] == [
        "hero", "mission", "defaults", "population", "financial", "method",
        "curriculum", "impact-section", "hear-our-impact", "testimonials",
        "national-impact", "flex-a", "flex-b", "flex-c", "impact-levels",
        "partners", "footer",
    ]
    assert len({s.collection for s in SECTION_TYPES}) == len(SECTION_TYPES)
