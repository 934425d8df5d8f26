"""Tests for renderer output formatting."""

from io import StringIO

from rich.console import Console

from steamsearch.errors import AmbiguousMatch
from steamsearch.models import AppData, AppDetails, ContentDescriptors, Platforms, SearchResult
from steamsearch.renderer import (
    render_adult_verdict,
    render_ambiguous,
    render_app_details,
    render_review,
    render_search_results,
)


def _capture_output(render_fn, *args, **kwargs) -> str:
    """Capture Rich console output as plain text."""
    buf = StringIO()
    import steamsearch.renderer as mod
    original = mod.console
    mod.console = Console(file=buf, force_terminal=False, width=120)
    try:
        render_fn(*args, **kwargs)
    finally:
        mod.console = original
    return buf.getvalue()


class TestRenderSearchResults:
    def test_empty(self):
        assert "No results found" in _capture_output(render_search_results, [])

    def test_lists_ids_and_names(self):
        output = _capture_output(
            render_search_results,
            [SearchResult(app_id="620", name="Portal 2"), SearchResult(app_id="400", name="Portal")],
            query="Portal",
        )
        assert 'Found 2 apps for "Portal"' in output
        assert "[620] Portal 2" in output
        assert "[400] Portal" in output


class TestRenderReview:
    def test_prints_verbatim(self):
        text = 'Reception for [PROTOTYPE] is "Mixed" recommended by 1/2 reviewers.'
        assert text in _capture_output(render_review, text)


class TestRenderAmbiguous:
    def test_lists_candidates(self):
        err = AmbiguousMatch("Half", [
            SearchResult(app_id="70", name="Half-Life"),
            SearchResult(app_id="220", name="Half-Life 2"),
        ])
        output = _capture_output(render_ambiguous, err)
        assert 'Multiple apps match "Half"' in output
        assert "  Half-Life\n" in output
        assert "  Half-Life 2\n" in output


class TestRenderAppDetails:
    def test_failed_entry(self):
        output = _capture_output(render_app_details, "1", AppDetails(success=False))
        assert "No details available for app 1" in output

    def test_summary(self):
        entry = AppDetails(success=True, data=AppData(
            type="game",
            name="Portal 2",
            developers=("Valve",),
            platforms=Platforms(windows=True, linux=True),
            short_description="Sequel to Portal.",
            content_descriptors=ContentDescriptors(ids=(2, 5), notes="Mild violence"),
        ))
        output = _capture_output(render_app_details, "620", entry)
        assert "Portal 2" in output
        assert "Valve" in output
        assert "windows/linux" in output
        assert "paid" in output
        assert "Content descriptors: 2, 5" in output
        assert "Mild violence" in output
        assert "Sequel to Portal." in output


class TestRenderAdultVerdict:
    def test_flagged(self):
        assert "is flagged" in _capture_output(render_adult_verdict, "620", True)

    def test_not_flagged(self):
        assert "not flagged" in _capture_output(render_adult_verdict, "620", False)
