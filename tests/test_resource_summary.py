"""Tests for perfbudget.analysis.resource_summary."""

from __future__ import annotations

import pytest

from perfbudget import config
from perfbudget.analysis import resource_summary
from perfbudget.models import resources


def _record(url: str, resource_type: str | None = None, size: int | float = 0) -> resources.NetworkRecord:
    return resources.NetworkRecord(url=url, resource_type=resource_type, transfer_size=size)


# ── determine_resource_type ─────────────────────────────────────


class TestDetermineResourceType:
    """Tests for determine_resource_type()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Document", "document"),
            ("Script", "script"),
            ("Stylesheet", "stylesheet"),
            ("Image", "image"),
            ("Media", "media"),
            ("Font", "font"),
            ("script", "script"),
            ("XHR", "other"),
            ("Fetch", "other"),
            ("Manifest", "other"),
            ("", "other"),
            (None, "other"),
        ],
    )
    def test_mapping(self, raw: str | None, expected: str) -> None:
        assert resource_summary.determine_resource_type(_record("https://example.com/x", raw)) == expected


# ── summarize ───────────────────────────────────────────────────


class TestSummarize:
    """Tests for summarize()."""

    def test_totals(self, page_records: list[resources.NetworkRecord]) -> None:
        summary = resource_summary.summarize(page_records)
        assert summary["total"].count == 4
        assert summary["total"].size == 160

    def test_per_type_buckets(self, page_records: list[resources.NetworkRecord]) -> None:
        summary = resource_summary.summarize(page_records)
        assert (summary["document"].count, summary["document"].size) == (1, 30)
        assert (summary["script"].count, summary["script"].size) == (2, 60)
        assert (summary["image"].count, summary["image"].size) == (1, 70)

    def test_every_bucket_present(self) -> None:
        summary = resource_summary.summarize([])
        assert set(summary) == {"document", "script", "stylesheet", "image", "media", "font", "other", "total"}
        assert all(stat.count == 0 and stat.size == 0 for stat in summary.values())

    def test_third_party_is_not_a_bucket(self, page_records: list[resources.NetworkRecord]) -> None:
        assert "third-party" not in resource_summary.summarize(page_records)

    def test_data_urls_are_excluded(self) -> None:
        summary = resource_summary.summarize(
            [
                _record("http://example.com/file.html", "Document", 30),
                _record("data:image/png;base64,iVBORw0KGgoAA", "Image", 10),
            ]
        )
        assert summary["total"].count == 1
        assert summary["total"].size == 30
        assert summary["image"].count == 0

    def test_favicon_is_skipped(self) -> None:
        summary = resource_summary.summarize(
            [
                _record("http://example.com/file.html", "Document", 30),
                _record("http://example.com/favicon.ico", "Other", 5),
                _record("http://example.com/favicon.ico", None, 5),
            ]
        )
        assert summary["other"].count == 0
        assert summary["total"].count == 1

    def test_favicon_typed_as_image_is_counted(self) -> None:
        summary = resource_summary.summarize([_record("http://example.com/favicon.ico", "Image", 5)])
        assert summary["image"].count == 1

    def test_favicon_counted_when_disabled(self) -> None:
        settings = config.EngineSettings(skip_favicon=False)
        summary = resource_summary.summarize([_record("http://example.com/favicon.ico", "Other", 5)], settings)
        assert summary["other"].count == 1
        assert summary["total"].size == 5

    def test_fractional_sizes_are_summed(self) -> None:
        summary = resource_summary.summarize(
            [
                _record("http://example.com/app.js", "Script", 10.5),
                _record("http://example.com/lib.js", "Script", 4.25),
            ]
        )
        assert summary["script"].size == 14.75
        assert summary["total"].size == 14.75

    def test_idempotent(self, page_records: list[resources.NetworkRecord]) -> None:
        first = resource_summary.summarize(page_records)
        second = resource_summary.summarize(page_records)
        assert {k: v.model_dump() for k, v in first.items()} == {k: v.model_dump() for k, v in second.items()}


# ── build_summary_rows ──────────────────────────────────────────


class TestBuildSummaryRows:
    """Tests for build_summary_rows()."""

    def test_total_first_third_party_last(self, page_records: list[resources.NetworkRecord]) -> None:
        summary = resource_summary.summarize(page_records)
        third_party = resources.ResourceStat(count=9, size=10_000)
        rows = resource_summary.build_summary_rows(summary, third_party)

        assert len(rows) == 9
        assert rows[0].resource_type == "total"
        assert rows[0].label == "Total"
        assert rows[-1].resource_type == "third-party"
        assert rows[-1].label == "Third-party"
        assert rows[-1].size == 10_000

    def test_content_rows_sorted_by_size(self, page_records: list[resources.NetworkRecord]) -> None:
        summary = resource_summary.summarize(page_records)
        rows = resource_summary.build_summary_rows(summary, resources.ResourceStat())
        content = rows[1:-1]
        assert [r.resource_type for r in content[:3]] == ["image", "script", "document"]
        assert all(a.size >= b.size for a, b in zip(content, content[1:]))

    def test_ties_keep_canonical_order(self) -> None:
        summary = resource_summary.summarize([])
        rows = resource_summary.build_summary_rows(summary, resources.ResourceStat())
        assert [r.resource_type for r in rows] == [
            "total", "document", "script", "stylesheet", "image", "media", "font", "other", "third-party",
        ]

    def test_empty_types_show_zero(self, page_records: list[resources.NetworkRecord]) -> None:
        summary = resource_summary.summarize(page_records)
        rows = resource_summary.build_summary_rows(summary, resources.ResourceStat())
        font = next(r for r in rows if r.resource_type == "font")
        assert (font.count, font.size) == (0, 0)
