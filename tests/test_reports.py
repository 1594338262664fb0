"""
Tests for CSV export and projection chart frames
"""

import csv
import io

import pytest
from datetime import date
from decimal import Decimal

from fintrack.models.analytics import ProjectionPoint
from fintrack.reports import (
    CSV_COLUMNS,
    build_csv,
    export_report,
    interpolate_frames,
    report_filename,
    smoothstep,
)


def points_of(*values):
    return [ProjectionPoint(month=i, value=Decimal(v)) for i, v in enumerate(values, start=1)]


class TestCsvExport:
    """Tests for the CSV report."""

    def test_header_is_unquoted(self):
        """Test that the header row is plain."""
        assert build_csv([]) == "id,type,category,amount,date,description"

    def test_rows_are_fully_quoted(self, example_ledger):
        """Test the exact rendering of the reference ledger."""
        assert build_csv(example_ledger).split("\n") == [
            "id,type,category,amount,date,description",
            '"1","income","Salary","1000","2024-01-10",""',
            '"2","expense","Food","400","2024-01-15",""',
            '"3","expense","Rent","300","2024-02-01",""',
        ]

    def test_no_trailing_newline(self, example_ledger):
        """Test that the document does not end with a line break."""
        assert not build_csv(example_ledger).endswith("\n")

    def test_inner_quotes_are_doubled(self, make_tx):
        """Test escaping of quotes, commas and missing dates."""
        content = build_csv([
            make_tx("expense", "12.50", None, 'Food, "fancy"', tx_id=5, description='He said "hi"'),
        ])
        assert content.split("\n")[1] == '"5","expense","Food, ""fancy""","12.50","","He said ""hi"""'

    def test_readable_by_csv_module(self, make_tx):
        """Test that the output parses back into the original fields."""
        content = build_csv([make_tx("income", 7, "2024-01-01", "a,b", tx_id=9, description='x"y')])
        rows = list(csv.reader(io.StringIO(content)))
        assert rows[0] == CSV_COLUMNS
        assert rows[1] == ["9", "income", "a,b", "7", "2024-01-01", 'x"y']

    def test_report_filename(self):
        """Test the dated file name."""
        assert report_filename(date(2024, 3, 1)) == "finance-report-2024-03-01.csv"

    def test_export_report(self, example_ledger):
        """Test the downloadable report."""
        report = export_report(example_ledger, date(2024, 3, 1))
        assert report.filename == "finance-report-2024-03-01.csv"
        assert report.row_count == 3
        assert report.mime_type.startswith("text/csv")
        assert report.content == build_csv(example_ledger)

    def test_nothing_to_export(self):
        """Test that an empty ledger produces no report."""
        assert export_report([], date(2024, 3, 1)) is None


class TestChartFrames:
    """Tests for the projection chart animation."""

    def test_smoothstep(self):
        """Test the easing curve at its fixed points."""
        assert smoothstep(0) == 0
        assert smoothstep(0.5) == 0.5
        assert smoothstep(1) == 1
        assert smoothstep(2) == 1
        assert smoothstep(-1) == 0

    def test_no_points(self):
        """Test that nothing is drawn without points."""
        assert interpolate_frames([], width=640, height=240) == []

    def test_flat_series(self):
        """Test that a flat series is a single mid-height line."""
        frames = interpolate_frames(points_of(100, 100, 100), width=640, height=240, padding=20)
        assert len(frames) == 1
        assert frames[0].progress == 1.0
        assert frames[0].points == [(20.0, 120.0), (620.0, 120.0)]

    def test_frame_count_and_final_positions(self):
        """Test that the last frame lands on the target coordinates."""
        frames = interpolate_frames(points_of(0, 100, 200), width=640, height=240, padding=20)
        assert len(frames) == 40
        assert [f.index for f in frames] == list(range(40))
        assert frames[-1].progress == 1.0
        assert frames[-1].points == [
            pytest.approx((20.0, 220.0)),
            pytest.approx((320.0, 120.0)),
            pytest.approx((620.0, 20.0)),
        ]

    def test_frames_grow_from_the_left(self):
        """Test that x positions grow while y positions stay fixed."""
        frames = interpolate_frames(points_of(0, 50, 200), width=400, height=200, padding=10, total_frames=10)
        first, last = frames[0], frames[-1]
        assert first.progress == pytest.approx(smoothstep(0.1))
        assert first.points[2][0] < last.points[2][0]
        assert [y for _, y in first.points] == [y for _, y in last.points]
        progress = [f.progress for f in frames]
        assert progress == sorted(progress)

    def test_negative_values_fit_the_canvas(self):
        """Test that all points stay inside the padded area."""
        frames = interpolate_frames(points_of(-500, 300, -100), width=640, height=240, padding=20)
        for x, y in frames[-1].points:
            assert 20 <= x <= 620
            assert 20 <= y <= 220
