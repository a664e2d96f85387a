"""Tests for status line formatting."""

import pytest

from progress_reporter.core.bar import BAR_WIDTH
from progress_reporter.core.bar import bar_cells
from progress_reporter.core.bar import clean_description
from progress_reporter.core.bar import eta_seconds
from progress_reporter.core.bar import format_bar
from progress_reporter.core.bar import format_duration
from progress_reporter.core.bar import format_progress
from progress_reporter.core.bar import format_rate
from progress_reporter.core.bar import percent_done
from progress_reporter.core.bar import render_line


class TestPercentDone:
    """Test percentage calculation."""

    def test_exact_percent(self):
        """Test percent for evenly divisible counts."""
        assert percent_done(50, 100) == 50.0
        assert percent_done(100, 100) == 100.0
        assert percent_done(0, 100) == 0.0

    def test_rounded_to_three_places(self):
        """Test percent is rounded to 3 decimal places."""
        assert percent_done(1, 3) == 33.333
        assert percent_done(2, 3) == 66.667

    def test_zero_total(self):
        """Test zero total never divides and stays at 0."""
        assert percent_done(0, 0) == 0.0
        assert percent_done(25, 0) == 0.0


class TestBarCells:
    """Test bar cell allocation."""

    @pytest.mark.parametrize("total", [1, 7, 20, 100, 333, 1000])
    def test_cells_always_fill_width(self, total):
        """Test done and undone cells always add up to the bar width."""
        for current in range(total + 1):
            done, undone = bar_cells(percent_done(current, total))
            assert done + undone == BAR_WIDTH

    @pytest.mark.parametrize("total", [3, 20, 57, 1000])
    def test_done_cells_monotonic(self, total):
        """Test done cells never shrink as work progresses and fill at completion."""
        previous = 0
        for current in range(total + 1):
            done, _ = bar_cells(percent_done(current, total))
            assert done >= previous
            previous = done

        assert previous == BAR_WIDTH

    def test_partial_cell_counts_as_done(self):
        """Test filled cells are rounded up."""
        assert bar_cells(1.0) == (1, 19)
        assert bar_cells(33.333) == (7, 13)

    def test_overflow_is_capped(self):
        """Test reporting past the total never overflows the bar."""
        assert bar_cells(percent_done(150, 100)) == (BAR_WIDTH, 0)


class TestFormatting:
    """Test text formatting helpers."""

    def test_format_bar(self):
        """Test bar text."""
        assert format_bar(50, 100) == "[##########..........]"
        assert format_bar(0, 100) == "[....................]"
        assert format_bar(100, 100) == "[####################]"

    def test_format_bar_zero_total(self):
        """Test zero total shows an empty bar."""
        assert format_bar(10, 0) == "[....................]"

    def test_format_rate(self):
        """Test rate drops trailing zeros."""
        assert format_rate(10.0) == "10"
        assert format_rate(12.5) == "12.5"
        assert format_rate(0.333) == "0.333"
        assert format_rate(0.0) == "0"

    def test_eta_seconds(self):
        """Test ETA is rounded up to whole seconds."""
        assert eta_seconds(50, 100, 10.0) == 5
        assert eta_seconds(50, 100, 3.0) == 17
        assert eta_seconds(100, 100, 3.0) == 0

    def test_format_duration(self):
        """Test HH:MM:SS formatting."""
        assert format_duration(5) == "00:00:05"
        assert format_duration(3661) == "01:01:01"
        assert format_duration(86399) == "23:59:59"

    def test_format_duration_wraps_at_one_day(self):
        """Test durations of a day or more wrap like clock time."""
        assert format_duration(86400) == "00:00:00"
        assert format_duration(90061) == "01:01:01"


class TestFormatProgress:
    """Test full status text."""

    def test_with_eta(self):
        """Test ETA is appended when rate is positive."""
        assert format_progress(50, 100, 10.0) == "[##########..........] 50/100@10 ETA: 00:00:05"

    def test_without_rate(self):
        """Test ETA is omitted when rate is zero."""
        assert format_progress(50, 100, 0.0) == "[##########..........] 50/100@0"

    def test_zero_total_has_no_eta(self):
        """Test ETA is never shown without a total."""
        assert format_progress(5, 0, 2.5) == "[....................] 5/0@2.5"

    def test_render_line(self):
        """Test redraw wrapping with and without a description."""
        assert render_line("text") == "\033[K    text\r"
        assert render_line("text", "Doing task 1") == "\033[K    text - Doing task 1\r"
        assert "\n" not in render_line("text", "label")

    def test_render_line_cleans_control_characters(self):
        """Test line breaks and escapes in the description become spaces."""
        line = render_line("text", "line one\nline two\r\x1b[2J\tend")

        assert line == "\033[K    text - line one line two  [2J end\r"
        assert "\n" not in line
        assert line.count("\r") == 1

    def test_clean_description_keeps_printable_text(self):
        """Test ordinary labels, including non-ASCII, are unchanged."""
        assert clean_description("Copying café.dat") == "Copying café.dat"
