"""Tests for the page cursor, page breaks and section headers."""

from io import BytesIO

import pytest
from reportlab.pdfgen.canvas import Canvas

from trackfit.report.fields import FieldWriter
from trackfit.report.page import PageLayout, PageManager


@pytest.fixture
def pages():
    layout = PageLayout()
    canvas = Canvas(BytesIO(), pagesize=(layout.page_width, layout.page_height))
    return PageManager(canvas, layout)


def test_initial_cursor_at_top_margin(pages):
    assert pages.y == pages.layout.top_margin
    assert pages.page_count == 1


def test_ensure_space_noop_when_room(pages):
    pages.advance(100)
    assert pages.ensure_space(40) is False
    assert pages.y == 140
    assert pages.page_count == 1


def test_ensure_space_breaks_when_short(pages):
    lay = pages.layout
    pages.y = lay.page_height - lay.bottom_margin - 30
    assert pages.ensure_space(40) is True
    assert pages.y == lay.top_margin
    assert pages.page_count == 2


def test_ensure_space_exact_fit_stays(pages):
    lay = pages.layout
    pages.y = lay.page_height - lay.bottom_margin - 40
    assert pages.ensure_space(40) is False


def test_fresh_page_not_broken_again(pages):
    assert pages.ensure_space(pages.layout.page_height * 2) is False
    assert pages.page_count == 1


def test_section_header_advances_cursor(pages):
    pages.advance(100)
    pages.section_header("1. Core Details")
    assert pages.y == 140 + 25


def test_section_header_moves_to_new_page_near_bottom(pages):
    lay = pages.layout
    pages.y = lay.page_height - lay.bottom_margin - 50
    pages.section_header("4. TMS & Lifecycle Information")
    assert pages.page_count == 2
    assert pages.y == lay.top_margin + 25


def test_rows_never_cross_bottom_margin(pages):
    """Every row that fits on a page ends above the bottom margin of its page."""
    writer = FieldWriter(pages)
    lay = pages.layout
    values = ["short", "word " * 40, None, "x" * 300, "word " * 120, ""] * 15
    for i, value in enumerate(values):
        before = pages.page_count
        height = writer.write(f"Row {i}", value)
        top = pages.y - height
        assert pages.y <= lay.page_height - lay.bottom_margin
        if pages.page_count > before:
            assert top == lay.top_margin
    assert pages.page_count > 1
