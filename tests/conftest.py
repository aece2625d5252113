"""
Pytest fixtures for the chunking pipeline tests.
"""

import fitz  # PyMuPDF
import pytest


@pytest.fixture
def sample_pdf(tmp_path):
    """Create a small three-page PDF; the last page has no text."""
    path = tmp_path / "lecture.pdf"
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Photosynthesis converts light into energy.", fontsize=11)
    page = doc.new_page()
    page.insert_text((72, 72), "Chlorophyll absorbs mostly blue and red light.", fontsize=11)
    doc.new_page()
    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def short_pages():
    """Three pages that fit into a single default-sized chunk."""
    return [
        {"page_number": 1, "text": "Cells are the basic unit of life."},
        {"page_number": 2, "text": "Every cell has a membrane."},
        {"page_number": 3, "text": "Plant cells also have a cell wall."},
    ]
