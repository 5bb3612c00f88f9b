import io
from typing import Any

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Entropy always increases in an isolated system")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Chapter one content")
    c.showPage()
    c.drawString(72, 720, "Chapter two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def analysis_payload() -> dict[str, Any]:
    """A well-formed response matching the analysis schema."""
    return {
        "metadata": {
            "title": "My Book: Part One",
            "author": "A. Writer",
            "genre": "Physics",
            "readingTime": "2 hours",
        },
        "executiveSummary": "An accessible tour of thermodynamics.",
        "keyConcepts": [
            {"term": "Entropy", "definition": "A measure of disorder.", "importance": 92},
            {"term": "Enthalpy", "definition": "Total heat content.", "importance": 60},
        ],
        "chapterBreakdown": [
            {"title": "Heat", "summary": "What heat is.", "insight": "Heat is energy in transit."},
            {"title": "Work", "summary": "How work is done.", "insight": "Work and heat are interchangeable."},
        ],
        "topicStats": [
            {"topic": "Thermodynamics", "relevance": 80},
            {"topic": "History", "relevance": 40},
        ],
        "fullMarkdownReport": "# My Book: Part One\n\n## Key Ideas\n\n- **Entropy** rises.\n",
    }
