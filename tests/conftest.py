# tests/conftest.py
import fitz
import pytest


def _write_pdf(path, pages):
    """One PDF page per string, one inserted text line per '\\n'-separated line."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        y = 72
        for line in text.split("\n"):
            if line:
                page.insert_text((72, y), line, fontsize=12, fontname="helv")
            y += 24
    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def make_pdf():
    return _write_pdf


@pytest.fixture
def input_dir(tmp_path):
    d = tmp_path / "input"
    d.mkdir()
    return d


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "output"
