"""Shared fixtures: fresh annotations and small PDFs written with PyPDF2."""

from pathlib import Path

import pytest
import PyPDF2
from PyPDF2.generic import ArrayObject, DictionaryObject, FloatObject, NameObject, NumberObject, TextStringObject

from pdf_freetext.core import paths
from pdf_freetext.core.free_text import FreeTextAnnotation


class RecordingHandler:
    """Appearance handler that only counts its invocations."""

    def __init__(self):
        self.calls = 0

    def generate_appearance_streams(self):
        self.calls += 1


@pytest.fixture
def annotation():
    annot = FreeTextAnnotation()
    annot.set_rectangle([100, 600, 300, 700])
    annot.set_contents("Hello")
    return annot


@pytest.fixture
def recording_handler():
    return RecordingHandler()


def _free_text_dict(contents, rect, q=None, da=None):
    d = DictionaryObject()
    d[NameObject("/Type")] = NameObject("/Annot")
    d[NameObject("/Subtype")] = NameObject("/FreeText")
    d[NameObject("/Rect")] = ArrayObject(FloatObject(str(v)) for v in rect)
    d[NameObject("/Contents")] = TextStringObject(contents)
    d[NameObject("/T")] = TextStringObject("Reviewer")
    if q is not None:
        d[NameObject("/Q")] = NumberObject(q)
    if da is not None:
        d[NameObject("/DA")] = TextStringObject(da)
    return d


def _text_dict(contents):
    d = DictionaryObject()
    d[NameObject("/Type")] = NameObject("/Annot")
    d[NameObject("/Subtype")] = NameObject("/Text")
    d[NameObject("/Rect")] = ArrayObject(FloatObject(str(v)) for v in (10, 10, 30, 30))
    d[NameObject("/Contents")] = TextStringObject(contents)
    return d


@pytest.fixture
def sample_pdf(tmp_path) -> Path:
    """Two pages: page 1 has a sticky note and a FreeText, page 2 one FreeText."""
    writer = PyPDF2.PdfWriter()
    page_annots = [
        [_text_dict("sticky"), _free_text_dict("First note", (72, 700, 272, 750), q=1, da="/Helv 10 Tf 1 0 0 rg")],
        [_free_text_dict("Second note", (72, 100, 200, 140))],
    ]
    for annots in page_annots:
        writer.add_blank_page(width=612, height=792)
        # add_blank_page may hand back a copy; edit the page the writer holds
        page = writer.pages[-1]
        page[NameObject("/Annots")] = ArrayObject(writer._add_object(a) for a in annots)

    path = tmp_path / "sample.pdf"
    with open(path, "wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def allowed_dir(tmp_path):
    """Configure ``tmp_path`` as the only accessible directory."""
    saved = list(paths.SEARCH_DIRECTORIES)
    paths.configure([str(tmp_path)])
    yield tmp_path
    paths.SEARCH_DIRECTORIES[:] = saved
