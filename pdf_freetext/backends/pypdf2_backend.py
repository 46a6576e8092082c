from pathlib import Path
from typing import Iterator, List, Optional, Tuple
import logging
import PyPDF2
from PyPDF2.generic import DictionaryObject

from pdf_freetext.core import names
from pdf_freetext.core.annotation import create_annotation
from pdf_freetext.core.free_text import FreeTextAnnotation
from pdf_freetext.core.page_range import PageRangeError, parse_page_range
from pdf_freetext.core.types import FreeTextSummary

logger = logging.getLogger(__name__)


def iter_free_text_annotations(
    reader: PyPDF2.PdfReader,
    page_range: Optional[str] = None,
) -> Iterator[Tuple[int, int, FreeTextAnnotation]]:
    """Yield ``(page_index, annots_index, annotation)`` for every free text annotation.

    The annotations are views over the reader's own dictionaries, so changes
    made through them are visible to anything else holding the reader.
    """
    idxs = parse_page_range(len(reader.pages), page_range)
    for page_index in idxs:
        page = reader.pages[page_index]
        if names.PAGE_ANNOTS not in page:
            continue
        for annots_index, annot in enumerate(page[names.PAGE_ANNOTS]):
            obj = annot.get_object()
            if not isinstance(obj, DictionaryObject):
                continue
            wrapped = create_annotation(obj)
            if isinstance(wrapped, FreeTextAnnotation):
                yield page_index, annots_index, wrapped


def summarize(page_index: int, annots_index: int, annotation: FreeTextAnnotation) -> FreeTextSummary:
    return {
        "page": page_index + 1,
        "index": annots_index,
        "content": annotation.get_contents() or "",
        "author": annotation.get_title_popup() or "",
        "default_appearance": annotation.get_default_appearance(),
        "default_style": annotation.get_default_style_string(),
        "quadding": annotation.get_q(),
        "intent": annotation.get_intent(),
        "position": annotation.get_rectangle() or [],
        "has_appearance": annotation.get_normal_appearance_stream() is not None,
    }


def extract_free_text_annotations(pdf_path: Path, page_range: Optional[str] = None) -> List[FreeTextSummary]:
    try:
        reader = PyPDF2.PdfReader(str(pdf_path))
        return [summarize(p, i, a) for p, i, a in iter_free_text_annotations(reader, page_range)]
    except Exception as e:
        logger.error(f"PyPDF2 free text extraction failed for {pdf_path}: {e}")
        raise


def load_free_text_annotation(pdf_path: Path, page: int, index: int) -> FreeTextAnnotation:
    """Return the free text annotation at ``/Annots[index]`` of 1-based ``page``."""
    if page < 1:
        raise PageRangeError(f"Page {page} out of range (pages start at 1)")
    reader = PyPDF2.PdfReader(str(pdf_path))
    for page_index, annots_index, annotation in iter_free_text_annotations(reader, str(page)):
        if annots_index == index:
            return annotation
    raise LookupError(f"No FreeText annotation at page {page}, index {index} in {pdf_path}")
