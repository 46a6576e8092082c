import json
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from pdf_freetext.core import paths as _paths
from pdf_freetext.core.paths import find_file, ALLOWED_EXTENSIONS
from pdf_freetext.backends.pypdf2_backend import (
    extract_free_text_annotations as backend_extract_free_text,
    load_free_text_annotation,
)

logger = logging.getLogger(__name__)

mcp = FastMCP("PDF FreeText")


@mcp.tool()
async def list_free_text_annotations(file_path: str, page_range: Optional[str] = None) -> str:
    """List the FreeText annotations of a PDF.

    Parameters
    ----------
    file_path: str
        Filename (relative to an accessible directory) or absolute path to the PDF.
    page_range: Optional[str]
        `first`, `last`, `N`, `S-E`, or `None` for all pages.

    Returns JSON with file_name, page_range, total_annotations and one entry per
    annotation (page, index, content, author, default_appearance, default_style,
    quadding, intent, position, has_appearance).
    """
    path = find_file(file_path)
    if not path:
        return f"Error: Could not find file '{file_path}'."
    try:
        items = backend_extract_free_text(path, page_range)
    except ValueError as ve:
        return f"Error: {ve}"
    result = {
        "file_name": path.name,
        "path": str(path),
        "page_range": page_range or "all",
        "total_annotations": len(items),
        "annotations": items,
    }
    return json.dumps(result, indent=2, ensure_ascii=False)


@mcp.tool()
async def preview_free_text_appearance(file_path: str, page: int, index: int) -> str:
    """Regenerate the appearance of one FreeText annotation and return its content stream.

    `page` is 1-based; `index` is the position in the page's /Annots array as
    reported by `list_free_text_annotations`. The PDF on disk is not modified.
    """
    path = find_file(file_path)
    if not path:
        return f"Error: Could not find file '{file_path}'."
    try:
        annotation = load_free_text_annotation(path, page, index)
    except (LookupError, ValueError) as e:
        return f"Error: {e}"

    annotation.construct_appearances()
    stream = annotation.get_normal_appearance_stream()
    if stream is None:
        return "No appearance generated (the annotation has no /Rect)."
    result = {
        "page": page,
        "index": index,
        "bbox": [float(v) for v in stream["/BBox"]],
        "content": stream.get_data().decode("cp1252"),
    }
    return json.dumps(result, indent=2, ensure_ascii=False)


@mcp.tool()
async def show_accessible_directories() -> str:
    """Return the current directory/configuration constraints as JSON."""
    info = {
        "accessible_directories": _paths.SEARCH_DIRECTORIES,
        "directory_count": len(_paths.SEARCH_DIRECTORIES),
        "max_file_size_mb": _paths.MAX_FILE_SIZE // (1024 * 1024),
        "allowed_extensions": ALLOWED_EXTENSIONS,
    }
    return json.dumps(info, indent=2, ensure_ascii=False)
