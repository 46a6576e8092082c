from typing import List, Optional


class PageRangeError(ValueError):
    """Raised for a page range that does not fit the document."""


def parse_page_range(total_pages: int, page_range: Optional[str]) -> List[int]:
    """Return zero-based page indices for a page range spec.
    Supports: None or "all", "first", "last", "N", "S-E" (open ends allowed, "3-").
    """
    if total_pages <= 0:
        return []
    if page_range is None:
        return list(range(total_pages))

    spec = str(page_range).strip().lower()
    if spec in ("", "all"):
        return list(range(total_pages))
    if spec == "first":
        return [0]
    if spec == "last":
        return [total_pages - 1]
    try:
        if "-" in spec:
            start_s, end_s = spec.split("-", 1)
            start = int(start_s) if start_s else 1
            end = int(end_s) if end_s else total_pages
            if start < 1 or end < start or start > total_pages:
                raise PageRangeError(f"Invalid page range: {page_range}")
            return list(range(start - 1, min(end, total_pages)))
        page = int(spec)
    except PageRangeError:
        raise
    except ValueError as e:
        raise PageRangeError(f"Invalid page range: {page_range}") from e
    if page < 1 or page > total_pages:
        raise PageRangeError(f"Page {page} out of range (1-{total_pages})")
    return [page - 1]
