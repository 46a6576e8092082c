from typing import TypedDict, List, Optional

class FreeTextSummary(TypedDict, total=False):
    page: int
    index: int            # position in the page /Annots array
    content: str
    author: str
    default_appearance: Optional[str]   # DA
    default_style: Optional[str]        # DS
    quadding: int                       # Q, 0 = left
    intent: Optional[str]               # "FreeText", "FreeTextCallout", ...
    position: List[float]  # Rect in PDF user space [llx, lly, urx, ury]
    has_appearance: bool
