from typing import List, Optional

from PyPDF2.generic import DictionaryObject, StreamObject

from pdf_freetext.core import names
from pdf_freetext.core.cos import DocumentObject

# Annotation flags (bit positions per the PDF reference, table 165)
FLAG_INVISIBLE = 1 << 0
FLAG_HIDDEN = 1 << 1
FLAG_PRINTED = 1 << 2
FLAG_NO_ZOOM = 1 << 3
FLAG_NO_ROTATE = 1 << 4
FLAG_NO_VIEW = 1 << 5
FLAG_READ_ONLY = 1 << 6
FLAG_LOCKED = 1 << 7
FLAG_TOGGLE_NO_VIEW = 1 << 8
FLAG_LOCKED_CONTENTS = 1 << 9


def _flag_property(bit: int, doc: str) -> property:
    def getter(self) -> bool:
        return self.get_annotation_flags() & bit == bit

    def setter(self, value: bool) -> None:
        flags = self.get_annotation_flags()
        self.set_annotation_flags(flags | bit if value else flags & ~bit)

    return property(getter, setter, doc=doc)


class Annotation:
    """Common annotation entries over one annotation dictionary.

    The wrapped dictionary is shared with the rest of the document; building
    a fresh annotation only sets ``/Type /Annot``.
    """

    def __init__(self, dictionary: Optional[DictionaryObject] = None):
        if dictionary is None:
            self._cos = DocumentObject()
            self._cos.set_name(names.TYPE, names.ANNOT)
        else:
            self._cos = DocumentObject(dictionary)

    def get_cos_object(self) -> DocumentObject:
        return self._cos

    def get_subtype(self) -> Optional[str]:
        return self._cos.get_name(names.SUBTYPE)

    # --- Rect / Contents / NM / M ---

    def get_rectangle(self) -> Optional[List[float]]:
        rect = self._cos.get_float_array(names.RECT)
        if rect is None or len(rect) < 4:
            return None
        llx, lly, urx, ury = rect[:4]
        # Normalise so that (llx, lly) is the lower-left corner
        return [min(llx, urx), min(lly, ury), max(llx, urx), max(lly, ury)]

    def set_rectangle(self, rect: Optional[List[float]]) -> None:
        self._cos.set_float_array(names.RECT, rect)

    def get_contents(self) -> Optional[str]:
        return self._cos.get_string(names.CONTENTS)

    def set_contents(self, value: Optional[str]) -> None:
        self._cos.set_string(names.CONTENTS, value)

    def get_annotation_name(self) -> Optional[str]:
        return self._cos.get_string(names.NM)

    def set_annotation_name(self, value: Optional[str]) -> None:
        self._cos.set_string(names.NM, value)

    def get_modified_date(self) -> Optional[str]:
        """Raw PDF date string, e.g. ``D:20240101120000Z``."""
        return self._cos.get_string(names.M)

    def set_modified_date(self, value: Optional[str]) -> None:
        self._cos.set_string(names.M, value)

    # --- colour ---

    def get_color(self) -> Optional[List[float]]:
        return self._cos.get_float_array(names.C)

    def set_color(self, components: Optional[List[float]]) -> None:
        self._cos.set_float_array(names.C, components)

    # --- flags ---

    def get_annotation_flags(self) -> int:
        return self._cos.get_int(names.F, 0)

    def set_annotation_flags(self, flags: int) -> None:
        self._cos.set_int(names.F, flags)

    invisible = _flag_property(FLAG_INVISIBLE, "Do not display if no handler is available.")
    hidden = _flag_property(FLAG_HIDDEN, "Do not display or print.")
    printed = _flag_property(FLAG_PRINTED, "Print when the page is printed.")
    no_zoom = _flag_property(FLAG_NO_ZOOM, "Do not scale with the page magnification.")
    no_rotate = _flag_property(FLAG_NO_ROTATE, "Do not rotate with the page.")
    no_view = _flag_property(FLAG_NO_VIEW, "Do not display on screen.")
    read_only = _flag_property(FLAG_READ_ONLY, "Do not allow user interaction.")
    locked = _flag_property(FLAG_LOCKED, "Do not allow deletion or property changes.")
    toggle_no_view = _flag_property(FLAG_TOGGLE_NO_VIEW, "Invert no_view on certain events.")
    locked_contents = _flag_property(FLAG_LOCKED_CONTENTS, "Do not allow changes to the contents.")

    # --- appearance ---

    def get_appearance(self) -> Optional[DocumentObject]:
        return self._cos.get_dictionary(names.AP)

    def set_appearance(self, appearance: Optional[DocumentObject]) -> None:
        self._cos.set_item(names.AP, None if appearance is None else appearance.get_pdf_object())

    def get_normal_appearance_stream(self) -> Optional[StreamObject]:
        """Return ``/AP /N`` when it is a single stream (not a state dictionary)."""
        appearance = self.get_appearance()
        if appearance is None:
            return None
        normal = appearance.get_item(names.N)
        if isinstance(normal, StreamObject):
            return normal
        return None

    def get_appearance_state(self) -> Optional[str]:
        return self._cos.get_name(names.AS)

    def set_appearance_state(self, state: Optional[str]) -> None:
        self._cos.set_name(names.AS, state)

    def construct_appearances(self) -> None:
        """Build appearance streams; annotations without a handler keep theirs."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(subtype={self.get_subtype()!r})"


class MarkupAnnotation(Annotation):
    """Entries shared by markup annotations (text, free text, lines, ...)."""

    def get_title_popup(self) -> Optional[str]:
        """Author shown in the popup title bar (``T``)."""
        return self._cos.get_string(names.T)

    def set_title_popup(self, value: Optional[str]) -> None:
        self._cos.set_string(names.T, value)

    def get_constant_opacity(self) -> float:
        return self._cos.get_float(names.CA, 1.0)

    def set_constant_opacity(self, value: float) -> None:
        self._cos.set_float(names.CA, value)

    def get_rich_contents(self) -> Optional[str]:
        return self._cos.get_string(names.RC)

    def set_rich_contents(self, value: Optional[str]) -> None:
        self._cos.set_string(names.RC, value)

    def get_creation_date(self) -> Optional[str]:
        return self._cos.get_string(names.CREATION_DATE)

    def set_creation_date(self, value: Optional[str]) -> None:
        self._cos.set_string(names.CREATION_DATE, value)

    def get_subject(self) -> Optional[str]:
        return self._cos.get_string(names.SUBJ)

    def set_subject(self, value: Optional[str]) -> None:
        self._cos.set_string(names.SUBJ, value)

    def get_intent(self) -> Optional[str]:
        return self._cos.get_name(names.IT)

    def set_intent(self, value: Optional[str]) -> None:
        self._cos.set_name(names.IT, value)

    def get_border_style(self) -> Optional[DocumentObject]:
        return self._cos.get_dictionary(names.BS)

    def set_border_style(self, border_style: Optional[DocumentObject]) -> None:
        self._cos.set_item(names.BS, None if border_style is None else border_style.get_pdf_object())

    def get_border_width(self) -> float:
        """``BS/W``; 1 when no border style is present."""
        bs = self.get_border_style()
        if bs is None:
            return 1.0
        return bs.get_float(names.W, 1.0)


def create_annotation(dictionary: DictionaryObject) -> Annotation:
    """Wrap an existing annotation dictionary in the most specific view."""
    # imported here; free_text depends on this module
    from pdf_freetext.core.free_text import FreeTextAnnotation

    subtype = DocumentObject(dictionary).get_name(names.SUBTYPE)
    if subtype == FreeTextAnnotation.SUB_TYPE:
        return FreeTextAnnotation(dictionary)
    return MarkupAnnotation(dictionary)
