import logging
from enum import IntEnum
from typing import List, Optional

from PyPDF2.generic import DictionaryObject

from pdf_freetext.core import names
from pdf_freetext.core.annotation import MarkupAnnotation
from pdf_freetext.handlers.appearance import AppearanceHandler
from pdf_freetext.handlers.free_text_handler import FreeTextAppearanceHandler

logger = logging.getLogger(__name__)


class Quadding(IntEnum):
    """Known ``Q`` codes. Other integers are legal and kept as-is."""
    LEFT = 0
    CENTERED = 1
    RIGHT = 2


# Intents (IT) defined for free text annotations
IT_FREE_TEXT = "FreeText"
IT_FREE_TEXT_CALLOUT = "FreeTextCallout"
IT_FREE_TEXT_TYPE_WRITER = "FreeTextTypeWriter"


class FreeTextAnnotation(MarkupAnnotation):
    """A free text annotation: text drawn directly on the page.

    Wraps an annotation dictionary and exposes ``DA``, ``DS`` and ``Q`` plus
    the appearance generation entry point. The appearance handler installed
    with :meth:`set_custom_appearance_handler` lives only on this instance
    and is never written to the dictionary.
    """

    SUB_TYPE = "FreeText"

    def __init__(self, dictionary: Optional[DictionaryObject] = None):
        super().__init__(dictionary)
        if dictionary is None:
            self._cos.set_name(names.SUBTYPE, self.SUB_TYPE)
        self._custom_appearance_handler: Optional[AppearanceHandler] = None

    def get_default_appearance(self) -> Optional[str]:
        """Default appearance string (``DA``), e.g. ``/Helv 12 Tf 0 g``."""
        return self._cos.get_string(names.DA)

    def set_default_appearance(self, da_value: Optional[str]) -> None:
        self._cos.set_string(names.DA, da_value)

    def get_default_style_string(self) -> Optional[str]:
        """Default style string (``DS``) used for rich text."""
        return self._cos.get_string(names.DS)

    def set_default_style_string(self, default_style_string: Optional[str]) -> None:
        """Set ``DS``. ``None`` removes the entry instead of storing ``""``."""
        self._cos.set_string(names.DS, default_style_string)

    def get_q(self) -> int:
        """Quadding (justification) of the text: 0 left (default), 1 centered, 2 right.

        ``Q`` is inheritable from form fields; resolving that chain is up to
        the caller, this only reads the annotation's own entry.
        """
        return self._cos.get_int(names.Q, 0)

    def set_q(self, q: int) -> None:
        """Store ``q`` verbatim; unknown codes are not rejected."""
        self._cos.set_int(names.Q, q)

    def get_callout(self) -> Optional[List[float]]:
        """Callout line points (``CL``): four or six numbers."""
        return self._cos.get_float_array(names.CL)

    def set_callout(self, callout: Optional[List[float]]) -> None:
        self._cos.set_float_array(names.CL, callout)

    def get_line_ending_style(self) -> str:
        return self._cos.get_name(names.LE, "None")

    def set_line_ending_style(self, style: Optional[str]) -> None:
        self._cos.set_name(names.LE, style)

    def get_rect_differences(self) -> Optional[List[float]]:
        """Inset of the text box inside ``Rect`` (``RD``): left, top, right, bottom."""
        return self._cos.get_float_array(names.RD)

    def set_rect_differences(self, differences: Optional[List[float]]) -> None:
        self._cos.set_float_array(names.RD, differences)

    def set_custom_appearance_handler(self, handler: Optional[AppearanceHandler]) -> None:
        """Use ``handler`` for :meth:`construct_appearances`; ``None`` restores the default."""
        self._custom_appearance_handler = handler

    def construct_appearances(self) -> None:
        if self._custom_appearance_handler is None:
            appearance_handler = FreeTextAppearanceHandler(self)
            appearance_handler.generate_appearance_streams()
        else:
            logger.debug(f"Using custom appearance handler {type(self._custom_appearance_handler).__name__}")
            self._custom_appearance_handler.generate_appearance_streams()
