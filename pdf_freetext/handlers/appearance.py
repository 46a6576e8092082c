from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable

from PyPDF2.generic import ArrayObject, DecodedStreamObject, DictionaryObject, FloatObject, NameObject

from pdf_freetext.core import names
from pdf_freetext.core.cos import DocumentObject

if TYPE_CHECKING:
    from pdf_freetext.core.annotation import Annotation


@runtime_checkable
class AppearanceHandler(Protocol):
    """Anything that can (re)build the appearance streams of an annotation.

    Implementations are bound to their annotation when created, so the
    single operation takes no arguments.
    """

    def generate_appearance_streams(self) -> None:
        ...


class BaseAppearanceHandler(ABC):
    """Helpers shared by appearance handlers bound to one annotation."""

    def __init__(self, annotation: "Annotation"):
        self.annotation = annotation

    def generate_appearance_streams(self) -> None:
        self.generate_normal_appearance()
        self.generate_rollover_appearance()
        self.generate_down_appearance()

    @abstractmethod
    def generate_normal_appearance(self) -> None:
        ...

    def generate_rollover_appearance(self) -> None:
        # No rollover (/R) stream unless a subclass provides one
        pass

    def generate_down_appearance(self) -> None:
        pass

    @staticmethod
    def create_form_stream(
        bbox: List[float],
        content: bytes,
        resources: Optional[DictionaryObject] = None,
    ) -> DecodedStreamObject:
        stream = DecodedStreamObject()
        stream[names.TYPE] = NameObject("/" + names.XOBJECT)
        stream[names.SUBTYPE] = NameObject("/" + names.FORM)
        stream[names.BBOX] = ArrayObject(FloatObject(str(float(v))) for v in bbox)
        stream[names.RESOURCES] = resources if resources is not None else DictionaryObject()
        stream.set_data(content)
        return stream

    def set_normal_appearance(self, stream: DecodedStreamObject) -> None:
        """Install ``stream`` as ``/AP /N``, keeping other appearance entries."""
        appearance = self.annotation.get_appearance()
        if appearance is None:
            appearance = DocumentObject()
            self.annotation.set_appearance(appearance)
        appearance.set_item(names.N, stream)
