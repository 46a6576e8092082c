"""Typed accessors over a PyPDF2 dictionary.

A ``DocumentObject`` is a thin view: it never copies the dictionary it wraps,
so several views (and the rest of the PDF object graph) may share one
``DictionaryObject``.
"""

from typing import Any, Iterator, List, Optional, Sequence, Union

from PyPDF2.generic import (
    ArrayObject,
    ByteStringObject,
    DictionaryObject,
    FloatObject,
    IndirectObject,
    NameObject,
    NumberObject,
    TextStringObject,
    create_string_object,
)

Key = Union[str, NameObject]


def as_name(key: Key) -> NameObject:
    """Accept ``"DA"``, ``"/DA"`` or ``NameObject("/DA")``."""
    if isinstance(key, NameObject):
        return key
    key = str(key)
    return NameObject(key if key.startswith("/") else "/" + key)


def resolve(value: Any) -> Any:
    if isinstance(value, IndirectObject):
        return value.get_object()
    return value


class DocumentObject:
    """Dictionary view with typed get/set by symbolic key."""

    def __init__(self, dictionary: Optional[DictionaryObject] = None):
        self._dict = DictionaryObject() if dictionary is None else dictionary

    def get_pdf_object(self) -> DictionaryObject:
        return self._dict

    # --- raw access ---

    def get_item(self, key: Key) -> Any:
        return resolve(self._dict.get(as_name(key)))

    def set_item(self, key: Key, value: Any) -> None:
        if value is None:
            self.remove_item(key)
        else:
            self._dict[as_name(key)] = value

    def remove_item(self, key: Key) -> None:
        self._dict.pop(as_name(key), None)

    def contains_key(self, key: Key) -> bool:
        return as_name(key) in self._dict

    def keys(self) -> List[str]:
        return [str(k)[1:] for k in self._dict.keys()]

    def __contains__(self, key: Key) -> bool:
        return self.contains_key(key)

    def __len__(self) -> int:
        return len(self._dict)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # --- strings ---

    def get_string(self, key: Key) -> Optional[str]:
        value = self.get_item(key)
        if isinstance(value, TextStringObject):
            return str(value)
        if isinstance(value, ByteStringObject):
            return bytes(value).decode("latin-1")
        return None

    def set_string(self, key: Key, value: Optional[str]) -> None:
        """Store ``value`` as a PDF string; ``None`` removes the entry."""
        if value is None:
            self.remove_item(key)
        else:
            self._dict[as_name(key)] = create_string_object(value)

    # --- numbers ---

    def get_int(self, key: Key, default: int = -1) -> int:
        value = self.get_item(key)
        if isinstance(value, (NumberObject, FloatObject)):
            return int(value)
        return default

    def set_int(self, key: Key, value: int) -> None:
        self._dict[as_name(key)] = NumberObject(int(value))

    def get_float(self, key: Key, default: float = -1.0) -> float:
        value = self.get_item(key)
        if isinstance(value, (NumberObject, FloatObject)):
            return float(value)
        return default

    def set_float(self, key: Key, value: float) -> None:
        self._dict[as_name(key)] = FloatObject(str(float(value)))

    # --- names ---

    def get_name(self, key: Key, default: Optional[str] = None) -> Optional[str]:
        value = self.get_item(key)
        if isinstance(value, NameObject):
            return str(value)[1:]
        return default

    def set_name(self, key: Key, value: Optional[str]) -> None:
        if value is None:
            self.remove_item(key)
        else:
            self._dict[as_name(key)] = as_name(value)

    # --- arrays and nested dictionaries ---

    def get_float_array(self, key: Key) -> Optional[List[float]]:
        value = self.get_item(key)
        if not isinstance(value, ArrayObject):
            return None
        out: List[float] = []
        for item in value:
            item = resolve(item)
            if isinstance(item, (NumberObject, FloatObject)):
                out.append(float(item))
        return out

    def set_float_array(self, key: Key, values: Optional[Sequence[float]]) -> None:
        if values is None:
            self.remove_item(key)
        else:
            self._dict[as_name(key)] = ArrayObject(FloatObject(str(float(v))) for v in values)

    def get_dictionary(self, key: Key) -> Optional["DocumentObject"]:
        value = self.get_item(key)
        if isinstance(value, DictionaryObject):
            return DocumentObject(value)
        return None

    def __repr__(self) -> str:
        return f"DocumentObject({dict(self._dict)!r})"
