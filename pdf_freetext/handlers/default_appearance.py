"""Minimal reader for default appearance (DA) strings.

Only the operators that matter for drawing plain text are picked up:
``Tf`` (font and size) and the fill colour operators ``g``, ``rg`` and ``k``.
Anything else in the string is skipped.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_FONT = "Helv"
DEFAULT_FONT_SIZE = 12.0

_COLOR_OPERANDS = {"g": 1, "rg": 3, "k": 4}


@dataclass
class DefaultAppearance:
    font_name: str = DEFAULT_FONT
    font_size: float = DEFAULT_FONT_SIZE
    color_operator: str = "g"
    color: List[float] = field(default_factory=lambda: [0.0])

    def font_operator(self) -> str:
        return f"/{self.font_name} {fmt_number(self.font_size)} Tf"

    def fill_operator(self) -> str:
        return " ".join(fmt_number(c) for c in self.color) + f" {self.color_operator}"

    def stroke_operator(self) -> str:
        # RG / K / G are the stroking twins of rg / k / g
        return " ".join(fmt_number(c) for c in self.color) + f" {self.color_operator.upper()}"


def fmt_number(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def _to_float(token: str) -> Optional[float]:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_default_appearance(da: Optional[str]) -> DefaultAppearance:
    result = DefaultAppearance()
    if not da:
        return result

    operands: List[str] = []
    for token in da.split():
        if token == "Tf" and len(operands) >= 2:
            name, size = operands[-2], _to_float(operands[-1])
            if name.startswith("/") and len(name) > 1:
                result.font_name = name[1:]
            # size 0 means auto-size; keep the default then
            if size:
                result.font_size = abs(size)
        elif token in _COLOR_OPERANDS:
            count = _COLOR_OPERANDS[token]
            values = [_to_float(t) for t in operands[-count:]]
            if len(values) == count and all(v is not None for v in values):
                result.color_operator = token
                result.color = values
        else:
            operands.append(token)
            continue
        operands = []
    return result
