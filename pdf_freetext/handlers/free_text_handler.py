import logging
from typing import TYPE_CHECKING, List

from PyPDF2.generic import DictionaryObject, NameObject

from pdf_freetext.core import names
from pdf_freetext.handlers.appearance import BaseAppearanceHandler
from pdf_freetext.handlers.default_appearance import fmt_number, parse_default_appearance

if TYPE_CHECKING:
    from pdf_freetext.core.free_text import FreeTextAnnotation

logger = logging.getLogger(__name__)

# No font metrics here: glyphs are assumed to be this fraction of the font size wide
AVERAGE_GLYPH_WIDTH = 0.5
LEADING = 1.15
PADDING = 2.0


def escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _color_operator(components: List[float], stroking: bool) -> str:
    op = {1: "g", 3: "rg", 4: "k"}.get(len(components))
    if op is None:
        return ""
    if stroking:
        op = op.upper()
    return " ".join(fmt_number(c) for c in components) + " " + op


class FreeTextAppearanceHandler(BaseAppearanceHandler):
    """Default appearance for free text annotations.

    Draws an optional background (``C``) and border (``BS/W``) and writes
    the ``Contents`` lines with the font, size and colour from ``DA``,
    aligned according to ``Q``. Only the normal appearance is produced.
    """

    annotation: "FreeTextAnnotation"

    def generate_normal_appearance(self) -> None:
        rect = self.annotation.get_rectangle()
        if rect is None:
            logger.warning("FreeText annotation has no /Rect; appearance not generated")
            return

        width = rect[2] - rect[0]
        height = rect[3] - rect[1]
        da = parse_default_appearance(self.annotation.get_default_appearance())
        border_width = self.annotation.get_border_width()

        ops: List[str] = ["q"]

        background = self.annotation.get_color()
        if background:
            fill = _color_operator(background, stroking=False)
            if fill:
                ops.append(fill)
                ops.append(f"0 0 {fmt_number(width)} {fmt_number(height)} re f")

        if border_width > 0:
            half = border_width / 2
            ops.append(f"{fmt_number(border_width)} w")
            ops.append(da.stroke_operator())
            ops.append(
                f"{fmt_number(half)} {fmt_number(half)} {fmt_number(width - border_width)} {fmt_number(height - border_width)} re S"
            )

        text = self.annotation.get_contents() or ""
        if text:
            ops.extend(self._text_operators(text, da, width, height, border_width))

        ops.append("Q")
        text_ops = "\n".join(ops)
        # the font resource declares WinAnsiEncoding, i.e. cp1252
        content = text_ops.encode("cp1252", errors="replace")
        if content.decode("cp1252") != text_ops:
            logger.warning("FreeText contents have characters outside WinAnsiEncoding; replaced with '?'")

        stream = self.create_form_stream([0, 0, width, height], content, self._font_resources(da.font_name))
        self.set_normal_appearance(stream)
        logger.debug(f"Generated FreeText appearance ({len(content)} bytes)")

    def _text_operators(self, text, da, width, height, border_width) -> List[str]:
        inset = border_width + PADDING
        left, top, right, bottom = self._insets(inset)
        box_width = max(width - left - right, 0)
        line_height = da.font_size * LEADING
        q = self.annotation.get_q()

        ops = [
            # clip to the text box
            f"{fmt_number(left)} {fmt_number(bottom)} {fmt_number(box_width)} {fmt_number(max(height - top - bottom, 0))} re W n",
            "BT",
            da.font_operator(),
            da.fill_operator(),
        ]
        y = height - top - da.font_size
        for line in text.splitlines():
            line_width = len(line) * da.font_size * AVERAGE_GLYPH_WIDTH
            if q == 1:
                x = left + (box_width - line_width) / 2
            elif q == 2:
                x = left + box_width - line_width
            else:
                # unknown codes render left aligned
                x = left
            ops.append(f"1 0 0 1 {fmt_number(x)} {fmt_number(y)} Tm")
            ops.append(f"({escape_pdf_text(line)}) Tj")
            y -= line_height
        ops.append("ET")
        return ops

    def _insets(self, inset: float) -> List[float]:
        rd = self.annotation.get_rect_differences()
        if rd is None or len(rd) < 4:
            return [inset, inset, inset, inset]
        return [rd[0] + inset, rd[1] + inset, rd[2] + inset, rd[3] + inset]

    @staticmethod
    def _font_resources(font_name: str) -> DictionaryObject:
        font = DictionaryObject()
        font[names.TYPE] = names.FONT
        font[names.SUBTYPE] = NameObject("/" + names.TYPE1)
        font[names.BASE_FONT] = NameObject("/" + names.HELVETICA)
        font[names.ENCODING] = NameObject("/" + names.WIN_ANSI)
        fonts = DictionaryObject()
        fonts[NameObject("/" + font_name)] = font
        resources = DictionaryObject()
        resources[names.FONT] = fonts
        return resources
