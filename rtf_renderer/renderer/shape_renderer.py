"""Render floating shapes, pictures and text frames."""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Union

from rtf_renderer.model.elements import Image, Shape, TextFrame, Unit
from rtf_renderer.model.values import ColorValue, EnumValue, LengthValue
from rtf_renderer.renderer.base import RendererBase
from rtf_renderer.renderer.enum_table import lookup_token
from rtf_renderer.utils.units import RtfUnit, to_emu, to_twips

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer

SHAPE_TYPE_RECTANGLE = 1
SHAPE_TYPE_PICTURE = 75
SHAPE_TYPE_TEXT_BOX = 202

_BLIP_FORMATS = {".png": "pngblip", ".jpg": "jpegblip", ".jpeg": "jpegblip"}

# Shapes without a wrap style float over the text.
DEFAULT_WRAP_STYLE = "3"


class ShapeRenderer(RendererBase):
    """Writes a ``\\shp`` group with position, wrapping and drawing properties.

    Pictures always carry their ``pibName``; the picture data itself is
    embedded only for PNG and JPEG images whose bytes are loaded.
    """

    def __init__(self, shape: Shape, doc_renderer: "RtfDocumentRenderer") -> None:
        super().__init__(shape, doc_renderer)
        self._shape = shape

    def render(self) -> None:
        self._writer.start_content()
        self._writer.write_control("shp")
        self._writer.start_content()
        self._writer.write_control("shpinst", None, True)
        self._render_position()
        self.translate("relative_horizontal", "shpbx")
        self.translate("relative_vertical", "shpby")
        self.translate("wrap_style", "shpwr", RtfUnit.TWIPS, DEFAULT_WRAP_STYLE)
        self.render_name_value_pair("shapeType", self._shape_type())
        self._render_line_format()
        self._render_fill()
        if isinstance(self._shape, Image):
            self._render_picture(self._shape)
        elif isinstance(self._shape, TextFrame):
            self._render_text_frame(self._shape)
        self._writer.end_content()
        self._writer.end_content()

    def render_name_value_pair(self, name: str, value: Union[str, int]) -> None:
        """Write a ``{\\sp{\\sn name}{\\sv value}}`` shape property."""
        self._writer.start_content()
        self._writer.write_control("sp")
        self._writer.start_content()
        self._writer.write_control("sn")
        self._writer.write_text(name)
        self._writer.end_content()
        self._writer.start_content()
        self._writer.write_control("sv")
        self._writer.write_text(str(value))
        self._writer.end_content()
        self._writer.end_content()

    def _shape_type(self) -> int:
        if isinstance(self._shape, Image):
            return SHAPE_TYPE_PICTURE
        if isinstance(self._shape, TextFrame):
            return SHAPE_TYPE_TEXT_BOX
        return SHAPE_TYPE_RECTANGLE

    def _render_position(self) -> None:
        left = self.get_value_or_default("left", Unit())
        top = self.get_value_or_default("top", Unit())
        width = self.get_value_or_default("width", Unit())
        height = self.get_value_or_default("height", Unit())
        self.render_unit("shpleft", left)
        self.render_unit("shptop", top)
        self.render_unit("shpright", Unit(left.point + width.point))
        self.render_unit("shpbottom", Unit(top.point + height.point))

    def _render_line_format(self) -> None:
        line_width = self.get_value_as_intended("line_width")
        if isinstance(line_width, LengthValue):
            self.render_name_value_pair("lineWidth", to_emu(line_width.unit))
        self._render_enum_pair("line_style", "lineStyle")
        self._render_enum_pair("dash_style", "lineDashing")
        line_color = self.get_value_as_intended("line_color")
        if isinstance(line_color, ColorValue):
            self.render_name_value_pair("lineColor", line_color.color.bgr)

    def _render_fill(self) -> None:
        fill_color = self.get_value_as_intended("fill_color")
        if isinstance(fill_color, ColorValue):
            self.render_name_value_pair("fillColor", fill_color.color.bgr)
            self.render_name_value_pair("fFilled", 1)
        else:
            self.render_name_value_pair("fFilled", 0)

    def _render_enum_pair(self, value_name: str, property_name: str) -> None:
        value = self.get_value_as_intended(value_name)
        if isinstance(value, EnumValue):
            self.render_name_value_pair(property_name, lookup_token(value.member))

    def _render_picture(self, image: Image) -> None:
        self.render_name_value_pair("pibName", image.path)
        blip = _BLIP_FORMATS.get(PurePosixPath(image.path).suffix.lower())
        if not image.data or blip is None:
            return
        width = self.get_value_or_default("width", Unit())
        height = self.get_value_or_default("height", Unit())
        self._writer.start_content()
        self._writer.write_control("sp")
        self._writer.start_content()
        self._writer.write_control("sn")
        self._writer.write_text("pib")
        self._writer.end_content()
        self._writer.start_content()
        self._writer.write_control("sv")
        self._writer.start_content()
        self._writer.write_control("pict")
        self._writer.write_control(blip)
        self._writer.write_control("picwgoal", to_twips(width))
        self._writer.write_control("pichgoal", to_twips(height))
        self._writer.write_raw(" " + image.data.hex())
        self._writer.end_content()
        self._writer.end_content()
        self._writer.end_content()

    def _render_text_frame(self, frame: TextFrame) -> None:
        self._render_enum_pair("orientation", "txflTextFlow")
        self._writer.start_content()
        self._writer.write_control("shptxt")
        for element in frame.children:
            self._doc_renderer.render_element(element)
        self.render_trailing_paragraph(frame.children)
        self._writer.end_content()
