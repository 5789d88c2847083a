"""Render a single border edge."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rtf_renderer.model.elements import Border
from rtf_renderer.model.values import EnumValue
from rtf_renderer.renderer.base import RendererBase
from rtf_renderer.renderer.enum_table import RENDERED_BY_OMISSION

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer


class BorderRenderer(RendererBase):
    """Writes ``edge_ctrl`` followed by style, width and color of the border.

    A border without a style, or with ``BorderStyle.NONE``, is not written.
    """

    def __init__(self, border: Border, doc_renderer: "RtfDocumentRenderer", edge_ctrl: str) -> None:
        super().__init__(border, doc_renderer)
        self._edge_ctrl = edge_ctrl

    def render(self) -> None:
        style = self.get_value_as_intended("style")
        if not isinstance(style, EnumValue) or style.member in RENDERED_BY_OMISSION:
            return
        self._writer.write_control(self._edge_ctrl)
        self.translate("style", "brdr")
        self.translate_twips("width", "brdrw")
        self.translate("color", "brdrcf")
