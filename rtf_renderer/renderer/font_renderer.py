"""Render character formatting as RTF control words."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rtf_renderer.model.elements import Font, Unit
from rtf_renderer.renderer.base import RendererBase
from rtf_renderer.utils.units import RtfUnit, to_rtf_unit

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer


class FontRenderer(RendererBase):
    """Writes bold, italic, underline, size, color and vertical position."""

    def __init__(
        self,
        font: Font,
        doc_renderer: "RtfDocumentRenderer",
        *,
        use_effective_value: bool = False,
        default_size: Optional[Unit] = None,
    ) -> None:
        super().__init__(font, doc_renderer, use_effective_value=use_effective_value)
        self._default_size = default_size

    def render(self) -> None:
        self.translate_bool("bold", "b", "b0")
        self.translate_bool("italic", "i", "i0")
        self.translate("underline", "ul")
        default_size = None
        if self._default_size is not None:
            default_size = str(to_rtf_unit(self._default_size, RtfUnit.HALF_POINTS))
        self.translate("size", "fs", RtfUnit.HALF_POINTS, default_size)
        self.translate("color", "cf")
        self.translate("superscript", "super")
        self.translate("subscript", "sub")
