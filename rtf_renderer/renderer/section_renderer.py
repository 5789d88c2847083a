"""Render section page setup, footnote options and content."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rtf_renderer.model.elements import Section, Unit
from rtf_renderer.renderer.base import RendererBase
from rtf_renderer.utils.logger import get_logger
from rtf_renderer.utils.units import RtfUnit

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer

LOGGER = get_logger(__name__)

DEFAULT_PAGE_WIDTH = Unit.from_mm(210)
DEFAULT_PAGE_HEIGHT = Unit.from_mm(297)
DEFAULT_MARGIN = Unit.from_cm(2.5)


class SectionRenderer(RendererBase):
    """Writes ``\\sectd`` with page setup, then the section's elements.

    The last section of a document is closed with a trailing paragraph; the
    others end with ``\\sect``.
    """

    def __init__(self, section: Section, doc_renderer: "RtfDocumentRenderer", *, is_last: bool = False) -> None:
        super().__init__(section, doc_renderer)
        self._section = section
        self._is_last = is_last

    def render(self) -> None:
        LOGGER.debug("Rendering section with %d element(s)", len(self._section.elements))
        self._writer.write_control("sectd")
        self.translate("break_type", "sbk")
        self._render_page_setup()
        self._render_footnote_options()
        for element in self._section.elements:
            self._doc_renderer.render_element(element)
        if self._is_last:
            self.render_trailing_paragraph(self._section.elements)
        else:
            self._writer.write_control("sect")

    def _render_page_setup(self) -> None:
        self.translate_unit("page_width", "pgwsxn", RtfUnit.TWIPS, DEFAULT_PAGE_WIDTH)
        self.translate_unit("page_height", "pghsxn", RtfUnit.TWIPS, DEFAULT_PAGE_HEIGHT)
        self.translate_unit("left_margin", "marglsxn", RtfUnit.TWIPS, DEFAULT_MARGIN)
        self.translate_unit("right_margin", "margrsxn", RtfUnit.TWIPS, DEFAULT_MARGIN)
        self.translate_unit("top_margin", "margtsxn", RtfUnit.TWIPS, DEFAULT_MARGIN)
        self.translate_unit("bottom_margin", "margbsxn", RtfUnit.TWIPS, DEFAULT_MARGIN)
        self.translate_twips("header_distance", "headery")
        self.translate_twips("footer_distance", "footery")
        self.translate("different_first_page", "titlepg")

    def _render_footnote_options(self) -> None:
        self.translate("footnote_number_style", "sftnn")
        self.translate("footnote_numbering_rule", "sftn")
        self.translate("footnote_location", "sftn")
        self.translate("footnote_starting_number", "sftnstart")
