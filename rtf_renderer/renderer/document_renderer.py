"""Render a whole document into an RTF string."""
from __future__ import annotations

from typing import List, Optional

from rtf_renderer.model.document_model import Document
from rtf_renderer.model.elements import Color, DocumentElement, Paragraph, Section, Shape, Table, Unit
from rtf_renderer.model.errors import TranslationContractError
from rtf_renderer.model.style_model import StyleNames
from rtf_renderer.renderer.font_renderer import FontRenderer
from rtf_renderer.renderer.paragraph_format_renderer import ParagraphFormatRenderer
from rtf_renderer.renderer.paragraph_renderer import ParagraphRenderer
from rtf_renderer.renderer.section_renderer import SectionRenderer
from rtf_renderer.renderer.shape_renderer import ShapeRenderer
from rtf_renderer.renderer.table_renderer import TableRenderer
from rtf_renderer.utils.logger import get_logger
from rtf_renderer.writer.rtf_writer import RtfWriter

LOGGER = get_logger(__name__)

DEFAULT_FONT_NAME = "Arial"
DEFAULT_FONT_SIZE_PT = 10.0
DEFAULT_CODE_PAGE = 1252


class RtfDocumentRenderer:
    """Owns the writer, color table and style indices for one render pass."""

    def __init__(
        self,
        document: Document,
        *,
        font_name: str = DEFAULT_FONT_NAME,
        font_size: Unit = Unit(DEFAULT_FONT_SIZE_PT),
        code_page: int = DEFAULT_CODE_PAGE,
    ) -> None:
        self.document = document
        self.writer = RtfWriter()
        self.default_font_size = font_size
        self._font_name = font_name
        self._code_page = code_page
        self._colors: List[Color] = []

    def get_color_index(self, color: Color) -> int:
        """Return the color table index of ``color``, registering it on first use.

        Index 0 is the reader's automatic color.
        """
        if color not in self._colors:
            self._colors.append(color)
        return self._colors.index(color) + 1

    def get_style_index(self, style_name: Optional[str]) -> int:
        return self.document.styles.index_of(style_name or StyleNames.NORMAL)

    def render_element(self, element: DocumentElement) -> None:
        if isinstance(element, Paragraph):
            ParagraphRenderer(element, self).render()
        elif isinstance(element, Table):
            TableRenderer(element, self).render()
        elif isinstance(element, Shape):
            ShapeRenderer(element, self).render()
        else:
            raise TranslationContractError(f"No renderer for {element.kind}")

    def render(self) -> str:
        """Render the document and return the complete RTF text."""
        sections = self.document.sections or [Section()]
        LOGGER.info("Rendering document with %d section(s)", len(sections))
        self._colors = []

        self.writer = RtfWriter()
        self._render_stylesheet()
        stylesheet = self.writer.getvalue()

        self.writer = RtfWriter()
        last_index = len(sections) - 1
        for index, section in enumerate(sections):
            SectionRenderer(section, self, is_last=index == last_index).render()
        body = self.writer.getvalue()

        self.writer = RtfWriter()
        self._render_header()
        header = self.writer.getvalue()
        LOGGER.info("Rendered document using %d color(s)", len(self._colors))
        return f"{header}{stylesheet}{body}}}"

    def _render_header(self) -> None:
        self.writer.start_content()
        self.writer.write_control("rtf", 1)
        self.writer.write_control("ansi")
        self.writer.write_control("ansicpg", self._code_page)
        self.writer.write_control("deff", 0)
        self.writer.start_content()
        self.writer.write_control("fonttbl")
        self.writer.start_content()
        self.writer.write_control("f", 0)
        self.writer.write_text(f"{self._font_name};")
        self.writer.end_content()
        self.writer.end_content()
        self.writer.start_content()
        self.writer.write_control("colortbl")
        self.writer.write_raw(";")
        for color in self._colors:
            self.writer.write_control("red", color.red)
            self.writer.write_control("green", color.green)
            self.writer.write_control("blue", color.blue)
            self.writer.write_raw(";")
        self.writer.end_content()

    def _render_stylesheet(self) -> None:
        self.writer.start_content()
        self.writer.write_control("stylesheet")
        for style in self.document.styles:
            self.writer.start_content()
            self.writer.write_control("s", self.get_style_index(style.name))
            if style.base_style is not None:
                self.writer.write_control("sbasedon", self.get_style_index(style.base_style))
            ParagraphFormatRenderer(style.paragraph_format, self, use_effective_value=True).render()
            FontRenderer(style.font, self, use_effective_value=True, default_size=self.default_font_size).render()
            self.writer.write_text(f"{style.name};")
            self.writer.end_content()
        self.writer.end_content()
