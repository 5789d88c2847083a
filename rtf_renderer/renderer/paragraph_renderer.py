"""Render paragraphs with their formatting and inline content."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rtf_renderer.model.elements import Paragraph, Shape, Text
from rtf_renderer.model.errors import TranslationContractError
from rtf_renderer.renderer.base import RendererBase, any_assignable_to
from rtf_renderer.renderer.font_renderer import FontRenderer
from rtf_renderer.renderer.paragraph_format_renderer import ParagraphFormatRenderer
from rtf_renderer.renderer.shape_renderer import ShapeRenderer

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer


class ParagraphRenderer(RendererBase):
    """Writes ``\\pard``, the style reference, formatting, content and the closing word.

    Inside a table the paragraph is flagged with ``\\intbl``; the last
    paragraph of a cell closes with ``\\cell`` instead of ``\\par``.
    """

    def __init__(
        self,
        paragraph: Paragraph,
        doc_renderer: "RtfDocumentRenderer",
        *,
        in_cell: bool = False,
        closes_cell: bool = False,
    ) -> None:
        super().__init__(paragraph, doc_renderer)
        self._paragraph = paragraph
        self._in_cell = in_cell
        self._closes_cell = closes_cell

    def render(self) -> None:
        paragraph = self._paragraph
        self._writer.write_control("pard")
        if self._in_cell:
            self._writer.write_control("intbl")
        self._writer.write_control("s", self._doc_renderer.get_style_index(paragraph.style))
        # Exact line spacing would clip inline pictures.
        has_shapes = any_assignable_to(paragraph.children, (Shape,))
        ParagraphFormatRenderer(
            paragraph.format, self._doc_renderer, allow_exact_line_spacing=not has_shapes
        ).render()
        self._writer.write_control("plain")
        style = self._doc_renderer.document.styles.get(paragraph.style)
        if style is not None:
            FontRenderer(
                style.font,
                self._doc_renderer,
                use_effective_value=True,
                default_size=self._doc_renderer.default_font_size,
            ).render()
        FontRenderer(paragraph.font, self._doc_renderer).render()
        self._render_content()
        self._writer.write_control("cell" if self._closes_cell else "par")

    def _render_content(self) -> None:
        for child in self._paragraph.children:
            if isinstance(child, Text):
                self._writer.write_text(child.content)
            elif isinstance(child, Shape):
                ShapeRenderer(child, self._doc_renderer).render()
            else:
                raise TranslationContractError(f"{child.kind} cannot be rendered inside a paragraph")
