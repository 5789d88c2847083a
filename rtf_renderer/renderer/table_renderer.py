"""Render tables row by row."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rtf_renderer.model.elements import Cell, Paragraph, Row, Table, Unit
from rtf_renderer.model.errors import TranslationContractError
from rtf_renderer.renderer.base import RendererBase
from rtf_renderer.renderer.border_renderer import BorderRenderer
from rtf_renderer.renderer.paragraph_renderer import ParagraphRenderer
from rtf_renderer.utils.logger import get_logger

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer

LOGGER = get_logger(__name__)

DEFAULT_CELL_WIDTH = Unit.from_cm(4)

_BORDER_EDGES = (("top", "clbrdrt"), ("left", "clbrdrl"), ("bottom", "clbrdrb"), ("right", "clbrdrr"))


class TableRenderer(RendererBase):
    """Writes every row of a :class:`Table`."""

    def __init__(self, table: Table, doc_renderer: "RtfDocumentRenderer") -> None:
        super().__init__(table, doc_renderer)
        self._table = table

    def render(self) -> None:
        LOGGER.debug("Rendering table with %d row(s)", len(self._table.children))
        for row in self._table.children:
            if not isinstance(row, Row):
                raise TranslationContractError(f"Table children must be rows, got {row.kind}")
            RowRenderer(row, self._doc_renderer).render()


class RowRenderer(RendererBase):
    """Writes the row definition, each cell definition, the cell contents and ``\\row``."""

    def __init__(self, row: Row, doc_renderer: "RtfDocumentRenderer") -> None:
        super().__init__(row, doc_renderer)
        self._row = row

    def render(self) -> None:
        cells = [cell for cell in self._row.children if isinstance(cell, Cell)]
        if len(cells) != len(self._row.children):
            raise TranslationContractError("Row children must be cells")
        self._writer.write_control("trowd")
        self.translate("alignment", "trq")
        self.translate_twips("height", "trrh")
        self.translate("heading", "trhdr")
        right_edge = 0.0
        for cell in cells:
            cell_renderer = CellRenderer(cell, self._doc_renderer)
            right_edge += cell_renderer.width.point
            cell_renderer.render_format(Unit(right_edge))
        for cell in cells:
            CellRenderer(cell, self._doc_renderer).render()
        self._writer.write_control("row")


class CellRenderer(RendererBase):
    """Writes cell formatting (``render_format``) and cell content (``render``)."""

    def __init__(self, cell: Cell, doc_renderer: "RtfDocumentRenderer") -> None:
        super().__init__(cell, doc_renderer)
        self._cell = cell

    @property
    def width(self) -> Unit:
        return self.get_value_or_default("width", DEFAULT_CELL_WIDTH)

    def render_format(self, right_edge: Unit) -> None:
        self.translate("vertical_alignment", "clvertal")
        for edge, edge_ctrl in _BORDER_EDGES:
            border = self._cell.borders.get(edge)
            if border is not None:
                BorderRenderer(border, self._doc_renderer, edge_ctrl).render()
        self.render_unit("cellx", right_edge)

    def render(self) -> None:
        paragraphs = self._cell.children
        if not paragraphs:
            self._writer.write_control("pard")
            self._writer.write_control("intbl")
            self._writer.write_control("cell")
            return
        last_index = len(paragraphs) - 1
        for index, paragraph in enumerate(paragraphs):
            if not isinstance(paragraph, Paragraph):
                raise TranslationContractError(f"Cells may only contain paragraphs, got {paragraph.kind}")
            ParagraphRenderer(
                paragraph, self._doc_renderer, in_cell=True, closes_cell=index == last_index
            ).render()
