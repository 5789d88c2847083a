"""Render paragraph formatting and tab stops as RTF control words."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rtf_renderer.model.elements import ParagraphFormat, TabStop, Unit
from rtf_renderer.model.enums import LineSpacingRule, OutlineLevel, TabAlignment
from rtf_renderer.model.values import ABSENT, EnumValue
from rtf_renderer.renderer.base import RendererBase
from rtf_renderer.renderer.enum_table import RENDERED_BY_OMISSION

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer

SINGLE_LINE_TWIPS = 240

_FIXED_LINE_SPACING = {
    LineSpacingRule.SINGLE: SINGLE_LINE_TWIPS,
    LineSpacingRule.ONE_PT_FIVE: SINGLE_LINE_TWIPS * 3 // 2,
    LineSpacingRule.DOUBLE: SINGLE_LINE_TWIPS * 2,
}


class ParagraphFormatRenderer(RendererBase):
    """Writes the control words of a :class:`ParagraphFormat`."""

    def __init__(
        self,
        paragraph_format: ParagraphFormat,
        doc_renderer: "RtfDocumentRenderer",
        *,
        use_effective_value: bool = False,
        allow_exact_line_spacing: bool = True,
    ) -> None:
        super().__init__(paragraph_format, doc_renderer, use_effective_value=use_effective_value)
        self._format = paragraph_format
        self._allow_exact_line_spacing = allow_exact_line_spacing

    def render(self) -> None:
        self.translate("alignment", "q")
        self.translate_twips("left_indent", "li")
        self.translate_twips("right_indent", "ri")
        self.translate_twips("first_line_indent", "fi")
        self.translate_twips("space_before", "sb")
        self.translate_twips("space_after", "sa")
        self.translate("keep_together", "keep")
        self.translate("keep_with_next", "keepn")
        self.translate_bool("widow_control", "widctlpar", "nowidctlpar")
        self.translate("page_break_before", "pagebb")
        self._render_outline_level()
        self._render_line_spacing()
        self._render_list_info()
        for tab_stop in self._format.tab_stops:
            TabStopRenderer(tab_stop, self._doc_renderer, use_effective_value=self._use_effective_value).render()

    def _render_outline_level(self) -> None:
        # Body text is the reader's default and has no control word.
        value = self.get_value_as_intended("outline_level")
        if isinstance(value, EnumValue) and value.member is not OutlineLevel.BODY_TEXT:
            self.translate("outline_level", "outlinelevel")

    def _render_line_spacing(self) -> None:
        rule = self.get_value_or_default("line_spacing_rule")
        if rule is None:
            return
        spacing = self.get_value_or_default("line_spacing")
        if rule in _FIXED_LINE_SPACING:
            self._writer.write_control("sl", _FIXED_LINE_SPACING[rule])
        elif rule is LineSpacingRule.MULTIPLE:
            multiplier = spacing if isinstance(spacing, (int, float)) and not isinstance(spacing, bool) else 1.0
            self._writer.write_control("sl", int(round(SINGLE_LINE_TWIPS * multiplier)))
        elif not isinstance(spacing, Unit):
            # At-least and exact spacing are meaningless without a height.
            return
        elif rule is LineSpacingRule.AT_LEAST:
            self.render_unit("sl", spacing)
        elif rule is LineSpacingRule.EXACTLY:
            if not self._allow_exact_line_spacing:
                return
            # A negative value marks the spacing as exact.
            self.render_unit("sl", -spacing)
        self.translate("line_spacing_rule", "slmult")

    def _render_list_info(self) -> None:
        if self.get_value_as_intended("list_type") is ABSENT:
            return
        self._writer.start_content()
        self._writer.write_control("listlevel", None, True)
        self.translate("list_type", "levelnfc")
        self.translate("list_start", "levelstartat")
        self._writer.end_content()


class TabStopRenderer(RendererBase):
    """Writes one tab stop; left alignment and space leaders are implicit."""

    def __init__(
        self, tab_stop: TabStop, doc_renderer: "RtfDocumentRenderer", *, use_effective_value: bool = False
    ) -> None:
        super().__init__(tab_stop, doc_renderer, use_effective_value=use_effective_value)

    def render(self) -> None:
        alignment = self.get_value_as_intended("alignment")
        if isinstance(alignment, EnumValue) and alignment.member is not TabAlignment.LEFT:
            self.translate("alignment", "tq")
        leader = self.get_value_as_intended("leader")
        if isinstance(leader, EnumValue) and leader.member not in RENDERED_BY_OMISSION:
            self.translate("leader", "tl")
        self.translate_twips("position", "tx")
