"""Shared value translation used by every element renderer."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Tuple, Type

from rtf_renderer.model.elements import DocumentElement, DocumentObject, Paragraph, Unit
from rtf_renderer.model.errors import TranslationContractError
from rtf_renderer.model.style_model import StyleNames
from rtf_renderer.model.values import (
    ABSENT,
    AttributeValue,
    BooleanValue,
    ColorValue,
    EnumValue,
    IntegerValue,
    LengthValue,
    read_attribute,
    resolve_attribute,
)
from rtf_renderer.renderer.enum_table import get_enum_translation_table, lookup_token
from rtf_renderer.utils.units import RtfUnit, to_rtf_unit, to_twips

if TYPE_CHECKING:
    from rtf_renderer.renderer.document_renderer import RtfDocumentRenderer
    from rtf_renderer.writer.rtf_writer import RtfWriter


def any_assignable_to(collection: Optional[Iterable[object]], kinds: Tuple[Type, ...]) -> bool:
    """Return whether any item of ``collection`` is an instance of one of ``kinds``."""
    if not collection:
        return False
    return any(isinstance(item, kinds) for item in collection)


class RendererBase:
    """Base class for all renderers.

    Subclasses render a single document object through the document renderer's
    writer. ``use_effective_value`` selects whether attributes are read
    directly from the object or after cascading through its base objects.
    """

    def __init__(
        self,
        doc_object: DocumentObject,
        doc_renderer: "RtfDocumentRenderer",
        *,
        use_effective_value: bool = False,
    ) -> None:
        get_enum_translation_table()
        self._doc_object = doc_object
        self._doc_renderer = doc_renderer
        self._writer: "RtfWriter" = doc_renderer.writer
        self._use_effective_value = use_effective_value

    def render(self) -> None:
        raise NotImplementedError

    def get_value_as_intended(self, value_name: str) -> AttributeValue:
        return resolve_attribute(self._doc_object, value_name, self._use_effective_value)

    def get_value_or_default(self, value_name: str, default: object = None) -> object:
        """Return the raw attribute value, or ``default`` when it is not set."""
        value = read_attribute(self._doc_object, value_name, self._use_effective_value)
        return default if value is None else value

    def translate(
        self,
        value_name: str,
        rtf_ctrl: str,
        unit: RtfUnit = RtfUnit.TWIPS,
        default_value: Optional[str] = None,
        with_star: bool = False,
    ) -> None:
        """Write ``rtf_ctrl`` for a length, boolean, color, enum or integer attribute.

        An unset attribute writes ``default_value`` verbatim, or nothing when
        no default is given. A false boolean writes nothing; use
        :meth:`translate_bool` where the false case needs its own control word.
        """
        value = self.get_value_as_intended(value_name)
        if value is ABSENT:
            if default_value is not None:
                self._writer.write_control(rtf_ctrl, default_value)
            return
        if isinstance(value, LengthValue):
            self._writer.write_control(rtf_ctrl, to_rtf_unit(value.unit, unit), with_star)
        elif isinstance(value, BooleanValue):
            if value.value:
                self._writer.write_control(rtf_ctrl, None, with_star)
        elif isinstance(value, ColorValue):
            index = self._doc_renderer.get_color_index(value.color)
            self._writer.write_control(rtf_ctrl, index, with_star)
        elif isinstance(value, EnumValue):
            self._writer.write_control(rtf_ctrl, str(lookup_token(value.member)), with_star)
        elif isinstance(value, IntegerValue):
            self._writer.write_control(rtf_ctrl, value.value, with_star)
        else:
            raise TranslationContractError(f"Invalid use of translate for {value_name!r}: {value!r}")

    def translate_unit(
        self,
        value_name: str,
        rtf_ctrl: str,
        unit: RtfUnit,
        default_length: Unit,
        with_star: bool = False,
    ) -> None:
        """Like :meth:`translate`, with a length default written in twips."""
        self.translate(value_name, rtf_ctrl, unit, str(to_twips(default_length)), with_star)

    def translate_twips(self, value_name: str, rtf_ctrl: str) -> None:
        self.translate(value_name, rtf_ctrl, RtfUnit.TWIPS, None, False)

    def translate_bool(
        self,
        value_name: str,
        rtf_true_ctrl: str,
        rtf_false_ctrl: Optional[str],
        with_star: bool = False,
    ) -> None:
        """Write one of two control words for a boolean attribute."""
        value = self.get_value_as_intended(value_name)
        if value is ABSENT:
            return
        if not isinstance(value, BooleanValue):
            raise TranslationContractError(f"{value_name!r} is not a boolean attribute: {value!r}")
        if value.value:
            self._writer.write_control(rtf_true_ctrl, None, with_star)
        elif rtf_false_ctrl is not None:
            self._writer.write_control(rtf_false_ctrl, None, with_star)

    def render_unit(
        self, rtf_ctrl: str, value: Unit, unit: RtfUnit = RtfUnit.TWIPS, with_star: bool = False
    ) -> None:
        self._writer.write_control(rtf_ctrl, to_rtf_unit(value, unit), with_star)

    def render_trailing_paragraph(self, elements: Optional[Sequence[DocumentElement]]) -> None:
        """Close ``elements`` with a Normal paragraph unless they end with a paragraph.

        RTF readers reject output that does not end on a paragraph.
        """
        if elements and isinstance(elements[-1], Paragraph):
            return
        from rtf_renderer.renderer.paragraph_format_renderer import ParagraphFormatRenderer

        self._writer.write_control("pard")
        self._writer.write_control("s", self._doc_renderer.get_style_index(StyleNames.NORMAL))
        normal = self._doc_renderer.document.styles[StyleNames.NORMAL]
        ParagraphFormatRenderer(normal.paragraph_format, self._doc_renderer).render()
        self._writer.write_control("par")
