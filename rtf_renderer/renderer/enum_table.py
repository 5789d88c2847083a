"""Translation of document model enumerations to RTF tokens."""
from __future__ import annotations

import threading
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Union

from rtf_renderer.model.enums import (
    BorderStyle,
    BreakType,
    DashStyle,
    FootnoteLocation,
    FootnoteNumberingRule,
    FootnoteNumberStyle,
    LineSpacingRule,
    LineStyle,
    ListType,
    OutlineLevel,
    ParagraphAlignment,
    RelativeHorizontal,
    RelativeVertical,
    RowAlignment,
    TabAlignment,
    TabLeader,
    TextOrientation,
    Underline,
    VerticalAlignment,
    WrapStyle,
)
from rtf_renderer.model.errors import TranslationContractError
from rtf_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

Token = Union[str, int]

# Members expressed by leaving the control word away; they never reach a lookup.
RENDERED_BY_OMISSION: FrozenSet[Enum] = frozenset(
    {OutlineLevel.BODY_TEXT, BorderStyle.NONE, TabLeader.SPACES}
)

_table: Optional[Mapping[Enum, Token]] = None
_table_lock = threading.Lock()


def _build_table() -> Dict[Enum, Token]:
    table: Dict[Enum, Token] = {
        ParagraphAlignment.LEFT: "l",
        ParagraphAlignment.RIGHT: "r",
        ParagraphAlignment.CENTER: "c",
        ParagraphAlignment.JUSTIFY: "j",
        LineSpacingRule.AT_LEAST: 0,
        LineSpacingRule.EXACTLY: 0,
        LineSpacingRule.DOUBLE: 1,
        LineSpacingRule.ONE_PT_FIVE: 1,
        LineSpacingRule.MULTIPLE: 1,
        LineSpacingRule.SINGLE: 1,
        Underline.DASH: "dash",
        Underline.DOT_DASH: "dashd",
        Underline.DOT_DOT_DASH: "dashdd",
        Underline.DOTTED: "d",
        Underline.NONE: "none",
        Underline.SINGLE: "",
        Underline.WORDS: "w",
        BorderStyle.DASH_DOT: "dashd",
        BorderStyle.DASH_DOT_DOT: "dashdd",
        BorderStyle.DASH_LARGE_GAP: "dash",
        BorderStyle.DASH_SMALL_GAP: "dashsm",
        BorderStyle.DOT: "dot",
        BorderStyle.SINGLE: "s",
        TabLeader.DASHES: "hyph",
        TabLeader.DOTS: "dot",
        TabLeader.HEAVY: "th",
        TabLeader.LINES: "ul",
        TabLeader.MIDDLE_DOT: "mdot",
        TabAlignment.CENTER: "c",
        TabAlignment.DECIMAL: "dec",
        TabAlignment.RIGHT: "r",
        TabAlignment.LEFT: "l",
        FootnoteNumberStyle.ARABIC: "ar",
        FootnoteNumberStyle.LOWERCASE_LETTER: "alc",
        FootnoteNumberStyle.LOWERCASE_ROMAN: "rlc",
        FootnoteNumberStyle.UPPERCASE_LETTER: "auc",
        FootnoteNumberStyle.UPPERCASE_ROMAN: "ruc",
        FootnoteNumberingRule.RESTART_CONTINUOUS: "rstcont",
        FootnoteNumberingRule.RESTART_PAGE: "rstpg",
        FootnoteNumberingRule.RESTART_SECTION: "restart",
        FootnoteLocation.BENEATH_TEXT: "tj",
        FootnoteLocation.BOTTOM_OF_PAGE: "bj",
        BreakType.BREAK_EVEN_PAGE: "even",
        BreakType.BREAK_ODD_PAGE: "odd",
        BreakType.BREAK_NEXT_PAGE: "page",
        ListType.BULLET_LIST1: 23,
        ListType.BULLET_LIST2: 23,
        ListType.BULLET_LIST3: 23,
        ListType.NUMBER_LIST1: 0,
        ListType.NUMBER_LIST2: 0,
        ListType.NUMBER_LIST3: 4,
        RowAlignment.CENTER: "c",
        RowAlignment.LEFT: "l",
        RowAlignment.RIGHT: "r",
        VerticalAlignment.TOP: "t",
        VerticalAlignment.CENTER: "c",
        VerticalAlignment.BOTTOM: "b",
        RelativeHorizontal.CHARACTER: "margin",
        RelativeHorizontal.COLUMN: "margin",
        RelativeHorizontal.MARGIN: "margin",
        RelativeHorizontal.PAGE: "page",
        RelativeVertical.LINE: "para",
        RelativeVertical.MARGIN: "margin",
        RelativeVertical.PAGE: "page",
        RelativeVertical.PARAGRAPH: "para",
        WrapStyle.NONE: 3,
        # Word reads "through" (RTF 5) differently, so it shares the "none" token.
        WrapStyle.THROUGH: 3,
        WrapStyle.TOP_BOTTOM: 1,
        LineStyle.SINGLE: 0,
        DashStyle.SOLID: 0,
        DashStyle.DASH: 1,
        DashStyle.SQUARE_DOT: 2,
        DashStyle.DASH_DOT: 3,
        DashStyle.DASH_DOT_DOT: 4,
        TextOrientation.DOWNWARD: 3,
        TextOrientation.HORIZONTAL: 0,
        TextOrientation.HORIZONTAL_ROTATED_FAR_EAST: 0,
        TextOrientation.UPWARD: 2,
        TextOrientation.VERTICAL: 3,
        TextOrientation.VERTICAL_FAR_EAST: 3,
    }
    for index, level in enumerate(
        (
            OutlineLevel.LEVEL1,
            OutlineLevel.LEVEL2,
            OutlineLevel.LEVEL3,
            OutlineLevel.LEVEL4,
            OutlineLevel.LEVEL5,
            OutlineLevel.LEVEL6,
            OutlineLevel.LEVEL7,
            OutlineLevel.LEVEL8,
            OutlineLevel.LEVEL9,
        )
    ):
        table[level] = index
    return table


def get_enum_translation_table() -> Mapping[Enum, Token]:
    """Return the process-wide translation table, building it on first use."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                built = _build_table()
                LOGGER.debug("Built enum translation table with %d entries", len(built))
                _table = MappingProxyType(built)
    return _table


def lookup_token(value: Enum) -> Token:
    """Return the RTF token for ``value``.

    Raises:
        TranslationContractError: if the member has no translation entry.
    """
    try:
        return get_enum_translation_table()[value]
    except KeyError:
        raise TranslationContractError(f"No RTF translation for {value!r}") from None
