"""Enumerations used by formatting attributes of the document model."""
from __future__ import annotations

from enum import Enum, auto


class ParagraphAlignment(Enum):
    """Horizontal alignment of paragraph text."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()
    JUSTIFY = auto()


class LineSpacingRule(Enum):
    """How the line spacing value of a paragraph is interpreted."""

    SINGLE = auto()
    ONE_PT_FIVE = auto()
    DOUBLE = auto()
    AT_LEAST = auto()
    EXACTLY = auto()
    MULTIPLE = auto()


class OutlineLevel(Enum):
    """Outline level of a paragraph; body text has none."""

    BODY_TEXT = auto()
    LEVEL1 = auto()
    LEVEL2 = auto()
    LEVEL3 = auto()
    LEVEL4 = auto()
    LEVEL5 = auto()
    LEVEL6 = auto()
    LEVEL7 = auto()
    LEVEL8 = auto()
    LEVEL9 = auto()


class Underline(Enum):
    """Underline kind of a run of text."""

    NONE = auto()
    SINGLE = auto()
    WORDS = auto()
    DOTTED = auto()
    DASH = auto()
    DOT_DASH = auto()
    DOT_DOT_DASH = auto()


class BorderStyle(Enum):
    """Line style of a border."""

    NONE = auto()
    SINGLE = auto()
    DOT = auto()
    DASH_SMALL_GAP = auto()
    DASH_LARGE_GAP = auto()
    DASH_DOT = auto()
    DASH_DOT_DOT = auto()


class TabLeader(Enum):
    """Character that fills the space before a tab stop."""

    SPACES = auto()
    DOTS = auto()
    DASHES = auto()
    LINES = auto()
    HEAVY = auto()
    MIDDLE_DOT = auto()


class TabAlignment(Enum):
    """Alignment of text at a tab stop."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()
    DECIMAL = auto()


class FootnoteNumberStyle(Enum):
    """Number format of footnote references."""

    ARABIC = auto()
    LOWERCASE_LETTER = auto()
    UPPERCASE_LETTER = auto()
    LOWERCASE_ROMAN = auto()
    UPPERCASE_ROMAN = auto()


class FootnoteNumberingRule(Enum):
    """When footnote numbering restarts."""

    RESTART_CONTINUOUS = auto()
    RESTART_SECTION = auto()
    RESTART_PAGE = auto()


class FootnoteLocation(Enum):
    """Where footnotes are placed."""

    BOTTOM_OF_PAGE = auto()
    BENEATH_TEXT = auto()


class BreakType(Enum):
    """Where a section starts relative to the previous one."""

    BREAK_NEXT_PAGE = auto()
    BREAK_EVEN_PAGE = auto()
    BREAK_ODD_PAGE = auto()


class ListType(Enum):
    """Bullet or numbering kind of a list paragraph."""

    BULLET_LIST1 = auto()
    BULLET_LIST2 = auto()
    BULLET_LIST3 = auto()
    NUMBER_LIST1 = auto()
    NUMBER_LIST2 = auto()
    NUMBER_LIST3 = auto()


class RowAlignment(Enum):
    """Horizontal alignment of a table row."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class VerticalAlignment(Enum):
    """Vertical alignment of cell content."""

    TOP = auto()
    CENTER = auto()
    BOTTOM = auto()


class RelativeHorizontal(Enum):
    """Reference frame for the horizontal position of a shape."""

    CHARACTER = auto()
    COLUMN = auto()
    MARGIN = auto()
    PAGE = auto()


class RelativeVertical(Enum):
    """Reference frame for the vertical position of a shape."""

    LINE = auto()
    PARAGRAPH = auto()
    MARGIN = auto()
    PAGE = auto()


class WrapStyle(Enum):
    """How text wraps around a shape."""

    TOP_BOTTOM = auto()
    NONE = auto()
    THROUGH = auto()


class LineStyle(Enum):
    """Compound line style of a shape outline."""

    SINGLE = auto()


class DashStyle(Enum):
    """Dash pattern of a shape outline."""

    SOLID = auto()
    DASH = auto()
    SQUARE_DOT = auto()
    DASH_DOT = auto()
    DASH_DOT_DOT = auto()


class TextOrientation(Enum):
    """Direction of text flow inside a shape."""

    HORIZONTAL = auto()
    HORIZONTAL_ROTATED_FAR_EAST = auto()
    UPWARD = auto()
    VERTICAL = auto()
    VERTICAL_FAR_EAST = auto()
    DOWNWARD = auto()
